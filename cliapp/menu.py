#!/usr/bin/env python3
# File: cliapp/menu.py
# Description: render/input loop + process entry point
#   - run_app(): one frame, one key, repeat until Quit/q
#   - main(): CLI flags, logging, terminal session, error report

from __future__ import annotations

import argparse
import curses
import logging
import os
import sys

from . import __version__
from .state import AppState
from .terminal import TerminalIOError, TerminalSession
from .theme import available_themes
from .view import draw_frame

logger = logging.getLogger(__name__)

ENV_LOG = "CLIAPP_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

KEYS_ENTER = (curses.KEY_ENTER, 10, 13)
KEY_QUIT = ord("q")
# Read and dropped: pointer and resize events never touch state.
KEYS_IGNORED = (curses.KEY_MOUSE, curses.KEY_RESIZE)


# ======================================================================
#  Loop
# ======================================================================

def handle_key(state: AppState, key: int) -> bool:
    """Apply one key press. Returns False when the loop should stop."""
    if key == KEY_QUIT:
        logger.debug("Quit key pressed")
        return False
    if key == curses.KEY_DOWN:
        state.advance_selection()
    elif key == curses.KEY_UP:
        state.retreat_selection()
    elif key in KEYS_ENTER:
        if state.activate():
            logger.debug("Quit entry activated")
            return False
        logger.debug("Activated %s", state.current_entry().label)
    else:
        return True
    logger.debug("State: %r", state)
    return True


def read_key(stdscr) -> int:
    """Block for one input event."""
    try:
        key = stdscr.getch()
    except curses.error as exc:
        raise TerminalIOError(f"input read failed: {exc}") from exc
    if key == curses.ERR:
        raise TerminalIOError("input read failed: getch returned ERR")
    return key


def render(stdscr, state: AppState) -> None:
    try:
        draw_frame(stdscr, state)
    except curses.error as exc:
        raise TerminalIOError(f"render failed: {exc}") from exc


def run_app(stdscr, state: AppState) -> None:
    while True:
        render(stdscr, state)
        key = read_key(stdscr)
        if key in KEYS_IGNORED:
            continue
        if not handle_key(state, key):
            return


# ======================================================================
#  Entry point
# ======================================================================

def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cliapp",
        description="Three-pane terminal menu: ↑/↓ to move, Enter to run, q to quit",
    )
    parser.add_argument(
        "--theme",
        choices=available_themes(),
        default=None,
        help="Color preset (default: $CLIAPP_THEME or classic)",
    )
    parser.add_argument(
        "--log",
        default=os.environ.get(ENV_LOG) or None,
        help="Append debug logs to this file (default: $CLIAPP_LOG, otherwise no log)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def configure_logging(path: str | None) -> None:
    """File logging only: the screen belongs to curses while the app runs."""
    root = logging.getLogger("cliapp")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    if path:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
    else:
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.WARNING)
    root.propagate = False


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.log)
    logger.info("cliapp %s starting", __version__)

    try:
        with TerminalSession(theme=args.theme) as stdscr:
            run_app(stdscr, AppState())
    except TerminalIOError as err:
        logger.error("Terminal failure: %r", err)
        print(repr(err))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    logger.info("cliapp exiting normally")
    return 0


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
