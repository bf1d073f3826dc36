#!/usr/bin/env python3
# File: cliapp/terminal.py
# Responsibilities:
#   - Own the terminal for the lifetime of the app (one scoped resource)
#   - Translate curses/OS failures into the one error kind the app knows
# Notes:
#   - Acquire: initscr (enters the alternate screen) → raw input → cursor → mouse → theme
#   - Release runs in reverse order on every exit path, each step attempted.

from __future__ import annotations

import curses
import logging

from .theme import init_theme, reset_theme

logger = logging.getLogger(__name__)

MOUSE_EVENTS = curses.ALL_MOUSE_EVENTS | getattr(curses, "REPORT_MOUSE_POSITION", 0)


class TerminalIOError(OSError):
    """Terminal setup, input, render or teardown failed."""


class TerminalSession:
    """
    Context manager around a curses screen.

        with TerminalSession(theme="night") as stdscr:
            run_app(stdscr, AppState())

    Release is unconditional. If a release step fails, the remaining steps
    still run and the last failure is raised as TerminalIOError, replacing any
    error the body raised (that one stays attached as __context__).
    """

    def __init__(self, theme: str | None = None) -> None:
        self.theme = theme
        self.stdscr = None
        self._raw = False
        self._cursor: int | None = None
        self._mouse = False

    # ----- acquire -----
    def __enter__(self):
        try:
            self._acquire()
        except (curses.error, OSError) as exc:
            logger.error("Terminal setup failed: %r", exc)
            try:
                self._release()
            except TerminalIOError as teardown_exc:
                logger.error("Teardown after failed setup also failed: %r", teardown_exc)
            raise TerminalIOError(f"terminal setup failed: {exc}") from exc
        return self.stdscr

    def _acquire(self) -> None:
        self.stdscr = curses.initscr()
        logger.debug("Screen acquired: %s", self.stdscr.getmaxyx())

        curses.raw()
        self._raw = True
        curses.noecho()
        self.stdscr.keypad(True)

        try:
            self._cursor = curses.curs_set(0)
        except curses.error:
            # Terminal cannot hide the cursor; nothing to restore later.
            self._cursor = None

        curses.mousemask(MOUSE_EVENTS)
        self._mouse = True

        init_theme(self.theme)

    # ----- release -----
    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None:
            logger.debug("Releasing terminal after %s", exc_type.__name__)
        self._release()
        return False

    def _release(self) -> None:
        steps = []
        if self._mouse:
            steps.append(("disable mouse capture", lambda: curses.mousemask(0)))
        if self._cursor is not None:
            cursor = self._cursor
            steps.append(("restore cursor", lambda: curses.curs_set(cursor)))
        if self._raw:
            steps.append(("disable raw mode", self._leave_raw))
        if self.stdscr is not None:
            steps.append(("leave alternate screen", curses.endwin))

        last_error: BaseException | None = None
        for name, step in steps:
            try:
                step()
            except (curses.error, OSError) as exc:
                logger.error("Teardown step %r failed: %r", name, exc)
                last_error = exc

        self.stdscr = None
        self._raw = False
        self._cursor = None
        self._mouse = False
        reset_theme()

        if last_error is not None:
            raise TerminalIOError(f"terminal teardown failed: {last_error}") from last_error

    def _leave_raw(self) -> None:
        self.stdscr.keypad(False)
        curses.noraw()
        curses.echo()


__all__ = [
    "TerminalIOError",
    "TerminalSession",
]
