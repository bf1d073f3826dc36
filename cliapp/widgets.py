#!/usr/bin/env python3
# File: cliapp/widgets.py
# Purpose: reusable, styled panels (list, paragraph, footer). No screen composition.
# Responsibilities:
#   - Each widget gets an area and draws a bordered panel inside it
#   - Widgets never read AppState directly; view passes plain values in

from __future__ import annotations

import curses
from typing import Sequence

from . import __version__
from .theme import style
from .layout import Rect, draw_block, draw_text_in, wrap_text

# Not every curses build exposes italics.
A_ITALIC = getattr(curses, "A_ITALIC", curses.A_NORMAL)

SELECTED_ATTR = curses.A_BOLD | curses.A_REVERSE

VERSION_TEXT = f"Version {__version__} Jan Rock"


def draw_list_panel(stdscr, area: Rect, title: str, labels: Sequence[str], selected: int) -> None:
    """
    One row per label, indented by a single space. The selected label (not
    the indent) is bold + reverse video.
    """
    inner = draw_block(stdscr, area, title)
    body = style("body")
    for row, label in enumerate(labels):
        if row >= inner.height:
            break
        col = draw_text_in(stdscr, inner, row, 0, " ", body)
        attr = SELECTED_ATTR if row == selected else body
        draw_text_in(stdscr, inner, row, col, label, attr)


def draw_paragraph_panel(stdscr, area: Rect, title: str, text: str) -> None:
    inner = draw_block(stdscr, area, title)
    body = style("body")
    for row, line in enumerate(wrap_text(text, inner.width)[: inner.height]):
        draw_text_in(stdscr, inner, row, 0, line, body)


def draw_about_panel(stdscr, area: Rect, title: str = " About ", text: str = VERSION_TEXT) -> None:
    inner = draw_block(stdscr, area, title)
    body = style("body")
    col = draw_text_in(stdscr, inner, 0, 0, " ", body)
    draw_text_in(stdscr, inner, 0, col, text, body | A_ITALIC)


__all__ = [
    "SELECTED_ATTR",
    "VERSION_TEXT",
    "draw_list_panel",
    "draw_paragraph_panel",
    "draw_about_panel",
]
