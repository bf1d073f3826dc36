#!/usr/bin/env python3
# File: cliapp/layout.py
# Purpose: geometry + drawing primitives (DRAW ONLY, no app state).
# Notes:
#   - Rect/split_* compute regions; nothing here knows about menu entries.
#   - draw_* helpers clip to the region they are given so panels never spill.

from __future__ import annotations

import curses
from typing import NamedTuple, Sequence

from .theme import TL, TR, BL, BR, HOR, VERT, style


# --- Geometry -------------------------------------------------------------

class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int = 1) -> "Rect":
        """Shrink by margin on every side (never below zero size)."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


def _percent_sizes(total: int, percents: Sequence[int]) -> list[int]:
    """
    floor(total * p / 100) per chunk; the last chunk runs to the end of the
    area so the sizes always add up to total.
    """
    total = max(0, total)
    sizes = [total * p // 100 for p in percents[:-1]]
    used = sum(sizes)
    if used > total:
        # Percentages over 100: clamp chunks in order.
        clamped, left = [], total
        for s in sizes:
            s = min(s, left)
            clamped.append(s)
            left -= s
        sizes, used = clamped, total
    sizes.append(total - used)
    return sizes


def split_horizontal(area: Rect, percents: Sequence[int], margin: int = 0) -> list[Rect]:
    """Columns, left to right."""
    area = area.inner(margin) if margin else area
    rects, x = [], area.x
    for w in _percent_sizes(area.width, percents):
        rects.append(Rect(x, area.y, w, area.height))
        x += w
    return rects


def split_vertical(area: Rect, percents: Sequence[int], margin: int = 0) -> list[Rect]:
    """Rows, top to bottom."""
    area = area.inner(margin) if margin else area
    rects, y = [], area.y
    for h in _percent_sizes(area.height, percents):
        rects.append(Rect(area.x, y, area.width, h))
        y += h
    return rects


def screen_rect(stdscr) -> Rect:
    h, w = stdscr.getmaxyx()
    return Rect(0, 0, max(0, w), max(0, h))


# --- Low-level drawing ----------------------------------------------------

def safe_addnstr(stdscr, y: int, x: int, text: str, n: int | None = None, attr: int | None = None) -> None:
    """
    Write text clipped to the screen. Writing the bottom-right cell makes
    curses report an error after the character is placed; that one is ignored.
    """
    h, w = stdscr.getmaxyx()
    if y < 0 or x < 0 or y >= h or x >= w or not text:
        return
    n2 = len(text) if n is None else max(0, n)
    n2 = min(n2, w - x)
    if n2 <= 0:
        return
    a = 0 if attr is None else attr
    try:
        stdscr.addnstr(y, x, text, n2, a)
    except curses.error:
        if (y, x + n2) != (h - 1, w):
            raise


def draw_text_in(stdscr, area: Rect, row: int, col: int, text: str, attr: int = 0) -> int:
    """
    Left-aligned draw inside area at (row, col) relative to it, clipped to the
    area's right edge. Returns the column after the written text.
    """
    if area.empty or row < 0 or row >= area.height or col >= area.width:
        return col
    room = area.width - col
    s = (text or "")[:room]
    safe_addnstr(stdscr, area.y + row, area.x + col, s, len(s), attr)
    return col + len(s)


def draw_block(stdscr, area: Rect, title: str = "", attr: int = 0) -> Rect:
    """
    Bordered box with an optional title on the top edge (left-aligned, after
    the corner). Returns the inner area available to the content.
    """
    if area.empty:
        return Rect(area.x, area.y, 0, 0)

    border = style("border") | attr
    x0, y0, x1, y1 = area.x, area.y, area.right - 1, area.bottom - 1
    w = area.width

    if area.height == 1 or w == 1:
        # Degenerate: not enough room for two edges, draw a single rule.
        safe_addnstr(stdscr, y0, x0, HOR * w, w, border)
        return Rect(area.x, area.y, 0, 0)

    safe_addnstr(stdscr, y0, x0, TL + HOR * (w - 2) + TR, w, border)
    for y in range(y0 + 1, y1):
        safe_addnstr(stdscr, y, x0, VERT, 1, border)
        safe_addnstr(stdscr, y, x1, VERT, 1, border)
    safe_addnstr(stdscr, y1, x0, BL + HOR * (w - 2) + BR, w, border)

    if title and w > 2:
        t = title[: w - 2]
        safe_addnstr(stdscr, y0, x0 + 1, t, len(t), style("title") | attr)

    return area.inner(1)


def wrap_text(text: str, width: int) -> list[str]:
    """
    Word-wrap without trimming: leading whitespace of the text is kept, words
    longer than width are broken, explicit newlines start new lines.
    """
    if width <= 0:
        return []
    lines: list[str] = []
    for para in (text or "").split("\n"):
        line = ""
        # Split keeping separators so leading blanks survive.
        tokens = _tokens(para)
        for tok in tokens:
            if len(line) + len(tok) <= width:
                line += tok
                continue
            if tok.isspace():
                # Whitespace at a wrap point is where the break goes.
                if line:
                    lines.append(line)
                line = ""
                continue
            if line:
                lines.append(line)
                line = ""
            while len(tok) > width:
                lines.append(tok[:width])
                tok = tok[width:]
            line = tok
        lines.append(line)
    return lines


def _tokens(s: str) -> list[str]:
    out: list[str] = []
    buf = ""
    for ch in s:
        if buf and (ch.isspace() != buf[-1].isspace()):
            out.append(buf)
            buf = ""
        buf += ch
    if buf:
        out.append(buf)
    return out


__all__ = [
    # geometry
    "Rect", "split_horizontal", "split_vertical", "screen_rect",
    # low-level drawing
    "safe_addnstr", "draw_text_in", "draw_block",
    # text
    "wrap_text",
]
