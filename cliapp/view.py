#!/usr/bin/env python3
# File: cliapp/view.py
# Responsibilities:
#   - Compose/draw one full frame: outer frame → menu column → result column
#   - Regions are recomputed from the current screen size on every frame
# Notes:
#   - Pure rendering: reads AppState, never mutates it.

from __future__ import annotations

import curses
from typing import NamedTuple

from .layout import Rect, draw_block, screen_rect, split_horizontal, split_vertical
from .state import AppState
from .widgets import draw_about_panel, draw_list_panel, draw_paragraph_panel

APP_TITLE = " CLI Application "

# padding | menu | padding | result
COLUMN_PERCENTS = (1, 18, 1, 70)
# item list | description | footer
MENU_PERCENTS = (65, 25, 10)
CONTENT_MARGIN = 1


class FrameRegions(NamedTuple):
    frame: Rect
    menu: Rect
    description: Rect
    footer: Rect
    result: Rect


def compute_regions(area: Rect) -> FrameRegions:
    """Panel rectangles for a screen of the given size."""
    inside_frame = area.inner(1)
    columns = split_horizontal(inside_frame, COLUMN_PERCENTS, margin=CONTENT_MARGIN)
    menu_col, result_col = columns[1], columns[3]
    menu, description, footer = split_vertical(menu_col, MENU_PERCENTS)
    return FrameRegions(area, menu, description, footer, result_col)


def draw_frame(stdscr, state: AppState) -> None:
    """Draw the whole screen for state and push it to the terminal."""
    stdscr.erase()
    regions = compute_regions(screen_rect(stdscr))

    draw_block(stdscr, regions.frame, APP_TITLE, curses.A_BOLD)
    draw_list_panel(
        stdscr,
        regions.menu,
        " Menu ",
        [entry.label for entry in state.items],
        state.selected,
    )
    draw_paragraph_panel(stdscr, regions.description, " Description ", state.description)
    draw_about_panel(stdscr, regions.footer)
    draw_paragraph_panel(stdscr, regions.result, " Result ", state.result)

    stdscr.refresh()


__all__ = [
    "APP_TITLE",
    "FrameRegions",
    "compute_regions",
    "draw_frame",
]
