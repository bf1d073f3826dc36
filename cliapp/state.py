#!/usr/bin/env python3
# File: cliapp/state.py
# Responsibilities:
#   - Menu entries and their canned description/result payloads
#   - Selection state owned by the render/input loop
# Notes:
#   - No curses here: everything in this module is plain data and arithmetic.

from __future__ import annotations

from enum import Enum
from typing import Sequence


def _item_description(n: int) -> str:
    return f" You have selected Item {n} You have selected Item {n}"


def _item_result(n: int) -> str:
    return (
        f"Result of Item {n}: This is a detailed description of "
        f"what happens when Item {n} is selected."
    )


# ----- Entries -----
class MenuEntry(Enum):
    """One row of the menu. Declaration order is display order."""

    ITEM_1 = ("Item 1", _item_description(1), _item_result(1))
    ITEM_2 = ("Item 2", _item_description(2), _item_result(2))
    ITEM_3 = ("Item 3", _item_description(3), _item_result(3))
    ITEM_4 = ("Item 4", _item_description(4), _item_result(4))
    ITEM_5 = ("Item 5", _item_description(5), _item_result(5))
    QUIT   = ("Quit",   "You have selected Quit", None)

    def __init__(self, label: str, description: str, result: str | None):
        self.label = label
        self.description = description
        self.result = result

    @property
    def is_quit(self) -> bool:
        return self.result is None


DEFAULT_ITEMS: tuple[MenuEntry, ...] = tuple(MenuEntry)


# ----- State -----
class AppState:
    """
    Selection state for one session.

    Attributes:
        items (tuple[MenuEntry, ...]): fixed entry list, never empty.
        selected (int): index into items, always in range.
        description (str): payload of the selected entry.
        result (str): result of the last activated entry ("" until then).
    """

    def __init__(self, items: Sequence[MenuEntry] = DEFAULT_ITEMS) -> None:
        items = tuple(items)
        if not items:
            raise ValueError("AppState needs at least one menu entry.")
        self.items = items
        self.selected = 0
        self.result = ""
        self.description = ""
        self._update_description()

    def current_entry(self) -> MenuEntry:
        return self.items[self.selected]

    def advance_selection(self) -> None:
        self.selected = (self.selected + 1) % len(self.items)
        self._update_description()

    def retreat_selection(self) -> None:
        self.selected = (self.selected - 1 + len(self.items)) % len(self.items)
        self._update_description()

    def activate(self) -> bool:
        """
        Run the selected entry. Returns True when the entry asks the loop to stop
        (Quit); in that case result is left as it was.
        """
        entry = self.current_entry()
        if entry.is_quit:
            return True
        self.result = entry.result
        return False

    def _update_description(self) -> None:
        self.description = self.current_entry().description

    def __repr__(self) -> str:
        return f"AppState(selected={self.selected}, entry={self.current_entry().label!r})"


__all__ = [
    "MenuEntry",
    "DEFAULT_ITEMS",
    "AppState",
]
