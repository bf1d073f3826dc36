#!/usr/bin/env python3
# File: cliapp/theme.py
# Purpose: centralize all *visual* concerns (palette, pair IDs, env-driven knobs)
# SRP Slices:
#   [CONFIG]  Data-only: color names, presets, env knob names (no curses)
#   [ENGINE]  Resolution: env overrides + names → ints (no curses.init_pair here)
#   [PALETTE] Pair Registry: owns curses pair IDs & init_pair mapping
#   [WIRING]  Composition: init_theme() + style() lookups used by the renderers

from __future__ import annotations

import curses
import logging
import os

logger = logging.getLogger(__name__)

# ════════════════════════════════════════════════════════════════════════════
# [CONFIG] Data (no curses, no side-effects)
# ════════════════════════════════════════════════════════════════════════════

# Stable color indices (ncurses 8-color baseline); -1 = terminal default
COLOR_BY_NAME = {
    "default": -1,
    "black":   getattr(curses, "COLOR_BLACK",   0),
    "red":     getattr(curses, "COLOR_RED",     1),
    "green":   getattr(curses, "COLOR_GREEN",   2),
    "yellow":  getattr(curses, "COLOR_YELLOW",  3),
    "blue":    getattr(curses, "COLOR_BLUE",    4),
    "magenta": getattr(curses, "COLOR_MAGENTA", 5),
    "cyan":    getattr(curses, "COLOR_CYAN",    6),
    "white":   getattr(curses, "COLOR_WHITE",   7),
}

# Logical slots
# - border_fg: panel borders (outer frame included)
# - title_fg:  panel titles
# - body_fg:   list rows, description, result, footer text
THEME_PRESETS = {
    # Classic: whatever the terminal already uses
    "classic": {
        "border_fg": "default",
        "title_fg":  "default",
        "body_fg":   "default",
    },
    # Night: cool blues
    "night": {
        "border_fg": "blue",
        "title_fg":  "cyan",
        "body_fg":   "white",
    },
    # Day: warm and bright
    "day": {
        "border_fg": "yellow",
        "title_fg":  "white",
        "body_fg":   "white",
    },
}

DEFAULT_THEME = "classic"

# Box-drawing glyphs
TL, TR, BL, BR = "┌", "┐", "└", "┘"
HOR, VERT = "─", "│"

# Env knob names
ENV_THEME = "CLIAPP_THEME"
ENV_SLOT_PREFIX = "CLIAPP_"

# ════════════════════════════════════════════════════════════════════════════
# [ENGINE] Resolution (env overrides + names → ints), no curses pairs here
# ════════════════════════════════════════════════════════════════════════════

def _color_from_env(name: str, default_idx: int) -> int:
    val = os.environ.get(name, "").strip().lower()
    if not val:
        return default_idx
    return COLOR_BY_NAME.get(val, default_idx)

def available_themes() -> list[str]:
    return sorted(THEME_PRESETS.keys())

def resolve_theme_name(explicit: str | None = None) -> str:
    """
    1) explicit (CLI) name, 2) CLIAPP_THEME, 3) DEFAULT_THEME.
    Unknown names fall through to the next source.
    """
    name = (explicit or "").strip().lower()
    if name in THEME_PRESETS:
        return name
    env_name = os.environ.get(ENV_THEME, "").strip().lower()
    if env_name in THEME_PRESETS:
        return env_name
    if env_name:
        logger.warning("Unknown %s=%r, using %r", ENV_THEME, env_name, DEFAULT_THEME)
    return DEFAULT_THEME

def resolve_palette(theme_name: str) -> dict:
    """Numeric palette for a preset, with per-slot env overrides applied."""
    preset = THEME_PRESETS[theme_name]
    C = {k: COLOR_BY_NAME.get(v, -1) for k, v in preset.items()}
    for slot in C:
        C[slot] = _color_from_env(ENV_SLOT_PREFIX + slot.upper(), C[slot])
    return C

# ════════════════════════════════════════════════════════════════════════════
# [PALETTE] Curses Pair Registry (pair IDs + init table)
# ════════════════════════════════════════════════════════════════════════════

PAIR_BORDER = 1
PAIR_TITLE  = 2
PAIR_BODY   = 3

_SLOT_PAIRS = {
    PAIR_BORDER: "border_fg",
    PAIR_TITLE:  "title_fg",
    PAIR_BODY:   "body_fg",
}

# Attribute per style name. Empty until init_theme() runs, so renderers work
# (attribute 0) without an initialized curses screen.
_STYLES: dict[str, int] = {}

def style(name: str) -> int:
    return _STYLES.get(name, curses.A_NORMAL)

def _register_pairs(C: dict) -> None:
    for pid, slot in _SLOT_PAIRS.items():
        curses.init_pair(pid, C[slot], -1)
    _STYLES["border"] = curses.color_pair(PAIR_BORDER)
    _STYLES["title"]  = curses.color_pair(PAIR_TITLE)
    _STYLES["body"]   = curses.color_pair(PAIR_BODY)

# ════════════════════════════════════════════════════════════════════════════
# [WIRING] Composition (single public entry point)
# ════════════════════════════════════════════════════════════════════════════

def init_theme(theme_name: str | None = None) -> dict:
    """
    Public: initialize curses colors for the selected theme.
    Returns a light context dict: {"name": <theme>, "palette": <numeric palette>}
    NOTE: Must be called after curses.initscr().
    """
    name = resolve_theme_name(theme_name)
    numeric_palette = resolve_palette(name)

    _STYLES.clear()
    if not curses.has_colors():
        logger.info("Terminal has no color support; using attributes only")
        return {"name": name, "palette": numeric_palette}

    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        # Pairs are registered against -1 (default); without it, skip colors.
        logger.info("Terminal cannot use default colors; using attributes only")
        return {"name": name, "palette": numeric_palette}
    _register_pairs(numeric_palette)
    logger.debug("Theme %r initialized: %s", name, numeric_palette)

    return {"name": name, "palette": numeric_palette}

def reset_theme() -> None:
    """Forget registered pairs (after the screen is released)."""
    _STYLES.clear()


__all__ = [
    "THEME_PRESETS", "DEFAULT_THEME", "available_themes",
    "resolve_theme_name", "resolve_palette",
    "init_theme", "reset_theme", "style",
    "TL", "TR", "BL", "BR", "HOR", "VERT",
]
