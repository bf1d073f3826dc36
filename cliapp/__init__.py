"""
cliapp package: three-pane terminal menu demo.

Modules:
- menu: render/input loop and process entry point
- state: menu entries and selection state
- terminal: scoped curses session (raw mode, alternate screen, mouse capture)
- view: composes one frame of the three-pane layout
- layout: geometry and drawing primitives (rects, bordered blocks, wrapping)
- theme: color pairs, glyphs, environment-driven style knobs
- widgets: reusable panels (item list, paragraph, about footer)
"""

__version__ = "0.1.0"

__all__ = [
    "menu",
    "state",
    "terminal",
    "view",
    "layout",
    "theme",
    "widgets",
]
