# Ensure the project root is on sys.path so tests can import "cliapp" without install.
import curses
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cliapp import theme  # noqa: E402


class FakeScreen:
    """In-memory stand-in for a curses window: a grid of chars + attrs."""

    def __init__(self, height=40, width=120, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.refreshes = 0
        self.keypad_enabled = False
        self.erase()

    def getmaxyx(self):
        return (self.height, self.width)

    def erase(self):
        self.cells = [[" "] * self.width for _ in range(self.height)]
        self.attrs = [[0] * self.width for _ in range(self.height)]

    def addnstr(self, y, x, text, n, attr=0):
        for i, ch in enumerate(text[:n]):
            if x + i < self.width:
                self.cells[y][x + i] = ch
                self.attrs[y][x + i] = attr

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        if not self.keys:
            raise AssertionError("no scripted keys left")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def keypad(self, flag):
        self.keypad_enabled = flag

    # ----- assertions helpers -----
    def row(self, y):
        return "".join(self.cells[y])

    def text(self):
        return "\n".join(self.row(y) for y in range(self.height))

    def find(self, s):
        for y in range(self.height):
            x = self.row(y).find(s)
            if x >= 0:
                return (y, x)
        return None


class CursesRecorder:
    """Records the curses calls a TerminalSession makes."""

    def __init__(self, screen):
        self.screen = screen
        self.calls = []
        self.failures = {}

    def _call(self, name, *args, result=None):
        self.calls.append((name,) + args)
        if name in self.failures:
            raise self.failures[name]
        return result

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture(autouse=True)
def _clean_theme():
    theme.reset_theme()
    yield
    theme.reset_theme()


@pytest.fixture
def make_screen():
    def _make(height=40, width=120, keys=()):
        return FakeScreen(height=height, width=width, keys=keys)
    return _make


@pytest.fixture
def fake_curses(monkeypatch):
    """
    Patch the curses functions TerminalSession touches. Set
    recorder.failures[name] = exc to make a call fail.
    """
    rec = CursesRecorder(FakeScreen())

    monkeypatch.setattr(curses, "initscr", lambda: rec._call("initscr", result=rec.screen))
    monkeypatch.setattr(curses, "raw", lambda: rec._call("raw"))
    monkeypatch.setattr(curses, "noraw", lambda: rec._call("noraw"))
    monkeypatch.setattr(curses, "noecho", lambda: rec._call("noecho"))
    monkeypatch.setattr(curses, "echo", lambda: rec._call("echo"))
    monkeypatch.setattr(curses, "curs_set", lambda v: rec._call("curs_set", v, result=1))
    monkeypatch.setattr(curses, "mousemask", lambda m: rec._call("mousemask", m, result=(m, 0)))
    monkeypatch.setattr(curses, "endwin", lambda: rec._call("endwin"))
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    return rec
