# tests/test_terminal.py
import curses

import pytest

from cliapp import theme
from cliapp.terminal import MOUSE_EVENTS, TerminalIOError, TerminalSession

SETUP = [
    ("initscr",),
    ("raw",),
    ("noecho",),
    ("curs_set", 0),
    ("mousemask", MOUSE_EVENTS),
]
TEARDOWN = [
    ("mousemask", 0),
    ("curs_set", 1),
    ("noraw",),
    ("echo",),
    ("endwin",),
]


def test_setup_and_teardown_order(fake_curses):
    with TerminalSession() as stdscr:
        assert stdscr is fake_curses.screen
        assert stdscr.keypad_enabled is True
        assert fake_curses.calls == SETUP
    assert fake_curses.calls == SETUP + TEARDOWN
    assert fake_curses.screen.keypad_enabled is False


def test_teardown_runs_when_body_raises(fake_curses):
    with pytest.raises(RuntimeError):
        with TerminalSession():
            raise RuntimeError("loop blew up")
    assert fake_curses.calls[-len(TEARDOWN):] == TEARDOWN


def test_teardown_failure_runs_remaining_steps(fake_curses):
    fake_curses.failures["noraw"] = curses.error("noraw failed")
    with pytest.raises(TerminalIOError) as info:
        with TerminalSession():
            pass
    assert "teardown" in str(info.value)
    assert fake_curses.names()[-1] == "endwin"


def test_teardown_failure_replaces_body_error(fake_curses):
    fake_curses.failures["endwin"] = curses.error("endwin failed")
    with pytest.raises(TerminalIOError) as info:
        with TerminalSession():
            raise TerminalIOError("input read failed")
    assert "endwin failed" in str(info.value)
    assert isinstance(info.value.__context__, TerminalIOError)


def test_partial_setup_is_released(fake_curses):
    fake_curses.failures["mousemask"] = curses.error("no mouse")
    with pytest.raises(TerminalIOError) as info:
        with TerminalSession():
            pytest.fail("body must not run")
    assert "setup failed" in str(info.value)
    # raw mode, cursor and screen are given back; mouse was never enabled
    names = fake_curses.names()
    assert names[names.index("mousemask") + 1:] == ["curs_set", "noraw", "echo", "endwin"]


def test_failed_initscr_releases_nothing(fake_curses):
    fake_curses.failures["initscr"] = curses.error("setupterm failed")
    with pytest.raises(TerminalIOError):
        with TerminalSession():
            pass
    assert fake_curses.names() == ["initscr"]


def test_cursor_not_restored_when_it_could_not_be_hidden(fake_curses, monkeypatch):
    calls = fake_curses.calls

    def curs_set(v):
        calls.append(("curs_set", v))
        raise curses.error("unsupported")

    monkeypatch.setattr(curses, "curs_set", curs_set)
    with TerminalSession():
        pass
    assert [c for c in calls if c[0] == "curs_set"] == [("curs_set", 0)]


def test_theme_released_with_session(fake_curses, monkeypatch):
    monkeypatch.setitem(theme._STYLES, "body", 42)
    with TerminalSession():
        pass
    assert theme.style("body") == curses.A_NORMAL
