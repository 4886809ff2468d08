"""Tests for terminal scoping helpers."""

import io
import logging

import pytest

from rich_menu import terminal


class _RecordingConsole:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def show_cursor(self, show=True):
        self.calls.append(show)
        if self.fail:
            raise OSError("no tty")


def test_cursor_restored_on_error():
    console = _RecordingConsole()
    with pytest.raises(RuntimeError):
        with terminal.hidden_cursor(console):
            raise RuntimeError("boom")
    assert console.calls == [False, True]


def test_cursor_failures_are_ignored():
    console = _RecordingConsole(fail=True)
    with terminal.hidden_cursor(console):
        pass
    assert console.calls == [False, True]


def test_cursor_failure_logged_at_debug(caplog):
    console = _RecordingConsole(fail=True)
    with caplog.at_level(logging.DEBUG, logger="rich_menu.terminal"):
        with terminal.hidden_cursor(console):
            pass
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Could not hide cursor: no tty", "Could not restore cursor: no tty"]
    assert all(r.args for r in caplog.records)


def test_stdin_not_a_tty(monkeypatch):
    monkeypatch.setattr(terminal.sys, "stdin", io.StringIO(""))
    assert terminal.stdin_is_interactive() is False


def test_stdin_missing(monkeypatch):
    monkeypatch.setattr(terminal.sys, "stdin", None)
    assert terminal.stdin_is_interactive() is False


def test_stdin_closed(monkeypatch):
    stream = io.StringIO("")
    stream.close()
    monkeypatch.setattr(terminal.sys, "stdin", stream)
    assert terminal.stdin_is_interactive() is False
