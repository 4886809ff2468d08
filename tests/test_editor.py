"""Tests for the inline text editor state machine."""

import readchar

from rich_menu import Browsing, Editing, begin_edit, handle_edit_key


def _feed(state, keys):
    committed = None
    for key in keys:
        result = handle_edit_key(state, key)
        state = result.state
        if result.committed is not None:
            committed = result.committed
    return state, committed


def test_begin_edit_seeds_buffer():
    assert begin_edit(2, "wip") == Editing(2, "wip")


def test_typing_appends():
    state, committed = _feed(begin_edit(0, "ab"), "cd")
    assert state == Editing(0, "abcd")
    assert committed is None


def test_enter_commits():
    state, committed = _feed(begin_edit(0, "ab"), ["c", readchar.key.ENTER])
    assert state == Browsing()
    assert committed == "abc"


def test_escape_discards():
    state, committed = _feed(begin_edit(0, "ab"), ["c", "\x1b"])
    assert state == Browsing()
    assert committed is None


def test_backspace_on_empty_buffer_is_noop():
    state = Editing(0, "")
    result = handle_edit_key(state, "\x7f")
    assert result.state == state


def test_backspace_all_then_commit_gives_empty_text():
    keys = ["\x7f"] * 5 + [readchar.key.ENTER]
    state, committed = _feed(begin_edit(0, "wip"), keys)
    assert committed == ""


def test_escape_prefixed_key_cancels():
    state, committed = _feed(begin_edit(0, "ab"), ["c", "\x1bx"])
    assert state == Browsing()
    assert committed is None


def test_non_ascii_spaces_are_typed():
    state, _ = _feed(begin_edit(0, "a"), ["\u00a0", "\u00e9"])
    assert state == Editing(0, "a\u00a0\u00e9")


def test_non_printable_keys_ignored():
    state, _ = _feed(begin_edit(0, "x"), [readchar.key.UP, readchar.key.RIGHT, "\x01"])
    assert state == Editing(0, "x")


def test_list_keys_are_text_while_editing():
    state, _ = _feed(begin_edit(0, ""), "jkd s")
    assert state.buffer == "jkd s"
