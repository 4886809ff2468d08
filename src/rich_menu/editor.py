"""Inline text editing for a single list item.

The editor is a tiny state machine: ``Browsing -> Editing -> Browsing``.
It never mutates items itself; a commit hands the final buffer back to
the caller, a cancel hands back nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from .keys import is_backspace, is_enter, is_escape, is_printable
from .outcomes import Browsing, DispatchState, Editing


@dataclass(frozen=True)
class EditResult:
    """Result of feeding one key to the editor.

    Attributes:
        state: Next dispatch state (still Editing, or Browsing when done).
        committed: Final text when the edit was committed, else None.
    """

    state: DispatchState
    committed: str | None = None


def begin_edit(index: int, current_text: str) -> Editing:
    """Start editing item ``index`` with its current effective text."""
    return Editing(index=index, buffer=current_text)


def handle_edit_key(state: Editing, key: str) -> EditResult:
    """Apply one key press to the edit buffer.

    Enter commits, Escape cancels, Backspace drops the last character.
    Printable characters are appended; everything else is ignored.
    """
    if is_enter(key):
        return EditResult(Browsing(), committed=state.buffer)
    if is_escape(key):
        return EditResult(Browsing())
    if is_backspace(key):
        if state.buffer:
            return EditResult(Editing(state.index, state.buffer[:-1]))
        return EditResult(state)
    if is_printable(key):
        return EditResult(Editing(state.index, state.buffer + key))
    return EditResult(state)
