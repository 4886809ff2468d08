"""Keyboard input helpers for rich_menu.

This module provides helper functions for detecting key presses,
replacing repeated inline conditionals with readable function calls.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations).

    readkey() waits for a second byte after ESC, so a lone Esc followed
    by another key arrives as ``"\\x1b" + key``. Anything that is not a
    CSI/SS3 sequence (``ESC [`` or ``ESC O``) counts as Escape.
    """
    if key in (readchar.key.ESC, "\x1b", "\x1b\x1b"):
        return True
    return len(key) == 2 and key[0] == "\x1b" and key[1] not in "[O"


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_tab(key: str) -> bool:
    """Check if key is Tab."""
    return key in (readchar.key.TAB, "\t")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_printable(key: str) -> bool:
    """Check if key is a single typeable character.

    Anything at or above space counts except DEL, so non-ASCII spaces
    and letters are accepted. Escape sequences are never printable.
    """
    return len(key) == 1 and ord(key) >= 32 and key != "\x7f"
