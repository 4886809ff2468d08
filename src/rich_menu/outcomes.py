"""Session outcomes and dispatch states for InteractiveList.

An outcome is produced exactly once, by the key press that ends the
session, and is never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Confirmed:
    """User confirmed; ``payload`` is instance-specific and ordered."""

    payload: Any


@dataclass(frozen=True)
class Cancelled:
    """User cancelled. Callers treat this as a no-op, not an error."""


@dataclass(frozen=True)
class SingleItemAction:
    """Immediate action on one item, bypassing the selection."""

    payload: Any
    kind: Any


@dataclass(frozen=True)
class TerminalUnavailable:
    """The session could not start because input is not a terminal."""

    message: str


Outcome = Union[Confirmed, Cancelled, SingleItemAction, TerminalUnavailable]


@dataclass(frozen=True)
class Browsing:
    """Dispatch state: list navigation owns the keyboard."""


@dataclass(frozen=True)
class Editing:
    """Dispatch state: the inline editor owns the keyboard.

    Attributes:
        index: Original index of the item being edited.
        buffer: Text typed so far.
    """

    index: int
    buffer: str


DispatchState = Union[Browsing, Editing]
