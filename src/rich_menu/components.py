"""Item building blocks for rich_menu lists.

This module provides the two halves of every list entry:
- ListItem: Base class for the immutable payload a list shows
- ItemState: Mutable per-item overlay (action tag, edited text)
- MutationStore: Index-addressed collection of ItemState overlays

The payload sequence and the overlay are kept apart so the engine can
hand the payloads back untouched while only the overlay changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


class ListItem:
    """Capability interface for anything shown in an InteractiveList.

    Subclasses override the getters they need; the defaults describe a
    plain, non-editable, ungrouped row.
    """

    def get_display(self) -> str:
        """Full display string, also used as the sort key inside a group."""
        raise NotImplementedError

    def get_text(self) -> str:
        """Original editable text (defaults to the display string)."""
        return self.get_display()

    def is_edit_eligible(self) -> bool:
        """Whether the inline editor may be opened on this item."""
        return False

    def get_group_key(self) -> str | None:
        """Key used by the grouped view, or None for a top-level row."""
        return None

    def get_leaf_label(self) -> str:
        """Label shown for this item under its group header."""
        return self.get_display()


@dataclass
class ItemState:
    """Mutable metadata attached to one item.

    Attributes:
        tag: Action tag chosen for the item (engine-specific enum value).
        edited_text: Text committed by the inline editor, None if never edited.
    """

    tag: Any = None
    edited_text: str | None = None


class MutationStore:
    """Per-item mutable fields, addressed by original item index."""

    def __init__(self, items: Sequence[ListItem], default_tag: Any = None):
        self._items = items
        self._states = [ItemState(tag=default_tag) for _ in items]

    def __len__(self) -> int:
        return len(self._states)

    def fields(self, index: int) -> ItemState:
        """Return the mutable overlay of item ``index``."""
        return self._states[index]

    def tag(self, index: int) -> Any:
        return self._states[index].tag

    def set_tag(self, index: int, tag: Any) -> None:
        """Overwrite the tag of item ``index``; out-of-range is a no-op."""
        if 0 <= index < len(self._states):
            self._states[index].tag = tag

    def commit_text(self, index: int, text: str) -> None:
        """Store edited text for item ``index``."""
        if 0 <= index < len(self._states):
            self._states[index].edited_text = text

    def effective_text(self, index: int) -> str:
        """Edited text if one was ever committed, else the original text."""
        edited = self._states[index].edited_text
        if edited is not None:
            return edited
        return self._items[index].get_text()

    def tags(self) -> list[Any]:
        return [state.tag for state in self._states]
