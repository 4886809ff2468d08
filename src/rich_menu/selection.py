"""Selection set for multi-select lists."""

from __future__ import annotations

from typing import Iterator


class SelectionSet:
    """Set of marked item indices, independent of the view mode.

    Every stored index refers to an existing item: toggling an index
    outside ``[0, total)`` is ignored.
    """

    def __init__(self, total: int):
        self.total = total
        self._marked: set[int] = set()

    def __contains__(self, index: object) -> bool:
        return index in self._marked

    def __len__(self) -> int:
        return len(self._marked)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ordered())

    def toggle(self, index: int) -> None:
        """Select ``index``, or deselect it if already selected."""
        if not 0 <= index < self.total:
            return
        if index in self._marked:
            self._marked.discard(index)
        else:
            self._marked.add(index)

    def toggle_all(self) -> None:
        """Clear a full selection, otherwise select everything."""
        if len(self._marked) == self.total:
            self._marked.clear()
        else:
            self._marked = set(range(self.total))

    def is_full(self) -> bool:
        return len(self._marked) == self.total

    def ordered(self) -> list[int]:
        """Selected indices in ascending original order."""
        return sorted(self._marked)
