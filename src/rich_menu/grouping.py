"""Flat and grouped projections of a list of items.

A projection is the position-indexed sequence of rows the renderer walks,
plus the mapping between render positions and original item indices.
Group headers are rows too but map to no item and are never selectable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .components import ListItem

ROW_GROUP_HEADER = "group_header"
ROW_ITEM = "item"


class ViewMode(str, Enum):
    """How the item list is laid out."""

    FLAT = "flat"
    GROUPED = "grouped"

    def toggled(self) -> "ViewMode":
        return ViewMode.GROUPED if self == ViewMode.FLAT else ViewMode.FLAT


@dataclass(frozen=True)
class Row:
    """One rendered line of a projection.

    ``index`` is the original item index for item rows and None for headers.
    """

    kind: str
    label: str
    index: int | None = None
    indent: int = 0


@dataclass
class Projection:
    """Render rows plus the render-position <-> item-index mapping."""

    rows: list[Row]
    _positions: dict[int, int] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self):
        self._positions = {
            row.index: pos for pos, row in enumerate(self.rows) if row.index is not None
        }

    def __len__(self) -> int:
        return len(self.rows)

    def position_of(self, index: int) -> int:
        """Render position of the item with original index ``index``."""
        return self._positions[index]

    def index_at(self, position: int) -> int | None:
        """Original item index at render ``position`` (None for headers)."""
        return self.rows[position].index

    @property
    def leaf_order(self) -> list[int]:
        """Item indices in the order they appear on screen."""
        return [row.index for row in self.rows if row.index is not None]


def project_flat(items: Sequence[ListItem]) -> Projection:
    """Identity projection: row ``i`` is item ``i``."""
    return Projection([Row(ROW_ITEM, item.get_display(), i) for i, item in enumerate(items)])


def project_grouped(items: Sequence[ListItem]) -> Projection:
    """Two-level projection: group headers with indented leaves.

    Groups are sorted by key, leaves inside a group by their display
    string. Items without a group key come first, unindented and
    without a header.
    """
    groups: dict[str | None, list[int]] = {}
    for i, item in enumerate(items):
        groups.setdefault(item.get_group_key(), []).append(i)

    rows: list[Row] = []
    for key in sorted(groups, key=lambda k: "" if k is None else k):
        members = sorted(groups[key], key=lambda i: items[i].get_display())
        if key is not None:
            rows.append(Row(ROW_GROUP_HEADER, f"{key}/"))
        indent = 0 if key is None else 1
        for i in members:
            rows.append(Row(ROW_ITEM, items[i].get_leaf_label(), i, indent))

    return Projection(rows)


def project(items: Sequence[ListItem], mode: ViewMode) -> Projection:
    """Build the projection for ``mode``."""
    if mode == ViewMode.GROUPED:
        return project_grouped(items)
    return project_flat(items)
