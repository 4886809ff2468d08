"""Scroll-offset arithmetic for the list viewport.

Pure functions only: callers own the offset and pass it back in.
"""

from __future__ import annotations


def viewport_height(terminal_rows: int, chrome_rows: int, floor: int) -> int:
    """Return the number of list rows that fit on screen.

    The floor keeps the viewport usable on tiny terminals.
    """
    return max(terminal_rows - chrome_rows, floor)


def reposition(cursor: int, offset: int, height: int, total: int) -> int:
    """Return the scroll offset that keeps ``cursor`` inside the viewport.

    Args:
        cursor: Row position of the cursor.
        offset: Current scroll offset.
        height: Number of visible rows (>= 1).
        total: Number of rows in the list.

    Returns:
        New offset satisfying ``offset <= cursor <= offset + height - 1``.
    """
    if cursor < offset:
        return cursor
    if cursor >= offset + height:
        return cursor - height + 1
    return offset


def clamp_offset(offset: int, height: int, total: int) -> int:
    """Pull ``offset`` back so the last page is never partly empty.

    Only lowers the offset, so a cursor that was visible stays visible.
    """
    return max(0, min(offset, max(0, total - height)))


def visible_range(offset: int, height: int, total: int) -> tuple[int, int]:
    """Return the ``[start, end)`` row range shown for ``offset``."""
    return offset, min(offset + height, total)
