"""Interactive list engine using Rich.Live.

This module provides InteractiveList, the shared render/dispatch loop
behind every list in the application. Subclasses supply the per-item
rendering, the help and summary lines, a key handler table and what
confirming means; cursor movement, scrolling, the flat/grouped views,
inline editing and terminal handling live here.

Example:
    class Picker(InteractiveList):
        supports_grouping = True

        def _bind_keys(self):
            return {" ": self.toggle_current}

        ...

    outcome = Picker(items).run()
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from .components import ListItem, MutationStore
from .editor import begin_edit, handle_edit_key
from .grouping import ROW_GROUP_HEADER, Projection, Row, ViewMode, project
from .keys import is_down, is_enter, is_escape, is_tab, is_up
from .outcomes import (
    Browsing,
    Cancelled,
    DispatchState,
    Editing,
    Outcome,
    TerminalUnavailable,
)
from .terminal import hidden_cursor, stdin_is_interactive
from .themes import DEFAULT_THEME, Theme
from .viewport import clamp_offset, reposition, viewport_height, visible_range

logger = logging.getLogger(__name__)

NOT_A_TERMINAL = "Interactive mode requires a terminal."

KeyHandler = Callable[[], "Outcome | None"]


class InteractiveList:
    """Scrollable, keyboard-driven list with a single confirmation point.

    State is split in two: ``items`` is the immutable payload sequence
    (an item's identity is its index), while ``store`` holds the mutable
    per-item overlay. The cursor is always an original item index; the
    scroll offset is in render-row coordinates of the current view.

    Keyboard controls shared by all lists:
        - Up/Down or k/j: Move the cursor (clamped, no wraparound)
        - Tab: Switch between flat and grouped view (if supported)
        - Enter: Confirm
        - Esc / Ctrl+C: Cancel

    Args:
        items: Items to display, at least one.
        console: Rich Console for output (auto-created if not provided).
        theme: Optional Theme for customizing appearance.

    Raises:
        ValueError: If items is empty.
    """

    supports_grouping: bool = False
    default_tag: Any = None

    def __init__(
        self,
        items: Sequence[ListItem],
        console: Console | None = None,
        theme: Theme | None = None,
    ):
        if not items:
            raise ValueError("List must have at least one item")

        self.items = tuple(items)
        self.console = console or Console(highlight=False)
        self.theme = theme or DEFAULT_THEME
        self.cursor = 0
        self.offset = 0
        self.view_mode = ViewMode.FLAT
        self.state: DispatchState = Browsing()
        self.store = MutationStore(self.items, default_tag=self.default_tag)
        self._projections: dict[ViewMode, Projection] = {}
        self.key_handlers: dict[str, KeyHandler] = self._bind_keys()

    # -- subclass hooks --------------------------------------------------

    def _bind_keys(self) -> dict[str, KeyHandler]:
        """Return the instance-specific key table (key -> handler)."""
        return {}

    def help_line(self) -> str:
        raise NotImplementedError

    def render_item(self, row: Row, is_cursor: bool) -> str:
        """Render one item row as Rich markup."""
        raise NotImplementedError

    def summary_line(self) -> str:
        return ""

    def confirm(self) -> Outcome:
        raise NotImplementedError

    def cancel(self) -> Outcome:
        return Cancelled()

    # -- state -----------------------------------------------------------

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def projection(self) -> Projection:
        """Projection for the current view mode, built once per mode."""
        if self.view_mode not in self._projections:
            self._projections[self.view_mode] = project(self.items, self.view_mode)
        return self._projections[self.view_mode]

    @property
    def is_editing(self) -> bool:
        return isinstance(self.state, Editing)

    def cursor_row(self) -> int:
        """Render position of the cursor item in the current view."""
        return self.projection.position_of(self.cursor)

    def viewport_rows(self) -> int:
        return viewport_height(
            self.console.height, self.theme.chrome_rows, self.theme.min_visible_rows
        )

    def _scroll_to_cursor(self) -> None:
        height = self.viewport_rows()
        total_rows = len(self.projection)
        offset = reposition(self.cursor_row(), self.offset, height, total_rows)
        self.offset = clamp_offset(offset, height, total_rows)

    # -- operations ------------------------------------------------------

    def move(self, delta: int) -> None:
        """Move the cursor ``delta`` items in on-screen order, clamped at both ends."""
        order = self.projection.leaf_order
        rank = order.index(self.cursor) + delta
        rank = max(0, min(rank, len(order) - 1))
        self.cursor = order[rank]
        self._scroll_to_cursor()

    def toggle_view_mode(self) -> None:
        """Switch flat <-> grouped and re-anchor the viewport on the cursor."""
        if not self.supports_grouping:
            return
        self.view_mode = self.view_mode.toggled()
        # Row positions differ between views: derive the offset from scratch
        self.offset = 0
        self._scroll_to_cursor()

    def start_editing(self) -> bool:
        """Open the inline editor on the cursor item if it is editable."""
        if not self.items[self.cursor].is_edit_eligible():
            return False
        self.state = begin_edit(self.cursor, self.store.effective_text(self.cursor))
        return True

    def handle_key(self, key: str) -> Outcome | None:
        """Dispatch one key press. Returns an outcome when the session ends."""
        state = self.state
        if isinstance(state, Editing):
            result = handle_edit_key(state, key)
            if result.committed is not None:
                self.store.commit_text(state.index, result.committed)
            self.state = result.state
            return None

        if is_up(key):
            self.move(-1)
        elif is_down(key):
            self.move(+1)
        elif is_tab(key):
            self.toggle_view_mode()
        elif is_enter(key):
            return self.confirm()
        elif is_escape(key):
            return self.cancel()
        else:
            handler = self.key_handlers.get(key)
            if handler is not None:
                return handler()
        return None

    def _handle_interrupt(self) -> Outcome | None:
        """Ctrl+C leaves the editor if it is open, otherwise cancels."""
        if self.is_editing:
            self.state = Browsing()
            return None
        return self.cancel()

    # -- rendering -------------------------------------------------------

    def render_group_header(self, row: Row) -> str:
        color = self.theme.group_color
        indent = " " * (row.indent * self.theme.indent_width)
        return f"[{color}]{indent}{escape(row.label)}[/{color}]"

    def render(self) -> Text:
        """Render help line, visible rows and summary as one Text block."""
        theme = self.theme
        dim = theme.dim_color
        projection = self.projection
        height = self.viewport_rows()
        total_rows = len(projection)

        offset = reposition(self.cursor_row(), self.offset, height, total_rows)
        # Terminal may have grown since the last key
        self.offset = clamp_offset(offset, height, total_rows)
        start, end = visible_range(self.offset, height, total_rows)

        lines = [self.help_line(), ""]
        if start > 0:
            lines.append(f"[{dim}]  {theme.scroll_up_icon} {start} more above[/{dim}]")

        for pos in range(start, end):
            row = projection.rows[pos]
            if row.kind == ROW_GROUP_HEADER:
                lines.append(self.render_group_header(row))
            else:
                lines.append(self.render_item(row, row.index == self.cursor))

        remaining = total_rows - end
        if remaining > 0:
            lines.append(f"[{dim}]  {theme.scroll_down_icon} {remaining} more below[/{dim}]")

        lines.append("")
        lines.append(self.summary_line())
        return Text.from_markup("\n".join(lines))

    # -- loop ------------------------------------------------------------

    def run(self) -> Outcome:
        """Display the list and block until the session ends.

        Returns:
            The session outcome. ``TerminalUnavailable`` is returned
            without drawing anything when stdin is not a terminal.
        """
        if not stdin_is_interactive():
            logger.debug("stdin is not a terminal, not starting %s", type(self).__name__)
            return TerminalUnavailable(NOT_A_TERMINAL)

        logger.debug("Starting %s with %d items", type(self).__name__, self.total)
        outcome: Outcome | None = None

        with hidden_cursor(self.console):
            with Live(
                self.render(), console=self.console, auto_refresh=False, transient=True
            ) as live:
                while outcome is None:
                    live.update(self.render(), refresh=True)
                    try:
                        key = readchar.readkey()
                    except (KeyboardInterrupt, EOFError):
                        outcome = self._handle_interrupt()
                        continue
                    outcome = self.handle_key(key)

        logger.debug("%s finished with %s", type(self).__name__, type(outcome).__name__)
        return outcome
