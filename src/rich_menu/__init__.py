"""Rich.Live-based interactive list engine.

A reusable engine for flicker-free, keyboard-driven terminal lists with a
cursor, optional grouped view, per-item mutable metadata, inline text
editing and a single confirmation point.

Example:
    from rich_menu import Confirmed, InteractiveList

    outcome = MyList(items).run()
    if isinstance(outcome, Confirmed):
        ...
"""

from .components import ItemState, ListItem, MutationStore
from .editor import EditResult, begin_edit, handle_edit_key
from .grouping import (
    ROW_GROUP_HEADER,
    ROW_ITEM,
    Projection,
    Row,
    ViewMode,
    project,
    project_flat,
    project_grouped,
)
from .keys import (
    is_backspace,
    is_down,
    is_enter,
    is_escape,
    is_printable,
    is_tab,
    is_up,
)
from .menu import NOT_A_TERMINAL, InteractiveList
from .outcomes import (
    Browsing,
    Cancelled,
    Confirmed,
    Editing,
    Outcome,
    SingleItemAction,
    TerminalUnavailable,
)
from .selection import SelectionSet
from .terminal import hidden_cursor, stdin_is_interactive
from .themes import DEFAULT_THEME, Theme
from .viewport import clamp_offset, reposition, viewport_height, visible_range

__all__ = [
    # Main classes
    "InteractiveList",
    "ListItem",
    "SelectionSet",
    "MutationStore",
    "ItemState",
    "NOT_A_TERMINAL",
    # Outcomes and dispatch states
    "Outcome",
    "Confirmed",
    "Cancelled",
    "SingleItemAction",
    "TerminalUnavailable",
    "Browsing",
    "Editing",
    # Inline editor
    "EditResult",
    "begin_edit",
    "handle_edit_key",
    # Projections
    "ViewMode",
    "Row",
    "Projection",
    "ROW_GROUP_HEADER",
    "ROW_ITEM",
    "project",
    "project_flat",
    "project_grouped",
    # Viewport
    "reposition",
    "clamp_offset",
    "viewport_height",
    "visible_range",
    # Terminal
    "hidden_cursor",
    "stdin_is_interactive",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Key helpers
    "is_enter",
    "is_escape",
    "is_up",
    "is_down",
    "is_tab",
    "is_backspace",
    "is_printable",
]
