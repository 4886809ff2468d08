"""Configurable themes for rich_menu components.

This module provides theming support for list styling. The Theme dataclass
holds all configurable visual elements (colors, icons, layout).
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for list components.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        cursor_style: Style applied to the row under the cursor.
        checked_color: Color for selected items.
        group_color: Color for group header rows.
        dim_color: Color for dimmed/secondary text.
        hint_color: Color for key names in the help line.

        cursor_icon: Character shown next to the cursor row.
        checked_icon: Character inside the checkbox of a selected row.
        edit_caret: Trailing caret shown while editing text inline.
        scroll_up_icon: Character indicating more rows above.
        scroll_down_icon: Character indicating more rows below.

        chrome_rows: Lines reserved for help, spacers, summary and scroll markers.
        min_visible_rows: Viewport floor for tiny terminals.
        indent_width: Spaces per indent level in the grouped view.
    """

    # Colors
    cursor_style: str = "bold"
    checked_color: str = "green"
    group_color: str = "blue"
    dim_color: str = "dim"
    hint_color: str = "dim"

    # Icons
    cursor_icon: str = ">"
    checked_icon: str = "x"
    edit_caret: str = "[blink]|[/blink]"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    chrome_rows: int = 6
    min_visible_rows: int = 5
    indent_width: int = 2


# Default theme used when none is specified
DEFAULT_THEME = Theme()
