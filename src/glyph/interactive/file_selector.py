"""Multi-select picker for files with unstaged changes.

Space marks files, Enter returns the marked paths in list order, D
discards the file under the cursor straight away, Tab switches between
the flat path list and a per-directory tree.
"""

from __future__ import annotations

from rich.markup import escape

from rich_menu import (
    Cancelled,
    Confirmed,
    InteractiveList,
    Outcome,
    Row,
    SelectionSet,
    SingleItemAction,
)

from ..types import FileChangeKind, FileEntry

KIND_COLORS = {
    FileChangeKind.MODIFIED: "yellow",
    FileChangeKind.ADDED: "green",
    FileChangeKind.DELETED: "red",
    FileChangeKind.RENAMED: "blue",
    FileChangeKind.TYPE_CHANGED: "cyan",
}


def format_kind(kind: FileChangeKind) -> str:
    """Colored one-letter change tag."""
    color = KIND_COLORS.get(kind, "dim")
    return f"[{color}]{kind.letter}[/{color}]"


class FileSelector(InteractiveList):
    """Pick files to stage.

    Outcomes:
        Confirmed(tuple[str, ...]): selected paths, ascending list order.
        SingleItemAction(path, FileChangeKind): discard one file.
        Cancelled(): Esc or Ctrl+C.
    """

    supports_grouping = True

    def __init__(self, files: list[FileEntry], **kwargs):
        super().__init__(files, **kwargs)
        self.selection = SelectionSet(self.total)

    def _bind_keys(self):
        return {
            " ": self._toggle_current,
            "a": self._select_all,
            "A": self._select_all,
            "d": self._discard_current,
            "D": self._discard_current,
        }

    # -- operations ------------------------------------------------------

    def toggle_selection(self, index: int) -> None:
        self.selection.toggle(index)

    def toggle_select_all(self) -> None:
        self.selection.toggle_all()

    def discard_one(self, index: int) -> Outcome:
        """End the session with a discard of ``index``; the selection is left as is."""
        entry = self.items[index]
        return SingleItemAction(entry.path, entry.change_kind)

    def confirm(self) -> Outcome:
        return Confirmed(tuple(self.items[i].path for i in self.selection.ordered()))

    def cancel(self) -> Outcome:
        return Cancelled()

    def _toggle_current(self) -> None:
        self.toggle_selection(self.cursor)

    def _select_all(self) -> None:
        self.toggle_select_all()

    def _discard_current(self) -> Outcome:
        return self.discard_one(self.cursor)

    # -- rendering -------------------------------------------------------

    def help_line(self) -> str:
        hint = self.theme.hint_color
        keys = [
            ("↑↓", "navigate"),
            ("Space", "select"),
            ("A", "all"),
            ("D", "discard"),
            ("Tab", "view"),
            ("Enter", "confirm"),
            ("Esc", "cancel"),
        ]
        return "  ".join(f"[{hint}]{key}[/{hint}] {label}" for key, label in keys)

    def render_item(self, row: Row, is_cursor: bool) -> str:
        theme = self.theme
        entry = self.items[row.index]
        is_selected = row.index in self.selection

        cursor = theme.cursor_icon if is_cursor else " "
        check = f"[{theme.checked_color}]{theme.checked_icon}[/{theme.checked_color}]" if is_selected else " "
        box_color = theme.checked_color if is_selected else "default"
        indent = " " * (row.indent * theme.indent_width)
        style = theme.cursor_style if is_cursor else "default"

        return (
            f"[{style}]{cursor} [{box_color}]\\[{check}][/{box_color}] "
            f"{format_kind(entry.change_kind)} {indent}{escape(row.label)}[/{style}]"
        )

    def summary_line(self) -> str:
        dim = self.theme.dim_color
        return f"[{dim}]{len(self.selection)}/{self.total} selected[/{dim}]"
