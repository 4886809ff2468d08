"""Type definitions for glyph.

Shared enums and dataclasses passed between the git layer, the
interactive lists and the CLI.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum

from rich_menu import ListItem


class FileChangeKind(str, Enum):
    """Kind of working-tree change for a file."""

    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    TYPE_CHANGED = "type_changed"

    def __str__(self) -> str:
        return self.value

    @property
    def letter(self) -> str:
        """One-letter tag shown in the file list."""
        if self == FileChangeKind.TYPE_CHANGED:
            return "T"
        return self.value[0].upper()


class ActionTag(str, Enum):
    """What to do with a commit when the edit plan is applied."""

    KEEP = "keep"
    REMOVE = "remove"
    MERGE = "merge"  # fold into the previous commit
    RETITLE = "retitle"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileEntry(ListItem):
    """A file with unstaged changes."""

    path: str
    change_kind: FileChangeKind

    def get_display(self) -> str:
        return self.path

    def get_group_key(self) -> str | None:
        return posixpath.dirname(self.path) or None

    def get_leaf_label(self) -> str:
        return posixpath.basename(self.path)


@dataclass(frozen=True)
class CommitEntry(ListItem):
    """A commit on the current branch (subject line only)."""

    short_hash: str
    full_hash: str
    message: str

    def get_display(self) -> str:
        return f"{self.short_hash} {self.message}"

    def get_text(self) -> str:
        return self.message

    def is_edit_eligible(self) -> bool:
        return True


@dataclass(frozen=True)
class RebaseStep:
    """Final per-commit decision produced by the rebase editor.

    Attributes:
        commit: The commit this step applies to.
        tag: Chosen action.
        text: Effective message (edited text, or the original message).
    """

    commit: CommitEntry
    tag: ActionTag
    text: str

    @property
    def is_retitled(self) -> bool:
        """True when the message differs from the original."""
        return self.text != self.commit.message
