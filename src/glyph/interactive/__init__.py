"""Interactive lists for glyph.

Two instances of the shared rich_menu engine:
- FileSelector: pick unstaged files to stage (or discard one)
- RebaseEditor: choose per-commit actions and retitle commits
"""

from __future__ import annotations

from .file_selector import FileSelector
from .rebase_editor import RebaseEditor, has_changes, to_directives

__all__ = ["FileSelector", "RebaseEditor", "has_changes", "to_directives"]
