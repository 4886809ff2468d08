"""Per-commit action editor for rewriting the current branch.

Each commit carries an action tag (keep, remove, merge into previous,
retitle) and an optional new subject line. Nothing is applied until the
user confirms; the confirmed plan can be rendered as plain directives.
"""

from __future__ import annotations

from collections import Counter

import readchar
from rich.markup import escape

from rich_menu import Cancelled, Confirmed, Editing, InteractiveList, Outcome, Row

from ..types import ActionTag, RebaseStep

TAG_STYLES = {
    ActionTag.KEEP: "green",
    ActionTag.REMOVE: "red",
    ActionTag.MERGE: "blue",
    ActionTag.RETITLE: "cyan",
}

# Retitles are expressed through the text column, so they keep the commit
DIRECTIVE_KEYWORDS = {
    ActionTag.KEEP: "keep",
    ActionTag.REMOVE: "remove",
    ActionTag.MERGE: "merge",
    ActionTag.RETITLE: "keep",
}


def format_tag(tag: ActionTag) -> str:
    """Colored, fixed-width action label."""
    color = TAG_STYLES[tag]
    return f"[{color}]{tag.value:<7}[/{color}]"


def to_directives(steps: tuple[RebaseStep, ...] | list[RebaseStep]) -> str:
    """Render a confirmed plan as ``<keyword> <hash> <text>`` lines.

    Lines follow the original commit order and the result ends with
    exactly one newline.
    """
    lines = [
        f"{DIRECTIVE_KEYWORDS[step.tag]} {step.commit.short_hash} {step.text}"
        for step in steps
    ]
    return "\n".join(lines) + "\n"


def has_changes(steps: tuple[RebaseStep, ...] | list[RebaseStep]) -> bool:
    """True when any step would alter history."""
    return any(step.tag != ActionTag.KEEP or step.is_retitled for step in steps)


class RebaseEditor(InteractiveList):
    """Choose an action for every commit and optionally retitle them.

    Outcomes:
        Confirmed(tuple[RebaseStep, ...]): one step per commit, original order.
        Cancelled(): Esc or Ctrl+C.
    """

    default_tag = ActionTag.KEEP

    def _bind_keys(self):
        table = {
            "p": lambda: self.set_tag(self.cursor, ActionTag.KEEP),
            "d": lambda: self.set_tag(self.cursor, ActionTag.REMOVE),
            "s": lambda: self.set_tag(self.cursor, ActionTag.MERGE),
            "r": lambda: self.set_tag(self.cursor, ActionTag.RETITLE),
        }
        for key in list(table):
            table[key.upper()] = table[key]
        table[readchar.key.RIGHT] = self.edit_current
        return table

    # -- operations ------------------------------------------------------

    def set_tag(self, index: int, tag: ActionTag) -> None:
        """Overwrite the tag of ``index``. The first commit cannot be merged."""
        if tag == ActionTag.MERGE and index == 0:
            return
        self.store.set_tag(index, tag)

    def edit_current(self) -> None:
        """Open the inline editor on the cursor commit and mark it for retitle."""
        self.set_tag(self.cursor, ActionTag.RETITLE)
        self.start_editing()

    def tag_counts(self) -> Counter:
        return Counter(self.store.tags())

    def steps(self) -> tuple[RebaseStep, ...]:
        return tuple(
            RebaseStep(commit, self.store.tag(i), self.store.effective_text(i))
            for i, commit in enumerate(self.items)
        )

    def confirm(self) -> Outcome:
        return Confirmed(self.steps())

    def cancel(self) -> Outcome:
        return Cancelled()

    # -- rendering -------------------------------------------------------

    def help_line(self) -> str:
        hint = self.theme.hint_color
        keys = [
            ("↑↓", "navigate"),
            ("p", "keep"),
            ("d", "remove"),
            ("s", "merge"),
            ("r", "retitle"),
            ("→", "edit msg"),
            ("Enter", "execute"),
            ("Esc", "cancel"),
        ]
        return "  ".join(f"[{hint}]{key}[/{hint}] {label}" for key, label in keys)

    def render_item(self, row: Row, is_cursor: bool) -> str:
        theme = self.theme
        index = row.index
        commit = self.items[index]

        state = self.state
        if isinstance(state, Editing) and state.index == index:
            message = escape(state.buffer) + theme.edit_caret
        else:
            message = escape(self.store.effective_text(index))

        cursor = theme.cursor_icon if is_cursor else " "
        style = theme.cursor_style if is_cursor else "default"
        tag = format_tag(self.store.tag(index))
        return (
            f"[{style}]{cursor} {tag}  [{theme.dim_color}]{escape(commit.short_hash)}"
            f"[/{theme.dim_color}] {message}[/{style}]"
        )

    def summary_line(self) -> str:
        counts = self.tag_counts()
        parts = [
            f"[{TAG_STYLES[tag]}]{counts[tag]} {tag.value}[/{TAG_STYLES[tag]}]"
            for tag in ActionTag
            if counts[tag]
        ]
        dim = self.theme.dim_color
        return f"[{dim}]{'  '.join(parts)}[/{dim}]"
