"""Thin git layer used before and after the interactive lists run.

Everything shells out to the ``git`` binary. Parsing helpers are kept
separate from the subprocess calls so they can be tested on canned output.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Sequence

from .types import ActionTag, CommitEntry, FileChangeKind, FileEntry, RebaseStep

logger = logging.getLogger(__name__)

PARENT_CONFIG_KEY = "glyph.branch.{branch}.parent"
SHORT_HASH_LENGTH = 7

# Work-tree column of `git status --porcelain`
_WORKTREE_KINDS = {
    "M": FileChangeKind.MODIFIED,
    "?": FileChangeKind.ADDED,
    "A": FileChangeKind.ADDED,
    "D": FileChangeKind.DELETED,
    "R": FileChangeKind.RENAMED,
    "T": FileChangeKind.TYPE_CHANGED,
}

_TODO_VERBS = {
    ActionTag.KEEP: "pick",
    ActionTag.REMOVE: "drop",
    ActionTag.MERGE: "squash",
    ActionTag.RETITLE: "reword",
}


class GitError(RuntimeError):
    """A git command failed."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"git {' '.join(args)} failed ({returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


def run_git(
    args: Sequence[str],
    cwd: str | Path | None = None,
    check: bool = True,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess:
    """Run ``git <args>`` and capture its output.

    Raises:
        GitError: If check is True and git exits non-zero.
    """
    logger.debug("Running git %s", " ".join(args))
    result = subprocess.run(
        ["git", *args],
        capture_output=True,
        text=True,
        cwd=str(cwd) if cwd is not None else None,
        env=env,
    )
    if check and result.returncode != 0:
        raise GitError(args, result.returncode, result.stderr)
    return result


def is_git_repository(path: str | Path | None = None) -> bool:
    """Return True if ``path`` (default: cwd) is inside a git work tree."""
    try:
        result = run_git(["rev-parse", "--is-inside-work-tree"], cwd=path, check=False)
    except OSError:
        return False
    return result.returncode == 0 and result.stdout.strip() == "true"


def current_branch() -> str:
    return run_git(["rev-parse", "--abbrev-ref", "HEAD"]).stdout.strip()


def get_parent_branch(branch: str, default: str = "main") -> str:
    """Parent branch recorded in git config, or ``default``."""
    key = PARENT_CONFIG_KEY.format(branch=branch)
    result = run_git(["config", "--get", key], check=False)
    value = result.stdout.strip()
    return value if result.returncode == 0 and value else default


def set_parent_branch(branch: str, parent: str) -> None:
    run_git(["config", PARENT_CONFIG_KEY.format(branch=branch), parent])


# ── working tree ─────────────────────────────────────────────────────────


def parse_status(output: str) -> list[FileEntry]:
    """Parse ``git status --porcelain=v1 -z`` into files with work-tree changes.

    Only the work-tree column counts; staged-only changes are skipped.
    The result is sorted by path.
    """
    entries: list[FileEntry] = []
    fields = output.split("\0")
    i = 0
    while i < len(fields):
        record = fields[i]
        i += 1
        if len(record) < 4:
            continue
        staged, worktree, path = record[0], record[1], record[3:]
        if staged in "RC" or worktree in "RC":
            # Rename/copy records are followed by the source path
            i += 1
        kind = _WORKTREE_KINDS.get(worktree)
        if kind is not None:
            entries.append(FileEntry(path, kind))
    return sorted(entries, key=lambda e: e.path)


def get_unstaged_files() -> list[FileEntry]:
    result = run_git(["status", "--porcelain=v1", "-z", "--untracked-files=all"])
    return parse_status(result.stdout)


def stage_files(paths: Sequence[str]) -> None:
    run_git(["add", "--", *paths])


def discard_file(path: str, change_kind: FileChangeKind) -> None:
    """Throw away work-tree changes to one file (untracked files are deleted)."""
    if change_kind == FileChangeKind.ADDED:
        run_git(["clean", "-f", "--", path])
    else:
        run_git(["checkout", "--", path])


def commit(message: str, amend: bool = False, stage_all: bool = False) -> str:
    """Create (or amend) a commit and return git's summary output."""
    if stage_all:
        run_git(["add", "-A"])
    args = ["commit", "-m", message]
    if amend:
        args.insert(1, "--amend")
    return run_git(args).stdout.strip()


# ── history ──────────────────────────────────────────────────────────────


def get_merge_base(branch: str, parent: str) -> str | None:
    result = run_git(["merge-base", branch, parent], check=False)
    sha = result.stdout.strip()
    return sha if result.returncode == 0 and sha else None


def parse_log(output: str) -> list[CommitEntry]:
    """Parse ``%H<US>%s`` log lines into commit entries."""
    commits: list[CommitEntry] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        full_hash, _, subject = line.partition("\x1f")
        full_hash = full_hash.strip()
        commits.append(CommitEntry(full_hash[:SHORT_HASH_LENGTH], full_hash, subject))
    return commits


def get_branch_commits(branch: str, parent: str) -> list[CommitEntry]:
    """Commits on ``branch`` since it forked from ``parent``, oldest first."""
    merge_base = get_merge_base(branch, parent)
    if merge_base is None:
        return []
    result = run_git([
        "log", "--reverse", "--topo-order", "--format=%H%x1f%s", f"{merge_base}..{branch}",
    ])
    return parse_log(result.stdout)


def build_todo(steps: Sequence[RebaseStep], message_files: dict[int, Path] | None = None) -> str:
    """Render a git rebase todo list for ``steps``.

    Commits kept or retitled with a new message are picked and then amended
    from the matching file in ``message_files`` (keyed by step position).
    A retitle without new text becomes ``reword`` so git asks for it.
    """
    message_files = message_files or {}
    lines: list[str] = []
    for pos, step in enumerate(steps):
        short, subject = step.commit.short_hash, step.commit.message
        msg_file = message_files.get(pos)
        if msg_file is not None and step.tag in (ActionTag.KEEP, ActionTag.RETITLE):
            lines.append(f"pick {short} {subject}")
            lines.append(f"exec git commit --amend --allow-empty -F {shlex.quote(str(msg_file))}")
            continue
        lines.append(f"{_TODO_VERBS[step.tag]} {short} {subject}")
    return "\n".join(lines) + "\n"


def apply_rebase(merge_base: str, steps: Sequence[RebaseStep]) -> int:
    """Run ``git rebase -i`` non-interactively with the given plan.

    The todo list is installed through GIT_SEQUENCE_EDITOR. git output is
    not captured so editors opened for squash or reword stay usable.

    Returns:
        The exit code of git rebase.
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="glyph-rebase-"))
    try:
        message_files: dict[int, Path] = {}
        for pos, step in enumerate(steps):
            if step.is_retitled and step.tag in (ActionTag.KEEP, ActionTag.RETITLE):
                msg_file = temp_dir / f"msg-{pos}"
                msg_file.write_text(step.text + "\n")
                message_files[pos] = msg_file

        todo_file = temp_dir / "todo"
        todo_file.write_text(build_todo(steps, message_files))

        env = dict(os.environ)
        env["GIT_SEQUENCE_EDITOR"] = f"cp {shlex.quote(str(todo_file))}"

        logger.debug("Applying rebase onto %s with %d steps", merge_base, len(steps))
        result = subprocess.run(["git", "rebase", "-i", merge_base], env=env)
        return result.returncode
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)
