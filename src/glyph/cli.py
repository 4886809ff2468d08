"""CLI interface for glyph.

Each subcommand gathers plain data from git, hands it to an interactive
list, then acts on the outcome. No git call happens while a list is open.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rich_menu import Cancelled, SingleItemAction, TerminalUnavailable

from . import __version__, git
from .config import build_theme, is_debug, load_config

console = Console(highlight=False)
logger = logging.getLogger(__name__)


def _print(msg: str = "") -> None:
    """Print with Rich markup support."""
    console.print(msg)


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _exit_unavailable(outcome: TerminalUnavailable) -> None:
    _print(f"[red]Error:[/red] {escape(outcome.message)}")
    sys.exit(1)


def cmd_add(args):
    """Interactively select files to stage."""
    from .interactive import FileSelector

    cfg = load_config()
    files = git.get_unstaged_files()
    if not files:
        _print("[dim]No unstaged changes found.[/dim]")
        return

    outcome = FileSelector(files, console=console, theme=build_theme(cfg)).run()

    if isinstance(outcome, TerminalUnavailable):
        _exit_unavailable(outcome)
    if isinstance(outcome, Cancelled):
        _print("[dim]Cancelled.[/dim]")
        return

    if isinstance(outcome, SingleItemAction):
        path = outcome.payload
        _print(f"Discarding changes to [yellow]{escape(path)}[/yellow]...")
        git.discard_file(path, outcome.kind)
        _print(f"[green]Discarded changes to {escape(path)}.[/green]")
        return

    paths = list(outcome.payload)
    if not paths:
        _print("[dim]No files selected.[/dim]")
        return

    git.stage_files(paths)
    _print(f"[green]Staged {len(paths)} file(s).[/green]")
    for path in paths:
        _print(f"  [dim]{escape(path)}[/dim]")


def cmd_edit(args):
    """Interactively rewrite the commits of the current branch."""
    from .interactive import RebaseEditor, has_changes, to_directives

    cfg = load_config()
    branch = git.current_branch()
    parent = git.get_parent_branch(branch, cfg.get("default_parent", "main"))

    merge_base = git.get_merge_base(branch, parent)
    if merge_base is None:
        _print("[yellow]Could not determine merge base with parent branch.[/yellow]")
        return

    commits = git.get_branch_commits(branch, parent)
    if not commits:
        _print("[dim]No commits on this branch to edit.[/dim]")
        return

    outcome = RebaseEditor(commits, console=console, theme=build_theme(cfg)).run()

    if isinstance(outcome, TerminalUnavailable):
        _exit_unavailable(outcome)
    if isinstance(outcome, Cancelled):
        _print("[dim]Cancelled.[/dim]")
        return

    steps = outcome.payload
    if args.print_plan:
        sys.stdout.write(to_directives(steps))
        return

    if not has_changes(steps):
        _print("[dim]No changes to apply.[/dim]")
        return

    _print("[dim]Applying changes...[/dim]")
    code = git.apply_rebase(merge_base, steps)
    if code == 0:
        _print("[green]Rebase completed successfully.[/green]")
        return

    _print("[red]Rebase failed.[/red]")
    _print("[dim]Run 'git rebase --abort' to undo, or resolve conflicts and 'git rebase --continue'.[/dim]")
    sys.exit(code)


def cmd_parent(args):
    """Show or set the parent branch of the current branch."""
    cfg = load_config()
    branch = git.current_branch()

    if args.branch is None:
        parent = git.get_parent_branch(branch, cfg.get("default_parent", "main"))
        _print(f"Parent of [green]{escape(branch)}[/green]: [blue]{escape(parent)}[/blue]")
        return

    git.set_parent_branch(branch, args.branch)
    _print(f"Set parent of [green]{escape(branch)}[/green] to [blue]{escape(args.branch)}[/blue]")


def cmd_commit(args):
    """Create a commit."""
    output = git.commit(args.message, amend=args.amend, stage_all=args.all)
    _print("[green]Amended commit.[/green]" if args.amend else "[green]Created commit.[/green]")
    if output:
        _print(escape(output))


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="glyph",
        description="glyph: interactive git helpers for trunk-based development",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"glyph {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # add
    add_p = subparsers.add_parser("add", help="Interactively select files to stage")
    add_p.set_defaults(func=cmd_add)

    # edit
    edit_p = subparsers.add_parser("edit", help="Interactively rebase commits on the current branch")
    edit_p.add_argument(
        "--print", dest="print_plan", action="store_true",
        help="Print the confirmed plan instead of applying it",
    )
    edit_p.set_defaults(func=cmd_edit)

    # parent
    parent_p = subparsers.add_parser("parent", help="Get or set the parent branch")
    parent_p.add_argument("branch", nargs="?", default=None, help="Parent branch to set (omit to show)")
    parent_p.set_defaults(func=cmd_parent)

    # commit
    commit_p = subparsers.add_parser("commit", help="Create a git commit")
    commit_p.add_argument("message", help="Commit message")
    commit_p.add_argument("--amend", action="store_true", help="Amend the previous commit")
    commit_p.add_argument("-A", dest="all", action="store_true", help="Stage all changes first")
    commit_p.set_defaults(func=cmd_commit)

    return parser


def main():
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    _configure_logging(args.debug or is_debug())

    if not hasattr(args, "func"):
        parser.print_help()
        return

    if not git.is_git_repository():
        _print("[red]Error:[/red] Not a git repository (or any parent up to mount point).")
        sys.exit(1)

    logger.debug("Running glyph %s", args.command)
    try:
        args.func(args)
    except git.GitError as e:
        _print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        sys.exit(130)
