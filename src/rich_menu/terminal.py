"""Terminal scoping helpers: interactivity check and cursor visibility."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

logger = logging.getLogger(__name__)


def stdin_is_interactive() -> bool:
    """Return True when keys can be read from a real terminal."""
    try:
        return sys.stdin is not None and sys.stdin.isatty()
    except ValueError:
        # Closed stream
        return False


@contextmanager
def hidden_cursor(console: Console) -> Iterator[None]:
    """Hide the terminal cursor for the duration of the block.

    The cursor is shown again on every exit path. Failing to toggle it is
    logged and ignored since it only affects how the terminal looks.
    """
    try:
        console.show_cursor(False)
    except (OSError, ValueError) as e:
        logger.debug("Could not hide cursor: %s", e)
    try:
        yield
    finally:
        try:
            console.show_cursor(True)
        except (OSError, ValueError) as e:
            logger.debug("Could not restore cursor: %s", e)
