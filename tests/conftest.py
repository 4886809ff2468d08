"""Pytest fixtures for glyph tests."""

import io

import pytest
from rich.console import Console

from glyph.types import CommitEntry, FileChangeKind, FileEntry


def _make_console(height: int = 12, width: int = 80) -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        width=width,
        height=height,
        highlight=False,
        color_system=None,
    )


@pytest.fixture
def make_console():
    """Factory for in-memory consoles with a fixed size."""
    return _make_console


@pytest.fixture
def console():
    return _make_console()


@pytest.fixture
def files():
    """Five unstaged files spread over two directories and the root."""
    return [
        FileEntry("README.md", FileChangeKind.MODIFIED),
        FileEntry("src/app.py", FileChangeKind.MODIFIED),
        FileEntry("src/util.py", FileChangeKind.ADDED),
        FileEntry("tests/test_app.py", FileChangeKind.DELETED),
        FileEntry("tests/conftest.py", FileChangeKind.RENAMED),
    ]


@pytest.fixture
def commits():
    """Four commits, oldest first."""
    return [
        CommitEntry("a1b2c3d", "a1b2c3d" + "0" * 33, "add parser"),
        CommitEntry("b2c3d4e", "b2c3d4e" + "0" * 33, "wip"),
        CommitEntry("c3d4e5f", "c3d4e5f" + "0" * 33, "debug prints"),
        CommitEntry("d4e5f6a", "d4e5f6a" + "0" * 33, "add tests"),
    ]


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the glyph config at a temp directory."""
    from glyph import config

    cfg_dir = tmp_path / "glyph"
    cfg_dir.mkdir()
    monkeypatch.setattr(config, "get_config_dir", lambda: cfg_dir)
    monkeypatch.delenv("GLYPH_DEBUG", raising=False)
    return cfg_dir
