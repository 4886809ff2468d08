"""Tests for glyph type definitions and key helpers."""

import readchar

from glyph.types import ActionTag, CommitEntry, FileChangeKind, FileEntry, RebaseStep
from rich_menu import keys


class TestFileChangeKind:
    def test_letters(self):
        assert [k.letter for k in FileChangeKind] == ["M", "A", "D", "R", "T"]

    def test_str(self):
        assert str(FileChangeKind.ADDED) == "added"


class TestFileEntry:
    def test_grouping(self):
        entry = FileEntry("src/pkg/mod.py", FileChangeKind.MODIFIED)
        assert entry.get_display() == "src/pkg/mod.py"
        assert entry.get_group_key() == "src/pkg"
        assert entry.get_leaf_label() == "mod.py"
        assert entry.is_edit_eligible() is False

    def test_top_level_has_no_group(self):
        assert FileEntry("README.md", FileChangeKind.ADDED).get_group_key() is None


class TestCommitEntry:
    def test_text_is_subject(self):
        commit = CommitEntry("abc1234", "abc1234" + "0" * 33, "add parser")
        assert commit.get_display() == "abc1234 add parser"
        assert commit.get_text() == "add parser"
        assert commit.is_edit_eligible() is True
        assert commit.get_group_key() is None


class TestRebaseStep:
    def test_is_retitled(self):
        commit = CommitEntry("abc1234", "abc1234" + "0" * 33, "wip")
        assert not RebaseStep(commit, ActionTag.KEEP, "wip").is_retitled
        assert RebaseStep(commit, ActionTag.RETITLE, "").is_retitled


class TestKeys:
    def test_navigation(self):
        assert keys.is_up(readchar.key.UP) and keys.is_up("k")
        assert keys.is_down(readchar.key.DOWN) and keys.is_down("j")

    def test_escape_is_not_an_arrow(self):
        assert keys.is_escape("\x1b")
        assert not keys.is_escape(readchar.key.RIGHT)
        assert not keys.is_escape("\x1bO")

    def test_escape_followed_by_key(self):
        assert keys.is_escape("\x1bq")
        assert keys.is_escape("\x1b ")
        assert not keys.is_escape("q")

    def test_printable(self):
        assert keys.is_printable("a")
        assert keys.is_printable(" ")
        assert not keys.is_printable(readchar.key.UP)
        assert not keys.is_printable("\x03")
        assert not keys.is_printable("\x7f")

    def test_printable_non_ascii(self):
        assert keys.is_printable("\u00a0")
        assert keys.is_printable("\u00e9")
        assert keys.is_printable("\u2003")
