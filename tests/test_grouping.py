"""Tests for flat and grouped projections."""

from rich_menu.grouping import (
    ROW_GROUP_HEADER,
    ROW_ITEM,
    ViewMode,
    project,
    project_flat,
    project_grouped,
)


class TestViewMode:
    def test_toggled(self):
        assert ViewMode.FLAT.toggled() == ViewMode.GROUPED
        assert ViewMode.GROUPED.toggled() == ViewMode.FLAT


class TestFlat:
    def test_identity(self, files):
        proj = project_flat(files)
        assert len(proj) == len(files)
        for i in range(len(files)):
            assert proj.position_of(i) == i
            assert proj.index_at(i) == i
        assert all(row.kind == ROW_ITEM for row in proj.rows)
        assert proj.rows[1].label == "src/app.py"


class TestGrouped:
    def test_layout(self, files):
        proj = project_grouped(files)
        layout = [(row.kind, row.label, row.index, row.indent) for row in proj.rows]
        assert layout == [
            (ROW_ITEM, "README.md", 0, 0),
            (ROW_GROUP_HEADER, "src/", None, 0),
            (ROW_ITEM, "app.py", 1, 1),
            (ROW_ITEM, "util.py", 2, 1),
            (ROW_GROUP_HEADER, "tests/", None, 0),
            (ROW_ITEM, "conftest.py", 4, 1),
            (ROW_ITEM, "test_app.py", 3, 1),
        ]

    def test_headers_map_to_no_item(self, files):
        proj = project_grouped(files)
        assert proj.index_at(1) is None
        assert proj.index_at(4) is None

    def test_every_item_has_one_position(self, files):
        proj = project_grouped(files)
        positions = {proj.position_of(i) for i in range(len(files))}
        assert len(positions) == len(files)
        for i in range(len(files)):
            assert proj.index_at(proj.position_of(i)) == i

    def test_leaf_order_follows_screen(self, files):
        assert project_grouped(files).leaf_order == [0, 1, 2, 4, 3]

    def test_nested_directories_are_separate_groups(self):
        from glyph.types import FileChangeKind, FileEntry

        items = [
            FileEntry("a/b/c.txt", FileChangeKind.MODIFIED),
            FileEntry("a/d.txt", FileChangeKind.MODIFIED),
        ]
        labels = [row.label for row in project_grouped(items).rows]
        assert labels == ["a/", "d.txt", "a/b/", "c.txt"]


def test_project_dispatches_on_mode(files):
    assert len(project(files, ViewMode.FLAT)) == 5
    assert len(project(files, ViewMode.GROUPED)) == 7
