"""Tests for viewport scroll arithmetic."""

import pytest

from rich_menu.viewport import clamp_offset, reposition, viewport_height, visible_range


class TestViewportHeight:
    def test_subtracts_chrome(self):
        assert viewport_height(30, 6, 5) == 24

    def test_floor_on_tiny_terminal(self):
        assert viewport_height(8, 6, 5) == 5
        assert viewport_height(0, 6, 5) == 5


class TestReposition:
    def test_cursor_inside_keeps_offset(self):
        assert reposition(cursor=5, offset=3, height=5, total=20) == 3

    def test_cursor_above_scrolls_up(self):
        assert reposition(cursor=2, offset=4, height=5, total=20) == 2

    def test_cursor_below_scrolls_down(self):
        assert reposition(cursor=9, offset=0, height=5, total=20) == 5

    def test_visible_cursor_keeps_offset_near_end(self):
        assert reposition(cursor=8, offset=6, height=5, total=10) == 6

    def test_cursor_at_last_row_of_window(self):
        assert reposition(cursor=4, offset=0, height=5, total=10) == 0
        assert reposition(cursor=5, offset=0, height=5, total=10) == 1

    @pytest.mark.parametrize("cursor", range(0, 12))
    def test_cursor_always_visible(self, cursor):
        offset = 0
        for c in list(range(cursor + 1)) + list(range(cursor, -1, -1)):
            offset = clamp_offset(reposition(c, offset, height=4, total=12), 4, 12)
            assert offset <= c <= offset + 3
            assert 0 <= offset <= 8


class TestClampOffset:
    def test_pulls_back_to_last_page(self):
        assert clamp_offset(30, height=5, total=20) == 15
        assert clamp_offset(6, height=5, total=10) == 5

    def test_short_list_never_scrolls(self):
        assert clamp_offset(1, height=10, total=3) == 0

    def test_valid_offset_unchanged(self):
        assert clamp_offset(3, height=5, total=20) == 3


class TestVisibleRange:
    def test_full_window(self):
        assert visible_range(3, 5, 20) == (3, 8)

    def test_truncated_at_end(self):
        assert visible_range(0, 10, 4) == (0, 4)
