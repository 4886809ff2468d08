"""Tests for SelectionSet and MutationStore."""

from rich_menu import MutationStore, SelectionSet


class TestSelectionSet:
    def test_toggle_adds_and_removes(self):
        sel = SelectionSet(3)
        sel.toggle(1)
        assert 1 in sel
        sel.toggle(1)
        assert 1 not in sel
        assert len(sel) == 0

    def test_out_of_range_ignored(self):
        sel = SelectionSet(3)
        sel.toggle(3)
        sel.toggle(-1)
        assert len(sel) == 0

    def test_toggle_all_selects_then_clears(self):
        sel = SelectionSet(4)
        sel.toggle(2)
        sel.toggle_all()
        assert sel.is_full()
        assert sel.ordered() == [0, 1, 2, 3]
        sel.toggle_all()
        assert len(sel) == 0

    def test_ordered_ignores_selection_order(self):
        sel = SelectionSet(5)
        for i in (3, 1, 2):
            sel.toggle(i)
        assert sel.ordered() == [1, 2, 3]
        assert list(sel) == [1, 2, 3]


class TestMutationStore:
    def test_defaults(self, commits):
        store = MutationStore(commits, default_tag="keep")
        assert len(store) == 4
        assert store.tags() == ["keep"] * 4
        assert store.effective_text(1) == "wip"
        assert store.fields(1).edited_text is None

    def test_set_tag(self, commits):
        store = MutationStore(commits, default_tag="keep")
        store.set_tag(2, "remove")
        store.set_tag(10, "remove")
        assert store.tags() == ["keep", "keep", "remove", "keep"]

    def test_committed_text_wins_even_when_empty(self, commits):
        store = MutationStore(commits)
        store.commit_text(0, "")
        assert store.effective_text(0) == ""
        store.commit_text(0, "fix bug")
        assert store.effective_text(0) == "fix bug"
