"""Tests for the full recursive scan."""

from __future__ import annotations

from dirspace.core.scanner import scan
from dirspace.models.report import Entry


def _tuples(entries):
    return sorted((e.path, e.size, e.is_dir) for e in entries)


class TestScan:
    def test_lists_files_and_directories(self, sample_tree):
        total, entries = scan(str(sample_tree))
        assert total == 30
        assert sorted(entries, key=lambda e: e.path) == [
            Entry(name="a.txt", size=10, is_dir=False, path=str(sample_tree / "a.txt")),
            Entry(name="sub", size=20, is_dir=True, path=str(sample_tree / "sub")),
            Entry(name="b.txt", size=20, is_dir=False, path=str(sample_tree / "sub" / "b.txt")),
        ]

    def test_root_is_not_an_entry(self, sample_tree):
        _, entries = scan(str(sample_tree))
        assert str(sample_tree) not in {e.path for e in entries}

    def test_directory_size_is_subtree_sum(self, make_tree):
        root = make_tree({"d": {"f1": 3, "e": {"f2": 4, "g": {"f3": 5}}, "h": {}}})
        _, entries = scan(str(root))
        by_path = {e.path: e for e in entries}

        assert by_path[str(root / "d")].size == 12
        assert by_path[str(root / "d" / "e")].size == 9
        assert by_path[str(root / "d" / "e" / "g")].size == 5
        assert by_path[str(root / "d" / "h")].size == 0
        for entry in entries:
            if entry.is_dir:
                files_below = sum(
                    e.size for e in entries
                    if not e.is_dir and e.path.startswith(entry.path + "/")
                )
                assert entry.size == files_below

    def test_paths_are_unique(self, make_tree):
        root = make_tree({"a": {"x": 1}, "b": {"x": 1, "a": {"x": 1}}})
        _, entries = scan(str(root))
        paths = [e.path for e in entries]
        assert len(paths) == len(set(paths)) == 6

    def test_unreadable_root(self, sample_tree, deny_listing):
        deny_listing(sample_tree)
        assert scan(str(sample_tree)) == (0, [])

    def test_unreadable_subdirectory_is_empty(self, make_tree, deny_listing):
        root = make_tree({"locked": {"f": 9}, "g": 1})
        deny_listing(root / "locked")
        total, entries = scan(str(root))
        assert total == 1
        assert _tuples(entries) == [
            (str(root / "g"), 1, False),
            (str(root / "locked"), 0, True),
        ]

    def test_exclusion_at_given_depth(self, make_tree):
        root = make_tree({"build": {"x": 5}, "keep": {"build": {"y": 7}}})
        total, entries = scan(str(root), {"build"}, depth=0)
        assert total == 7
        assert str(root / "build") not in {e.path for e in entries}
        assert str(root / "keep" / "build") in {e.path for e in entries}
