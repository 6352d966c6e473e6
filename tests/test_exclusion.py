"""Tests for name-based exclusion."""

from __future__ import annotations

from dirspace.core.exclusion import is_excluded


class TestIsExcluded:
    def test_exact_name_at_root_is_excluded(self):
        assert is_excluded(0, "build", {"build"}, root_only=True)

    def test_root_only_ignores_deeper_matches(self):
        assert not is_excluded(1, "build", {"build"}, root_only=True)
        assert not is_excluded(5, "build", {"build"}, root_only=True)

    def test_without_root_only_matches_at_any_depth(self):
        assert is_excluded(3, "build", {"build"}, root_only=False)

    def test_no_glob_matching(self):
        assert not is_excluded(0, "a.txt", {"*.txt"})
        assert not is_excluded(0, "build2", {"build"})
        assert not is_excluded(0, "Build", {"build"})

    def test_empty_patterns(self):
        assert not is_excluded(0, "anything", set())

    def test_accepts_any_collection(self):
        assert is_excluded(0, "node_modules", ["dist", "node_modules"])
        assert is_excluded(0, "dist", ("dist",))
