"""Scan report dataclasses."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Entry:
    """One file or directory surfaced in a report.

    For a directory, ``size`` is the sum of file bytes in its subtree.
    """

    name: str
    size: int
    is_dir: bool
    path: str


@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Counts and total derived from a report."""

    path: str
    total_size: int
    item_count: int
    file_count: int
    dir_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Report:
    """Immutable result of scanning one path.

    Entry order is whatever the parallel merge produced; use
    :meth:`sorted_by_size` when order matters.
    """

    path: str
    total_size: int = 0
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @property
    def file_count(self) -> int:
        return sum(1 for e in self.entries if not e.is_dir)

    @property
    def dir_count(self) -> int:
        return sum(1 for e in self.entries if e.is_dir)

    def sorted_by_size(self) -> Report:
        """Return a copy with entries ordered by size desc, then name asc."""
        ordered = sorted(self.entries, key=lambda e: (-e.size, e.name))
        return Report(path=self.path, total_size=self.total_size, entries=tuple(ordered))

    def summary(self) -> ReportSummary:
        return ReportSummary(
            path=self.path,
            total_size=self.total_size,
            item_count=len(self.entries),
            file_count=self.file_count,
            dir_count=self.dir_count,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "total_size": self.total_size,
            "entries": [asdict(e) for e in self.entries],
            "path": self.path,
        }
