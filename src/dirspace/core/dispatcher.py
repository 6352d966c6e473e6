"""Top-level entry point: turn a path into a :class:`Report`."""

from __future__ import annotations

import logging
import os
import stat
import time
from collections.abc import Iterable
from concurrent.futures import Executor

from dirspace.core.aggregator import aggregate_many
from dirspace.core.scanner import scan
from dirspace.core.walker import list_directory, worker_pool
from dirspace.models.report import Entry, Report
from dirspace.utils import format_elapsed

log = logging.getLogger(__name__)


class ScanError(Exception):
    """The scan could not start."""


class PathNotFoundError(ScanError):
    """The requested root path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path does not exist: {path}")


def analyze(
    path: str | os.PathLike[str],
    recursive: bool = False,
    patterns: Iterable[str] = (),
    *,
    workers: int | None = None,
) -> Report:
    """Compute the disk usage report for *path*.

    Args:
        path: Directory (or single file) to analyze.
        recursive: List every file and directory of the tree instead of
                   collapsing each child directory into one entry.
        patterns: Exact names to skip among the root's direct children.
        workers: Thread pool size; defaults to ``min(32, cpus + 4)``.

    Raises:
        PathNotFoundError: *path* does not exist.
        ScanError: *path* exists but its metadata cannot be read.
    """
    path = os.fspath(path)
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise PathNotFoundError(path) from e
    except OSError as e:
        raise ScanError(f"Cannot access {path}: {e.strerror or e}") from e

    if not stat.S_ISDIR(st.st_mode):
        return _single_file_report(path, st.st_size)

    excludes = frozenset(patterns)
    mode = "recursive" if recursive else "shallow"
    log.info("Scanning %s (%s mode)", path, mode)
    started = time.monotonic()

    with worker_pool(workers=workers) as pool:
        if recursive:
            report = _analyze_recursive(path, excludes, pool)
        else:
            report = _analyze_shallow(path, excludes, pool)

    log.info(
        "Scanned %s: %d entries, %d bytes in %s",
        path,
        len(report.entries),
        report.total_size,
        format_elapsed(time.monotonic() - started),
    )
    return report


def _single_file_report(path: str, size: int) -> Report:
    name = os.path.basename(os.path.normpath(path)) or path
    entry = Entry(name=name, size=size, is_dir=False, path=path)
    return Report(path=path, total_size=size, entries=(entry,))


def _analyze_shallow(path: str, excludes: frozenset[str], pool: Executor) -> Report:
    """Direct children only; each child directory collapses to its subtree total."""
    listing = list_directory(path, 0, excludes, collect_files=True)
    if listing.error:
        log.warning("Cannot read %s: %s", path, listing.error)
    dir_totals = aggregate_many((p for _, p in listing.subdirs), excludes, depth=1, executor=pool)

    entries = list(listing.files)
    entries.extend(
        Entry(name=name, size=dir_totals[sub_path], is_dir=True, path=sub_path)
        for name, sub_path in listing.subdirs
    )
    # Directory entries here hold disjoint subtree totals, so summing all is safe
    total = sum(e.size for e in entries)
    return Report(path=path, total_size=total, entries=tuple(entries))


def _analyze_recursive(path: str, excludes: frozenset[str], pool: Executor) -> Report:
    """Every node of the tree; directory sizes are left out of the total."""
    _, entries = scan(path, excludes, depth=0, executor=pool)
    total = sum(e.size for e in entries if not e.is_dir)
    return Report(path=path, total_size=total, entries=tuple(entries))
