"""Parallel directory walk over a bounded thread pool.

The calling thread owns a worklist of directories.  Each directory is
listed by a pool worker, which returns an immutable :class:`DirListing`;
its subdirectories are then queued as new work.  Workers never wait on
each other, so the pool can be small without deadlocking and deep trees
do not grow the Python stack.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, Executor, Future, ThreadPoolExecutor, wait
from contextlib import contextmanager
from dataclasses import dataclass

from dirspace.core.exclusion import is_excluded
from dirspace.core.probe import probe_entry
from dirspace.models.node import NodeKind, Probed, Skipped
from dirspace.models.report import Entry

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DirListing:
    """Direct contents of one directory.

    ``files`` is only populated when the walk collects entries; ``file_bytes``
    always holds the sum of the direct files.  ``subdirs`` holds
    ``(name, path)`` pairs.  ``error`` is set when listing failed, in which
    case the other fields hold whatever was read before the failure.
    """

    path: str
    depth: int
    file_bytes: int = 0
    files: tuple[Entry, ...] = ()
    subdirs: tuple[tuple[str, str], ...] = ()
    error: str | None = None


def default_workers() -> int:
    """Pool size used when none is configured."""
    return min(32, (os.cpu_count() or 1) + 4)


@contextmanager
def worker_pool(executor: Executor | None = None, workers: int | None = None) -> Iterator[Executor]:
    """Yield *executor*, or a fresh pool that is shut down on exit."""
    if executor is not None:
        yield executor
        return
    with ThreadPoolExecutor(max_workers=workers or default_workers(), thread_name_prefix="dirspace") as pool:
        yield pool


def list_directory(
    path: str,
    depth: int,
    patterns: Collection[str],
    *,
    collect_files: bool = False,
) -> DirListing:
    """List *path*, whose children sit at *depth* from the scan root.

    An unreadable directory yields an empty listing; an error partway
    through keeps the children already read.
    """
    file_bytes = 0
    files: list[Entry] = []
    subdirs: list[tuple[str, str]] = []
    error: str | None = None

    try:
        with os.scandir(path) as it:
            for entry in it:
                if is_excluded(depth, entry.name, patterns, root_only=True):
                    log.debug("Excluded: %s", entry.path)
                    continue
                match probe_entry(entry):
                    case Probed(kind=NodeKind.FILE, size=size):
                        file_bytes += size
                        if collect_files:
                            files.append(Entry(name=entry.name, size=size, is_dir=False, path=entry.path))
                    case Probed(kind=NodeKind.DIRECTORY):
                        subdirs.append((entry.name, entry.path))
                    case Skipped(reason=reason):
                        log.debug("Skipping %s: %s", entry.path, reason)
    except OSError as e:
        log.debug("Cannot list %s: %s", path, e)
        error = e.strerror or str(e)

    return DirListing(
        path=path,
        depth=depth,
        file_bytes=file_bytes,
        files=tuple(files),
        subdirs=tuple(subdirs),
        error=error,
    )


def walk(
    roots: Iterable[str],
    depth: int,
    patterns: Collection[str],
    executor: Executor,
    *,
    collect_files: bool = False,
) -> list[DirListing]:
    """List every directory under *roots* and return the listings.

    Listings come back in discovery order: a directory always appears
    before any of its subdirectories.
    """

    def _submit(path: str, child_depth: int) -> Future[DirListing]:
        return executor.submit(list_directory, path, child_depth, patterns, collect_files=collect_files)

    listings: list[DirListing] = []
    pending = {_submit(path, depth) for path in roots}
    while pending:
        done, pending = wait(pending, return_when=FIRST_COMPLETED)
        for future in done:
            listing = future.result()
            listings.append(listing)
            for _, sub_path in listing.subdirs:
                pending.add(_submit(sub_path, listing.depth + 1))
    return listings


def subtree_totals(listings: list[DirListing]) -> dict[str, int]:
    """Map each listed directory to the file bytes of its whole subtree."""
    totals: dict[str, int] = {}
    for listing in reversed(listings):
        totals[listing.path] = listing.file_bytes + sum(totals[p] for _, p in listing.subdirs)
    return totals
