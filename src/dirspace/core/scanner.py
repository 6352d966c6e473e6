"""Full recursive scan that lists every node under a directory."""

from __future__ import annotations

import logging
from collections.abc import Collection
from concurrent.futures import Executor

from dirspace.core.walker import subtree_totals, walk, worker_pool
from dirspace.models.report import Entry

log = logging.getLogger(__name__)


def scan(
    path: str,
    patterns: Collection[str] = (),
    depth: int = 0,
    *,
    executor: Executor | None = None,
) -> tuple[int, list[Entry]]:
    """Scan the tree below *path*.

    Returns ``(subtree_total, entries)`` where *entries* holds every file
    and every directory under *path* (but not *path* itself).  Each
    directory entry is sized with its own subtree total.  An unreadable
    directory contributes ``(0, [])``.
    """
    with worker_pool(executor) as pool:
        listings = walk([path], depth, patterns, pool, collect_files=True)
    if listings[0].error:
        log.warning("Cannot read %s: %s", path, listings[0].error)
    totals = subtree_totals(listings)

    entries: list[Entry] = []
    for listing in listings:
        entries.extend(listing.files)
        entries.extend(
            Entry(name=name, size=totals[sub_path], is_dir=True, path=sub_path)
            for name, sub_path in listing.subdirs
        )

    log.debug("Scanned %s: %d directories, %d entries", path, len(listings), len(entries))
    return totals[path], entries
