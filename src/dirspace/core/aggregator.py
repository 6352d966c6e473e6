"""Subtree size aggregation without materializing entries."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from concurrent.futures import Executor

from dirspace.core.probe import probe_path
from dirspace.core.walker import subtree_totals, walk, worker_pool
from dirspace.models.node import NodeKind, Probed, Skipped

log = logging.getLogger(__name__)


def aggregate(
    path: str,
    patterns: Collection[str] = (),
    depth: int = 0,
    *,
    executor: Executor | None = None,
) -> int:
    """Return the total file bytes under *path*.

    A file counts as its own length; anything that is neither a file nor a
    readable directory counts as 0.
    """
    match probe_path(path):
        case Probed(kind=NodeKind.FILE, size=size):
            return size
        case Skipped(reason=reason):
            log.debug("Skipping %s: %s", path, reason)
            return 0
    return aggregate_many([path], patterns, depth, executor=executor)[path]


def aggregate_many(
    paths: Iterable[str],
    patterns: Collection[str] = (),
    depth: int = 0,
    *,
    executor: Executor | None = None,
) -> dict[str, int]:
    """Aggregate several directories over one pool.

    Children of each directory are checked against *patterns* at *depth*.
    Returns ``{path: subtree_total}`` for every given path.
    """
    paths = list(paths)
    if not paths:
        return {}
    with worker_pool(executor) as pool:
        listings = walk(paths, depth, patterns, pool)
    totals = subtree_totals(listings)
    log.debug("Aggregated %d directories from %d roots", len(listings), len(paths))
    return {p: totals[p] for p in paths}
