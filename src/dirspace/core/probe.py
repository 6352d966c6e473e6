"""Metadata probing for individual filesystem nodes.

Failures never raise: a node that cannot be stat'ed, or that is neither a
regular file nor a directory, comes back as :class:`Skipped` and callers
count it as zero bytes.
"""

from __future__ import annotations

import os
import stat

from dirspace.models.node import NodeKind, Probed, ProbeResult, Skipped


def probe_entry(entry: os.DirEntry[str]) -> ProbeResult:
    """Probe a directory entry without following symlinks."""
    try:
        st = entry.stat(follow_symlinks=False)
    except OSError as e:
        return Skipped(e.strerror or str(e))
    return _classify(st)


def probe_path(path: str) -> ProbeResult:
    """Probe a path, following symlinks (used for scan roots)."""
    try:
        st = os.stat(path)
    except OSError as e:
        return Skipped(e.strerror or str(e))
    return _classify(st)


def _classify(st: os.stat_result) -> ProbeResult:
    if stat.S_ISREG(st.st_mode):
        return Probed(NodeKind.FILE, st.st_size)
    if stat.S_ISDIR(st.st_mode):
        return Probed(NodeKind.DIRECTORY)
    if stat.S_ISLNK(st.st_mode):
        return Skipped("symlink")
    return Skipped("not a regular file or directory")
