"""Name-based exclusion of scan entries."""

from __future__ import annotations

from collections.abc import Collection


def is_excluded(depth: int, name: str, patterns: Collection[str], root_only: bool = True) -> bool:
    """Return True if an entry called *name* at *depth* must be skipped.

    Patterns match by exact name only. With *root_only* set they apply
    solely to the scan root's direct children (depth 0).
    """
    if root_only and depth > 0:
        return False
    return name in patterns
