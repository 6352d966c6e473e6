"""Probe result types for a single filesystem node."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Kinds of nodes that take part in a scan."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Probed:
    """A node whose metadata was read successfully.

    ``size`` is the byte length for files and always 0 for directories.
    """

    kind: NodeKind
    size: int = 0


@dataclass(frozen=True, slots=True)
class Skipped:
    """A node that contributes nothing: unreadable, vanished, or not a file/dir."""

    reason: str


ProbeResult = Probed | Skipped
