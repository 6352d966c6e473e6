"""Shared utility functions."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from rich.cells import cell_len

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a string like ``512 B`` or ``1.50 MB``."""
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    if unit == 0:
        return f"{size_bytes} B"
    return f"{value:.2f} {_SIZE_UNITS[unit]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"


def terminal_width() -> int:
    """Terminal columns clamped to 60..160, 100 when unknown."""
    columns = shutil.get_terminal_size((100, 24)).columns
    return max(60, min(columns, 160))


def printable_name(name: str) -> str:
    """Replace undecodable filename bytes so the name can be printed."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def truncate_filename(name: str, max_width: int) -> str:
    """Shorten *name* to *max_width* columns with an ellipsis.

    Names with room for at least six visible columns keep both ends
    (``very...name.txt``); narrower budgets keep only the start.
    """
    if cell_len(name) <= max_width:
        return name
    if max_width <= 3:
        return "..."

    available = max_width - 3
    if available < 6:
        return _take_head(name, available) + "..."

    head = _take_head(name, available // 2)
    tail = _take_tail(name[len(head):], available - available // 2)
    return f"{head}...{tail}"


def _take_head(text: str, budget: int) -> str:
    width = 0
    for i, ch in enumerate(text):
        width += cell_len(ch)
        if width > budget:
            return text[:i]
    return text


def _take_tail(text: str, budget: int) -> str:
    width = 0
    for i in range(len(text) - 1, -1, -1):
        width += cell_len(text[i])
        if width > budget:
            return text[i + 1:]
    return text
