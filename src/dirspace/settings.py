"""JSON-backed user settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dirspace.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "dirspace"
_SETTINGS_FILE = "settings.json"


class Settings:
    """Read-only settings loaded from a JSON file.

    Uses dot-notation keys for nested access::

        settings.get("scan.workers")  # reads data["scan"]["workers"]

    Recognized keys are ``scan.workers``, ``scan.exclude``, ``display.sort``
    and ``display.chart``.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def workers(self) -> int | None:
        """Configured pool size, or None if unset or invalid."""
        value = self.get("scan.workers")
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            log.warning("Ignoring invalid scan.workers in %s: %r", self._path, value)
            return None
        return value

    def excludes(self) -> list[str]:
        """Names always excluded from the scan root."""
        value = self.get("scan.exclude", [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            log.warning("Ignoring invalid scan.exclude in %s: %r", self._path, value)
            return []
        return value

    def flag(self, key: str) -> bool:
        """Boolean setting, False unless set to ``true``."""
        return self.get(key) is True

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data
