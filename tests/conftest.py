"""Shared test fixtures."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Any

import pytest


def build_tree(root: Path, layout: dict[str, Any]) -> Path:
    """Create files and directories from a nested dict.

    Integer values become files of that many bytes; dict values become
    directories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, spec in layout.items():
        target = root / name
        if isinstance(spec, dict):
            build_tree(target, spec)
        else:
            target.write_bytes(b"x" * spec)
    return root


@pytest.fixture
def make_tree(tmp_path):
    """Factory fixture: ``make_tree({...})`` returns the created root."""

    def _make(layout: dict[str, Any], name: str = "root") -> Path:
        return build_tree(tmp_path / name, layout)

    return _make


@pytest.fixture
def sample_tree(make_tree):
    """root/{a.txt(10), sub/{b.txt(20)}}"""
    return make_tree({"a.txt": 10, "sub": {"b.txt": 20}})


@pytest.fixture
def deny_listing(monkeypatch):
    """Make ``os.scandir`` fail with PermissionError for the given paths."""
    original = os.scandir
    denied: set[str] = set()

    def fake_scandir(path=".", *args, **kwargs):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return original(path, *args, **kwargs)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def _deny(*paths: Path) -> None:
        denied.update(str(p) for p in paths)

    return _deny


@pytest.fixture
def slow_listing(monkeypatch):
    """Make ``os.scandir`` sleep before listing the given paths."""
    original = os.scandir
    slow: dict[str, float] = {}

    def fake_scandir(path=".", *args, **kwargs):
        delay = slow.get(os.fspath(path))
        if delay:
            time.sleep(delay)
        return original(path, *args, **kwargs)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def _slow(delay: float, *paths: Path) -> None:
        slow.update((str(p), delay) for p in paths)

    return _slow


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp config directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "dirspace" / "settings.json"
