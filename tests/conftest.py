"""Shared fixtures: an in-memory stand-in for the directory lister."""

from __future__ import annotations

from typing import Dict, List

import pytest

from dirpane.listing import EntryKind


class FakeLister:
    """Serve listings from a dict and count every call."""

    def __init__(self, dirs: Dict[str, List[str]], files: Dict[str, List[str]]) -> None:
        self.dirs = dirs
        self.files = files
        self.calls: List[tuple] = []
        self.failing: set = set()

    def __call__(self, path: str, kind: EntryKind, **options) -> List[str]:
        self.calls.append((path, kind))
        if path in self.failing:
            raise PermissionError(13, "Permission denied", path)
        table = self.dirs if kind is EntryKind.DIRECTORY else self.files
        if path not in table:
            raise FileNotFoundError(2, "No such file or directory", path)
        return list(table[path])

    def file_calls(self) -> List[str]:
        return [path for path, kind in self.calls if kind is EntryKind.FILE]


@pytest.fixture
def scenario_lister() -> FakeLister:
    """Root with ``docs`` (one file) and ``src`` (three files)."""
    return FakeLister(
        dirs={"root": ["docs", "src"]},
        files={
            "root": [],
            "docs": ["readme.md"],
            "src": ["a.rs", "b.rs", "c.rs"],
        },
    )
