"""List the immediate children of a directory.

This is the only module in the core that touches the filesystem.  Panes call
:func:`list_immediate_children` whenever they rebuild and treat any
``OSError`` it raises as an empty listing.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, List


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"

    @property
    def label(self) -> str:
        if self is EntryKind.DIRECTORY:
            return "Dir"
        return "Files"


# Signature shared by the real lister and the fakes used in tests.
Lister = Callable[..., List[str]]


def list_immediate_children(
    path: str,
    kind: EntryKind,
    *,
    show_hidden: bool = True,
    include_root: bool = False,
) -> List[str]:
    """Return depth-1 children of ``path`` that match ``kind``.

    Entries come back in the order ``os.scandir`` yields them and are joined
    onto ``path`` as given, so a root of ``"."`` produces ``"./docs"``.

    Args:
        path: Directory to enumerate.
        kind: Whether to collect subdirectories or regular files.
        show_hidden: When ``False`` names starting with ``.`` are skipped.
        include_root: Put ``path`` itself first when listing directories.

    Raises:
        OSError: ``path`` is missing, not a directory, or unreadable.
    """
    items: List[str] = []
    if include_root and kind is EntryKind.DIRECTORY:
        items.append(path)

    with os.scandir(path) as iterator:
        for entry in iterator:
            if not show_hidden and entry.name.startswith("."):
                continue
            if _matches_kind(entry, kind):
                items.append(os.path.join(path, entry.name))
    return items


def _matches_kind(entry: os.DirEntry, kind: EntryKind) -> bool:
    """Check an entry's type, following symlinks; broken links match nothing."""
    try:
        if kind is EntryKind.DIRECTORY:
            return entry.is_dir()
        return entry.is_file()
    except OSError:
        return False


__all__ = ["EntryKind", "Lister", "list_immediate_children"]
