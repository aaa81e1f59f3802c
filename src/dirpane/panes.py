"""Directory and file panes built on :class:`ListCursor`."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .cursor import ListCursor
from .listing import EntryKind, Lister, list_immediate_children


class _ListPane:
    """Entries of one kind plus the cursor that walks them."""

    kind: EntryKind

    def __init__(self, lister: Lister, options: Optional[Dict[str, Any]] = None) -> None:
        self._lister = lister
        self._options: Dict[str, Any] = dict(options or {})
        self.entries: List[str] = []
        self.cursor = ListCursor()
        self.last_error: Optional[str] = None

    @property
    def title(self) -> str:
        return self.kind.label

    @property
    def selected_index(self) -> int:
        return self.cursor.selected_index

    @property
    def length(self) -> int:
        return self.cursor.length

    def up(self) -> None:
        self.cursor.up()

    def down(self) -> None:
        self.cursor.down()

    def page_up(self, step: int) -> None:
        self.cursor.page_up(step)

    def page_down(self, step: int) -> None:
        self.cursor.page_down(step)

    def current_selection(self) -> Optional[str]:
        """Return the highlighted entry, or ``None`` when the pane is empty."""
        if not self.entries:
            return None
        return self.entries[self.cursor.selected_index]

    def _load(self, source: str, *, keep_position: bool = False) -> None:
        """Replace the entries with a fresh listing of ``source``."""
        try:
            items = list(self._lister(source, self.kind, **self._options))
            self.last_error = None
        except PermissionError:
            items = []
            self.last_error = f"Permission denied reading directory: {source}"
        except FileNotFoundError:
            items = []
            self.last_error = f"Directory not found: {source}"
        except (OSError, ValueError) as err:
            items = []
            self.last_error = f"Cannot list {source}: {err}"

        self.entries = items
        self.cursor.resize(len(items))
        if not keep_position:
            self.cursor.reset()


class DirectoryPane(_ListPane):
    """Subdirectories of a fixed root.

    The selected directory is never stored; it is read off the cursor each
    time so it cannot drift from the entry list.
    """

    kind = EntryKind.DIRECTORY

    def __init__(
        self,
        root_path: str,
        lister: Lister = list_immediate_children,
        *,
        show_hidden: bool = True,
        include_root: bool = False,
    ) -> None:
        super().__init__(lister, {"show_hidden": show_hidden, "include_root": include_root})
        self._root_path = root_path
        self.refresh()

    @property
    def root_path(self) -> str:
        return self._root_path

    def refresh(self, *, keep_position: bool = False) -> None:
        """Re-list the root.  The cursor resets unless ``keep_position``."""
        self._load(self._root_path, keep_position=keep_position)

    def selected_path(self) -> str:
        """Return the highlighted directory, falling back to the root."""
        selection = self.current_selection()
        return selection if selection is not None else self._root_path


class FilePane(_ListPane):
    """Files directly inside whatever directory the session points it at."""

    kind = EntryKind.FILE

    def __init__(
        self,
        source_path: str,
        lister: Lister = list_immediate_children,
        *,
        show_hidden: bool = True,
    ) -> None:
        super().__init__(lister, {"show_hidden": show_hidden})
        self.source_path = source_path
        self.refresh(source_path)

    def refresh(self, new_source_path: str) -> None:
        """Rebuild from scratch for ``new_source_path``; the cursor goes to 0."""
        self.source_path = new_source_path
        self._load(new_source_path)


__all__ = ["DirectoryPane", "FilePane"]
