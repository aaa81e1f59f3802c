"""Browser session: two panes, one focus, and the rule that ties them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union

from .listing import Lister, list_immediate_children
from .panes import DirectoryPane, FilePane

DEFAULT_PAGE_SIZE = 50


class Focus(Enum):
    DIR = 0
    FILES = 1


class NavKind(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class NavCommand:
    """One cursor movement; ``step`` only matters for the page kinds."""

    kind: NavKind
    step: int = DEFAULT_PAGE_SIZE

    @classmethod
    def up(cls) -> "NavCommand":
        return cls(NavKind.UP)

    @classmethod
    def down(cls) -> "NavCommand":
        return cls(NavKind.DOWN)

    @classmethod
    def page_up(cls, step: int = DEFAULT_PAGE_SIZE) -> "NavCommand":
        return cls(NavKind.PAGE_UP, step)

    @classmethod
    def page_down(cls, step: int = DEFAULT_PAGE_SIZE) -> "NavCommand":
        return cls(NavKind.PAGE_DOWN, step)


class PaneView(NamedTuple):
    """What the renderer needs to draw one pane."""

    title: str
    entries: Tuple[str, ...]
    selected_index: int
    is_active: bool
    source_path: str
    error: Optional[str]


_Pane = Union[DirectoryPane, FilePane]


class BrowserSession:
    """Route navigation to the focused pane and keep the file pane in sync.

    After any directory-pane move that changes the selected directory the
    file pane is rebuilt before the call returns, so a render never sees a
    file list that belongs to a different directory.
    """

    def __init__(
        self,
        root_path: str,
        lister: Lister = list_immediate_children,
        *,
        show_hidden: bool = True,
        include_root: bool = False,
    ) -> None:
        self.dir_pane = DirectoryPane(
            root_path, lister, show_hidden=show_hidden, include_root=include_root
        )
        self.file_pane = FilePane(
            self.dir_pane.selected_path(), lister, show_hidden=show_hidden
        )
        self.focus = Focus.DIR

    @property
    def focused_pane(self) -> _Pane:
        return self.dir_pane if self.focus is Focus.DIR else self.file_pane

    def switch_focus(self) -> None:
        """Advance focus to the next pane, wrapping around."""
        order = list(Focus)
        self.focus = order[(order.index(self.focus) + 1) % len(order)]

    def navigate(self, command: NavCommand) -> bool:
        """Apply ``command`` to the focused pane.

        Returns ``True`` when the move changed the selected directory and the
        file pane was rebuilt.
        """
        pane = self.focused_pane
        before = self.dir_pane.selected_path()

        if command.kind is NavKind.UP:
            pane.up()
        elif command.kind is NavKind.DOWN:
            pane.down()
        elif command.kind is NavKind.PAGE_UP:
            pane.page_up(command.step)
        elif command.kind is NavKind.PAGE_DOWN:
            pane.page_down(command.step)

        if self.focus is not Focus.DIR:
            return False
        after = self.dir_pane.selected_path()
        if after == before:
            return False
        self.file_pane.refresh(after)
        return True

    def resync(self) -> None:
        """Rebuild the file pane for the currently selected directory."""
        self.file_pane.refresh(self.dir_pane.selected_path())

    def reload(self) -> None:
        """Re-list the root, keeping the directory cursor where it can stay."""
        self.dir_pane.refresh(keep_position=True)
        self.resync()

    def selected_directory(self) -> str:
        return self.dir_pane.selected_path()

    def selected_file(self) -> Optional[str]:
        return self.file_pane.current_selection()

    def last_error(self) -> Optional[str]:
        """Most recent enumeration failure, directory pane first."""
        return self.dir_pane.last_error or self.file_pane.last_error

    def pane_views(self) -> List[PaneView]:
        """Snapshot both panes, directory pane first."""
        return [
            PaneView(
                title=self.dir_pane.title,
                entries=tuple(self.dir_pane.entries),
                selected_index=self.dir_pane.selected_index,
                is_active=self.focus is Focus.DIR,
                source_path=self.dir_pane.root_path,
                error=self.dir_pane.last_error,
            ),
            PaneView(
                title=self.file_pane.title,
                entries=tuple(self.file_pane.entries),
                selected_index=self.file_pane.selected_index,
                is_active=self.focus is Focus.FILES,
                source_path=self.file_pane.source_path,
                error=self.file_pane.last_error,
            ),
        ]

    def focused_pane_widget_data(self) -> List[Tuple[Tuple[str, ...], int, bool]]:
        """Return ``(entries, selected_index, is_active)`` for each pane."""
        return [(view.entries, view.selected_index, view.is_active) for view in self.pane_views()]


__all__ = [
    "BrowserSession",
    "DEFAULT_PAGE_SIZE",
    "Focus",
    "NavCommand",
    "NavKind",
    "PaneView",
]
