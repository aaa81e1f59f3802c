"""Curses front end for a :class:`BrowserSession`."""

from __future__ import annotations

import curses
from typing import Dict, Iterable, Mapping, Optional

from .colors import init_colors
from .commands import Command, build_keymap, translate_key
from .config import DEFAULT_CONFIG
from .help_text import build_help_line
from .listing import Lister, list_immediate_children
from .render import render_browser
from .session import DEFAULT_PAGE_SIZE, BrowserSession, NavCommand

UNHANDLED_KEY_MESSAGE = "Unhandled keypress."


class DirPaneBrowserError(Exception):
    """Raised when the dual pane browser cannot start."""


class DirPaneBrowser:
    """Run a directory/file session in a curses interface.

    Each key is translated to a :class:`Command` and applied in full before
    the next frame is drawn.
    """

    def __init__(
        self,
        root: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        bindings: Optional[Mapping[str, Iterable[str]]] = None,
        show_hidden: bool = True,
        include_root: bool = False,
        lister: Lister = list_immediate_children,
    ) -> None:
        if bindings is None:
            bindings = DEFAULT_CONFIG["keys"]
        self.session = BrowserSession(
            root, lister, show_hidden=show_hidden, include_root=include_root
        )
        self.page_size = max(page_size, 1)
        self.keymap: Dict[int, Command] = build_keymap(bindings)
        self.help_line = build_help_line(bindings)
        self.status_message: Optional[str] = self.session.last_error()
        self.scroll_offsets: Dict[str, int] = {}

    def browse(self) -> str:
        """Launch the UI and return the directory selected on exit."""
        try:
            return curses.wrapper(self._loop)
        except curses.error as err:
            raise DirPaneBrowserError("Failed to initialise curses UI.") from err

    def _loop(self, stdscr: "curses._CursesWindow") -> str:  # type: ignore[name-defined]
        """Main curses event loop."""
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.nodelay(False)
        stdscr.keypad(True)
        init_colors()

        while True:
            render_browser(self, stdscr)
            key = stdscr.getch()
            if not self.handle_key(key):
                break

        return self.session.selected_directory()

    def handle_key(self, key_code: int) -> bool:
        """Apply one key press.  Returns ``False`` when the user quits."""
        if key_code == curses.KEY_RESIZE:
            return True
        command = translate_key(self.keymap, key_code)
        if command is None:
            self.status_message = UNHANDLED_KEY_MESSAGE
            return True
        return self.apply(command)

    def apply(self, command: Command) -> bool:
        """Run ``command`` against the session.  Returns ``False`` on quit."""
        session = self.session
        if command is Command.QUIT:
            return False
        if command is Command.MOVE_UP:
            session.navigate(NavCommand.up())
        elif command is Command.MOVE_DOWN:
            session.navigate(NavCommand.down())
        elif command is Command.PAGE_UP:
            session.navigate(NavCommand.page_up(self.page_size))
        elif command is Command.PAGE_DOWN:
            session.navigate(NavCommand.page_down(self.page_size))
        elif command is Command.SWITCH_FOCUS:
            session.switch_focus()
        elif command is Command.RELOAD:
            session.reload()
        self.status_message = session.last_error()
        return True


__all__ = ["DirPaneBrowser", "DirPaneBrowserError", "UNHANDLED_KEY_MESSAGE"]
