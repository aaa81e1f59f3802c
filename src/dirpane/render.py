"""Draw the browser session onto a curses window.

Rendering only reads :class:`~dirpane.session.PaneView` snapshots.  The one
piece of state it keeps is the scroll offset per pane, which lives on the
browser object and never feeds back into the session.
"""

from __future__ import annotations

import curses
import os
from typing import TYPE_CHECKING, Dict

from .colors import border_attr, error_attr, selection_attr, title_attr
from .listing import EntryKind
from .render_utils import draw_frame, draw_frame_title, scroll_offset_for, truncate, truncate_end
from .session import PaneView

if TYPE_CHECKING:
    from .browser import DirPaneBrowser

# Terminal size limits
MIN_TERMINAL_HEIGHT = 6
MIN_TERMINAL_WIDTH = 30

# Left pane share of the width, in percent
DIR_PANE_PERCENT = 40
STATUS_AREA_HEIGHT = 2

HIGHLIGHT_SYMBOLS = {
    EntryKind.DIRECTORY.label: "##",
    EntryKind.FILE.label: ">>",
}
EMPTY_PLACEHOLDER = "<empty>"


def display_name(entry: str) -> str:
    """Show the last path component, or the whole path for roots like ``/``."""
    name = os.path.basename(entry.rstrip("/\\"))
    return name or entry


def render_browser(browser: "DirPaneBrowser", stdscr: "curses._CursesWindow") -> None:  # type: ignore[name-defined]
    """Render both panes and the status strip."""
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    if height < MIN_TERMINAL_HEIGHT or width < MIN_TERMINAL_WIDTH:
        try:
            stdscr.addstr(0, 0, truncate("Terminal too small for browser.", width))
        except curses.error:
            pass
        stdscr.refresh()
        return

    pane_height = height - STATUS_AREA_HEIGHT
    dir_width = width * DIR_PANE_PERCENT // 100
    file_width = width - dir_width

    dir_view, file_view = browser.session.pane_views()
    render_pane(stdscr, dir_view, browser.scroll_offsets, 0, 0, pane_height, dir_width)
    render_pane(stdscr, file_view, browser.scroll_offsets, 0, dir_width, pane_height, file_width)

    render_status_area(browser, stdscr, pane_height, width)
    stdscr.refresh()


def render_pane(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    view: PaneView,
    scroll_offsets: Dict[str, int],
    origin_y: int,
    origin_x: int,
    height: int,
    width: int,
) -> None:
    """Render one pane inside the given rectangle."""
    if height < 3 or width < 6:
        return

    draw_frame(stdscr, origin_y, origin_x, height, width, border_attr(view.is_active))
    draw_frame_title(stdscr, origin_y, origin_x, width, f" {view.title} ", title_attr())

    interior_width = width - 2
    viewport_height = height - 2
    row_x = origin_x + 1

    if view.error or not view.entries:
        message = view.error or EMPTY_PLACEHOLDER
        attr = error_attr() if view.error else curses.A_DIM
        try:
            stdscr.addnstr(origin_y + 1, row_x, truncate(message, interior_width), interior_width, attr)
        except curses.error:
            pass
        return

    offset = scroll_offset_for(
        view.selected_index,
        scroll_offsets.get(view.title, 0),
        viewport_height,
        len(view.entries),
    )
    scroll_offsets[view.title] = offset

    symbol = HIGHLIGHT_SYMBOLS.get(view.title, ">>")
    gutter = " " * len(symbol)
    visible = view.entries[offset : offset + viewport_height]
    for index, entry in enumerate(visible):
        y = origin_y + 1 + index
        is_selected = offset + index == view.selected_index
        prefix = symbol if is_selected else gutter
        attrs = selection_attr() if (is_selected and view.is_active) else curses.A_NORMAL
        if is_selected and not view.is_active:
            attrs = curses.A_BOLD
        text = truncate(f"{prefix}{display_name(entry)}", interior_width)
        try:
            stdscr.addnstr(y, row_x, text.ljust(interior_width), interior_width, attrs)
        except curses.error:
            pass


def render_status_area(
    browser: "DirPaneBrowser",
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    width: int,
) -> None:
    """Render the selected path (or a status message) and the key hints."""
    session = browser.session
    if browser.status_message:
        status_text = browser.status_message
        status_attr = error_attr()
    else:
        status_text = session.selected_file() or session.selected_directory()
        status_attr = curses.A_NORMAL

    try:
        stdscr.addnstr(origin_y, 0, truncate_end(status_text, width - 1), width - 1, status_attr)
        stdscr.addnstr(
            origin_y + 1, 0, truncate(browser.help_line, width - 1), width - 1, curses.A_DIM
        )
    except curses.error:
        pass


__all__ = ["display_name", "render_browser", "render_pane", "render_status_area"]
