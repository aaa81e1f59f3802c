"""Utility functions for rendering."""

from __future__ import annotations

import curses

# Box drawing characters
BOX_TOP_LEFT = "┌"
BOX_TOP_RIGHT = "┐"
BOX_BOTTOM_LEFT = "└"
BOX_BOTTOM_RIGHT = "┘"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"


def scroll_offset_for(cursor_index: int, scroll_offset: int, viewport_height: int, length: int) -> int:
    """Return a scroll offset that keeps ``cursor_index`` on screen."""
    if viewport_height <= 0 or length <= 0:
        return 0
    if cursor_index < scroll_offset:
        scroll_offset = cursor_index
    elif cursor_index >= scroll_offset + viewport_height:
        scroll_offset = cursor_index - viewport_height + 1
    max_offset = max(length - viewport_height, 0)
    return max(0, min(scroll_offset, max_offset))


def draw_frame(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    origin_x: int,
    height: int,
    width: int,
    attr: int = 0,
) -> None:
    """Draw a rectangular box frame."""
    if height < 2 or width < 2:
        return

    top = origin_y
    bottom = origin_y + height - 1
    left = origin_x
    right = origin_x + width - 1

    try:
        stdscr.addstr(top, left, BOX_TOP_LEFT, attr)
        stdscr.addstr(top, right, BOX_TOP_RIGHT, attr)
        stdscr.addstr(bottom, left, BOX_BOTTOM_LEFT, attr)
        # The bottom-right cell of the screen raises after the write succeeds
        stdscr.addstr(bottom, right, BOX_BOTTOM_RIGHT, attr)
    except curses.error:
        pass

    try:
        for x_axis in range(left + 1, right):
            stdscr.addstr(top, x_axis, BOX_HORIZONTAL, attr)
            stdscr.addstr(bottom, x_axis, BOX_HORIZONTAL, attr)

        for y_axis in range(top + 1, bottom):
            stdscr.addstr(y_axis, left, BOX_VERTICAL, attr)
            stdscr.addstr(y_axis, right, BOX_VERTICAL, attr)
    except curses.error:
        pass


def draw_frame_title(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    origin_x: int,
    width: int,
    title: str,
    attr: int = curses.A_BOLD,
) -> None:
    """Overlay a title along the top border of a frame."""
    available = max(width - 4, 0)
    if available <= 0:
        return
    truncated = truncate_end(title, available)
    try:
        stdscr.addnstr(origin_y, origin_x + 2, truncated, available, attr)
    except curses.error:
        pass


def truncate(text: str, max_width: int) -> str:
    """Truncate text to fit within max_width, appending ellipsis if needed."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    if max_width <= 3:
        return text[:max_width]
    return text[: max_width - 3] + "..."


def truncate_end(text: str, max_width: int) -> str:
    """Truncate text from the end to fit within max_width."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    return text[-max_width:]


__all__ = [
    "BOX_TOP_LEFT",
    "BOX_TOP_RIGHT",
    "BOX_BOTTOM_LEFT",
    "BOX_BOTTOM_RIGHT",
    "BOX_HORIZONTAL",
    "BOX_VERTICAL",
    "draw_frame",
    "draw_frame_title",
    "scroll_offset_for",
    "truncate",
    "truncate_end",
]
