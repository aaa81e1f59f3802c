"""Color management for the dual pane browser."""

from __future__ import annotations

import curses
from enum import IntEnum


class ColorPair(IntEnum):
    """Color pair constants for curses."""
    DEFAULT = 0
    BORDER = 1
    ACTIVE_BORDER = 2
    TITLE = 3
    SELECTED = 4
    ERROR = 5


def init_colors() -> None:
    """Initialize curses color pairs.

    Call this after curses initialization and before rendering.
    """
    if not curses.has_colors():
        return

    curses.start_color()
    curses.use_default_colors()

    curses.init_pair(ColorPair.BORDER, curses.COLOR_WHITE, -1)
    curses.init_pair(ColorPair.ACTIVE_BORDER, curses.COLOR_YELLOW, -1)
    curses.init_pair(ColorPair.TITLE, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(ColorPair.SELECTED, curses.COLOR_BLUE, curses.COLOR_BLACK)
    curses.init_pair(ColorPair.ERROR, curses.COLOR_RED, -1)


def border_attr(is_active: bool) -> int:
    """Frame attribute; the focused pane gets the highlight color."""
    if not curses.has_colors():
        return curses.A_BOLD if is_active else curses.A_NORMAL
    if is_active:
        return curses.color_pair(ColorPair.ACTIVE_BORDER)
    return curses.color_pair(ColorPair.BORDER)


def title_attr() -> int:
    if not curses.has_colors():
        return curses.A_BOLD
    return curses.color_pair(ColorPair.TITLE) | curses.A_BOLD


def selection_attr() -> int:
    """Attribute for the highlighted row of the focused pane."""
    if not curses.has_colors():
        return curses.A_REVERSE
    # A_ITALIC is missing on some curses builds
    italic = getattr(curses, "A_ITALIC", 0)
    return curses.color_pair(ColorPair.SELECTED) | curses.A_REVERSE | italic


def error_attr() -> int:
    if not curses.has_colors():
        return curses.A_BOLD
    return curses.color_pair(ColorPair.ERROR) | curses.A_BOLD


__all__ = [
    "ColorPair",
    "border_attr",
    "error_attr",
    "init_colors",
    "selection_attr",
    "title_attr",
]
