"""Tests for the renderer, using a mocked curses window."""

from __future__ import annotations

import curses
from unittest.mock import Mock, patch

from conftest import FakeLister
from dirpane.browser import DirPaneBrowser
from dirpane.render import EMPTY_PLACEHOLDER, display_name, render_browser
from dirpane.render_utils import scroll_offset_for, truncate, truncate_end


def _screen(height: int = 24, width: int = 80) -> Mock:
    stdscr = Mock()
    stdscr.getmaxyx.return_value = (height, width)
    return stdscr


def _drawn_text(stdscr: Mock) -> str:
    pieces = []
    for call in stdscr.addnstr.call_args_list + stdscr.addstr.call_args_list:
        pieces.append(str(call.args[2]))
    return "\n".join(pieces)


@patch("curses.has_colors", return_value=False)
def test_render_draws_both_panes(mock_has_colors, scenario_lister: FakeLister) -> None:
    browser = DirPaneBrowser("root", lister=scenario_lister)
    stdscr = _screen()

    render_browser(browser, stdscr)

    text = _drawn_text(stdscr)
    assert "##docs" in text
    assert "  src" in text
    assert ">>readme.md" in text
    assert " Dir " in text
    assert " Files " in text
    stdscr.refresh.assert_called_once()


@patch("curses.has_colors", return_value=False)
def test_render_does_not_touch_session(mock_has_colors, scenario_lister: FakeLister) -> None:
    browser = DirPaneBrowser("root", lister=scenario_lister)
    before = browser.session.pane_views()
    calls_before = len(scenario_lister.calls)

    render_browser(browser, _screen())

    assert browser.session.pane_views() == before
    assert len(scenario_lister.calls) == calls_before


@patch("curses.has_colors", return_value=False)
def test_render_empty_pane_shows_placeholder(mock_has_colors) -> None:
    lister = FakeLister(dirs={"root": ["empty"]}, files={"empty": []})
    browser = DirPaneBrowser("root", lister=lister)
    stdscr = _screen()

    render_browser(browser, stdscr)

    assert EMPTY_PLACEHOLDER in _drawn_text(stdscr)


@patch("curses.has_colors", return_value=False)
def test_render_shows_enumeration_error(mock_has_colors, scenario_lister: FakeLister) -> None:
    scenario_lister.failing.add("docs")
    browser = DirPaneBrowser("root", lister=scenario_lister)
    stdscr = _screen()

    render_browser(browser, stdscr)

    assert "Permission denied reading directory: docs" in _drawn_text(stdscr)


@patch("curses.has_colors", return_value=False)
def test_render_small_terminal(mock_has_colors, scenario_lister: FakeLister) -> None:
    browser = DirPaneBrowser("root", lister=scenario_lister)
    stdscr = _screen(height=3, width=40)

    render_browser(browser, stdscr)

    stdscr.addstr.assert_called_once_with(0, 0, "Terminal too small for browser.")


@patch("curses.has_colors", return_value=False)
def test_render_scrolls_to_keep_cursor_visible(mock_has_colors) -> None:
    lister = FakeLister(dirs={"root": [f"d{i}" for i in range(40)]}, files={f"d{i}": [] for i in range(40)})
    browser = DirPaneBrowser("root", lister=lister)
    browser.session.dir_pane.page_down(30)
    browser.session.resync()

    render_browser(browser, _screen(height=12))

    # 12 rows minus status strip (2) minus frame (2) leaves 8 visible rows
    assert browser.scroll_offsets["Dir"] == 30 - 8 + 1


def test_scroll_offset_for():
    assert scroll_offset_for(0, 0, 5, 0) == 0
    assert scroll_offset_for(7, 0, 5, 20) == 3
    assert scroll_offset_for(2, 3, 5, 20) == 2
    assert scroll_offset_for(19, 0, 5, 20) == 15
    assert scroll_offset_for(4, 10, 5, 6) == 1


def test_display_name():
    assert display_name("./docs") == "docs"
    assert display_name("/tmp/src/") == "src"
    assert display_name(".") == "."
    assert display_name("/") == "/"


def test_truncate_helpers():
    assert truncate("abcdef", 4) == "a..."
    assert truncate("abc", 4) == "abc"
    assert truncate("abcdef", 2) == "ab"
    assert truncate("abc", 0) == ""
    assert truncate_end("/very/long/path", 5) == "/path"
