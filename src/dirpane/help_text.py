"""Build the key hint strip shown under the panes."""

from __future__ import annotations

from typing import Iterable, List, Mapping

from .commands import Command, describe_keys

HINT_ORDER = [
    (Command.MOVE_UP, "Up"),
    (Command.MOVE_DOWN, "Down"),
    (Command.PAGE_UP, "PgUp"),
    (Command.PAGE_DOWN, "PgDn"),
    (Command.SWITCH_FOCUS, "Switch pane"),
    (Command.RELOAD, "Reload"),
    (Command.QUIT, "Quit"),
]


def build_help_lines(bindings: Mapping[str, Iterable[str]]) -> List[str]:
    """Return ``key  action`` hints for every bound command."""
    lines: List[str] = []
    for command, message in HINT_ORDER:
        keys = describe_keys(bindings, command)
        if keys:
            lines.append(f"{keys} {message}")
    return lines


def build_help_line(bindings: Mapping[str, Iterable[str]]) -> str:
    return "  ".join(build_help_lines(bindings))


__all__ = ["build_help_line", "build_help_lines"]
