"""Map raw curses key codes onto browser commands."""

from __future__ import annotations

import curses
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    SWITCH_FOCUS = "switch_focus"
    RELOAD = "reload"
    QUIT = "quit"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


# Names accepted in the config besides single characters and curses KEY_* names.
SPECIAL_KEYS = {
    "TAB": ord("\t"),
    "ENTER": ord("\n"),
    "SPACE": ord(" "),
    "ESC": 27,
}


def key_code_for(name: str) -> Optional[int]:
    """Resolve a configured key name to a curses key code."""
    if len(name) == 1:
        return ord(name)
    if name in SPECIAL_KEYS:
        return SPECIAL_KEYS[name]
    if name.startswith("KEY_"):
        code = getattr(curses, name, None)
        if isinstance(code, int):
            return code
    return None


def build_keymap(bindings: Mapping[str, Iterable[str]]) -> Dict[int, Command]:
    """Turn ``{command_name: [key, ...]}`` into ``{key_code: Command}``.

    Unknown command or key names are skipped.  When two commands claim the
    same key the one listed first wins.
    """
    keymap: Dict[int, Command] = {}
    for command_name, keys in bindings.items():
        try:
            command = Command(command_name)
        except ValueError:
            continue
        for key in keys:
            code = key_code_for(key)
            if code is not None:
                keymap.setdefault(code, command)
    return keymap


def translate_key(keymap: Mapping[int, Command], key_code: int) -> Optional[Command]:
    return keymap.get(key_code)


def describe_keys(bindings: Mapping[str, Iterable[str]], command: Command) -> str:
    """Return a short human label for the keys bound to ``command``."""
    keys = list(bindings.get(command.value, []))
    return "/".join(key.replace("KEY_", "").lower() if len(key) > 1 else key for key in keys)


__all__ = [
    "Command",
    "SPECIAL_KEYS",
    "build_keymap",
    "describe_keys",
    "key_code_for",
    "translate_key",
]
