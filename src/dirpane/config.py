"""Configuration file management for dirpane."""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict, List

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

# Default configuration file location
CONFIG_FILE = Path.home() / ".dirpane.toml"

# Default configuration
DEFAULT_CONFIG = {
    "browser": {
        "page_size": 50,
        "show_hidden": True,
        "include_root": False,
    },
    "keys": {
        "move_up": ["p", "k", "KEY_UP"],
        "move_down": ["n", "j", "KEY_DOWN"],
        "page_up": ["KEY_PPAGE"],
        "page_down": ["KEY_NPAGE"],
        "switch_focus": ["TAB", "KEY_LEFT", "KEY_RIGHT", "KEY_BTAB"],
        "reload": ["r"],
        "quit": ["q", "Q"],
    },
    "session": {
        "root_directory": ".",
    },
}


def _load_user_config() -> Dict[str, Any]:
    """Return the file's own contents, without defaults; empty if unusable."""
    if not CONFIG_FILE.exists():
        return {}

    try:
        with open(CONFIG_FILE, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError):
        # Unreadable or corrupted config falls back to defaults
        return {}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    # Merge with defaults to ensure all keys exist
    return _merge_config(DEFAULT_CONFIG, _load_user_config())


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "wb") as f:
            tomli_w.dump(config, f)
    except (OSError, TypeError, ValueError) as err:
        # Don't break the app if config save fails, but inform the user
        print(f"Warning: Failed to save configuration to {CONFIG_FILE}: {err}", file=sys.stderr)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def get_browser_settings() -> Dict[str, Any]:
    """Get browser behaviour settings with sane types."""
    defaults = DEFAULT_CONFIG["browser"]
    settings = load_config().get("browser", {})
    if not isinstance(settings, dict):
        settings = {}
    page_size = settings.get("page_size", defaults["page_size"])
    if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
        page_size = defaults["page_size"]
    return {
        "page_size": page_size,
        "show_hidden": bool(settings.get("show_hidden", defaults["show_hidden"])),
        "include_root": bool(settings.get("include_root", defaults["include_root"])),
    }


def _clean_bindings(table: Any) -> Dict[str, List[str]]:
    """Normalise a ``[keys]`` table to ``{command_name: [key, ...]}``."""
    if not isinstance(table, dict):
        return {}
    result: Dict[str, List[str]] = {}
    for name, keys in table.items():
        if isinstance(keys, str):
            keys = [keys]
        if isinstance(keys, list):
            result[name] = [key for key in keys if isinstance(key, str)]
    return result


def get_key_bindings() -> Dict[str, List[str]]:
    """Get key bindings as ``{command_name: [key, ...]}``.

    Commands set in the user's file come first.  A default key that the
    user bound to some other command is dropped from its default command,
    so a rebinding always takes effect.
    """
    user = _clean_bindings(_load_user_config().get("keys", {}))
    defaults = _clean_bindings(DEFAULT_CONFIG["keys"])
    claimed = {key for keys in user.values() for key in keys}

    result: Dict[str, List[str]] = dict(user)
    for name, keys in defaults.items():
        if name not in result:
            result[name] = [key for key in keys if key not in claimed]
    return result


def get_last_root() -> str:
    """Get the root directory used in the previous session."""
    config = load_config()
    return config.get("session", {}).get("root_directory", ".")


def save_last_root(root: str) -> None:
    """Remember the root directory for the next session."""
    config = load_config()
    if "session" not in config:
        config["session"] = {}
    config["session"]["root_directory"] = root
    save_config(config)


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "get_browser_settings",
    "get_key_bindings",
    "get_last_root",
    "save_last_root",
]
