"""Tests for configuration management."""

import copy
from pathlib import Path

import pytest

from dirpane import config
from dirpane.commands import Command, build_keymap
from dirpane.help_text import build_help_line
from dirpane.config import (
    DEFAULT_CONFIG,
    _merge_config,
    get_browser_settings,
    get_key_bindings,
    get_last_root,
    load_config,
    save_config,
    save_last_root,
)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config module at a throwaway file."""
    path = tmp_path / "test_config.toml"
    monkeypatch.setattr(config, "CONFIG_FILE", path)
    return path


def test_missing_file_returns_defaults(config_file):
    assert not config_file.exists()
    assert load_config() == DEFAULT_CONFIG


def test_default_config_not_mutated(config_file):
    """Mutating a loaded config must not leak into DEFAULT_CONFIG."""
    original_default = copy.deepcopy(DEFAULT_CONFIG)

    loaded = load_config()
    loaded["keys"]["quit"].append("x")
    loaded["browser"]["page_size"] = 3

    assert DEFAULT_CONFIG == original_default
    assert load_config()["keys"]["quit"] == ["q", "Q"]


def test_merge_config_not_mutated():
    original_default = copy.deepcopy(DEFAULT_CONFIG)

    merged = _merge_config(DEFAULT_CONFIG, {"keys": {"quit": ["x"]}})
    merged["keys"]["move_up"].append("w")

    assert DEFAULT_CONFIG == original_default


def test_merge_config_preserves_user_values():
    default = {"a": 1, "b": {"c": 2, "d": 3}, "e": 4}
    user = {"b": {"c": 99}, "f": 5}

    merged = _merge_config(default, user)

    assert merged["b"]["c"] == 99
    assert merged["b"]["d"] == 3
    assert merged["a"] == 1
    assert merged["e"] == 4
    assert merged["f"] == 5


def test_save_and_load_config(config_file):
    custom = copy.deepcopy(DEFAULT_CONFIG)
    custom["browser"]["page_size"] = 10
    custom["keys"]["move_up"] = ["w"]

    save_config(custom)
    assert config_file.exists()

    loaded = load_config()
    assert loaded["browser"]["page_size"] == 10
    assert loaded["keys"]["move_up"] == ["w"]
    assert loaded["keys"]["quit"] == ["q", "Q"]


def test_partial_user_file_is_merged(config_file):
    config_file.write_text('[browser]\nshow_hidden = false\n', encoding="utf-8")

    settings = get_browser_settings()
    assert settings == {"page_size": 50, "show_hidden": False, "include_root": False}


def test_invalid_page_size_falls_back(config_file):
    config_file.write_text('[browser]\npage_size = -4\n', encoding="utf-8")
    assert get_browser_settings()["page_size"] == 50

    config_file.write_text('[browser]\npage_size = "many"\n', encoding="utf-8")
    assert get_browser_settings()["page_size"] == 50


def test_key_bindings_accept_single_string(config_file):
    config_file.write_text('[keys]\nquit = "x"\n', encoding="utf-8")

    bindings = get_key_bindings()
    assert bindings["quit"] == ["x"]
    assert bindings["move_down"] == ["n", "j", "KEY_DOWN"]


def test_session_root_round_trip(config_file):
    assert get_last_root() == "."
    save_last_root("/tmp/projects")
    assert get_last_root() == "/tmp/projects"


def test_corrupted_config_file_returns_defaults(config_file):
    config_file.write_text("this is not valid TOML {{{", encoding="utf-8")
    assert load_config() == DEFAULT_CONFIG


def test_config_file_creation_failure_doesnt_crash(monkeypatch, capsys):
    monkeypatch.setattr(config, "CONFIG_FILE", Path("/dev/null/invalid/path.toml"))

    save_config(DEFAULT_CONFIG)

    assert "Failed to save configuration" in capsys.readouterr().err


def test_rebinding_a_default_key_moves_it(config_file):
    """A key the user gives to another command leaves its default command."""
    config_file.write_text('[keys]\nquit = ["n"]\n', encoding="utf-8")

    bindings = get_key_bindings()
    assert bindings["quit"] == ["n"]
    assert bindings["move_down"] == ["j", "KEY_DOWN"]

    keymap = build_keymap(bindings)
    assert keymap[ord("n")] is Command.QUIT
    assert ord("q") not in keymap

    help_line = build_help_line(bindings)
    assert "n Quit" in help_line
    assert "n/j" not in help_line


def test_user_commands_keep_all_their_keys(config_file):
    config_file.write_text(
        '[keys]\nmove_down = ["s", "j"]\nmove_up = ["w", "n"]\n', encoding="utf-8"
    )

    keymap = build_keymap(get_key_bindings())
    assert keymap[ord("s")] is Command.MOVE_DOWN
    assert keymap[ord("w")] is Command.MOVE_UP
    assert keymap[ord("n")] is Command.MOVE_UP
    assert keymap[ord("q")] is Command.QUIT


def test_default_bindings_without_user_keys(config_file):
    assert get_key_bindings() == DEFAULT_CONFIG["keys"]
