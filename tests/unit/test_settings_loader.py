"""Unit tests for the settings loader"""

import tempfile
from pathlib import Path

from extcommands.config.loader import invalidate_settings_cache, load_settings
from extcommands.config.schema import CommandsSettings


def test_defaults_without_file():
    settings = load_settings(Path("/nonexistent/settings.json"))

    assert isinstance(settings, CommandsSettings)
    assert settings.extension_point == "commands"
    assert settings.require_when is False
    assert settings.allow_empty_strings is False


def test_load_json_with_env_vars(monkeypatch):
    monkeypatch.setenv("EXT_ROOT", "/opt/extensions")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "extcommands.json"
        path.write_text('{"require_when": true, "extensions_dirs": ["${EXT_ROOT}", "${UNSET_VAR_X}"]}')

        settings = load_settings(path)

    assert settings.require_when is True
    assert settings.extensions_dirs == ["/opt/extensions", "${UNSET_VAR_X}"]


def test_load_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "extcommands.yaml"
        path.write_text("extension_point: menus\nallow_empty_strings: yes\n")

        settings = load_settings(path)

    assert settings.extension_point == "menus"
    assert settings.allow_empty_strings is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("EXTCOMMANDS_REQUIRE_WHEN", "true")
    monkeypatch.setenv("EXTCOMMANDS_MANIFEST_NAME", "extension.json")

    settings = load_settings(Path("/nonexistent/settings.json"))

    assert settings.require_when is True
    assert settings.manifest_name == "extension.json"


def test_invalid_file_falls_back_to_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "extcommands.json"
        path.write_text('{"require_when": {"nested": 1}}')

        settings = load_settings(path)

    assert settings == CommandsSettings()


def test_cache_and_invalidate():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "extcommands.json"
        path.write_text('{"extension_point": "first"}')
        assert load_settings(path).extension_point == "first"

        path.write_text('{"extension_point": "second"}')
        assert load_settings(path).extension_point == "first"

        invalidate_settings_cache()
        assert load_settings(path).extension_point == "second"


def test_explicit_path_bypasses_cache_of_other_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        first = Path(tmpdir) / "first.json"
        first.write_text('{"extension_point": "first"}')
        second = Path(tmpdir) / "second.yaml"
        second.write_text("extension_point: second\n")

        assert load_settings(first).extension_point == "first"
        assert load_settings(second).extension_point == "second"
        assert load_settings(first).extension_point == "first"
