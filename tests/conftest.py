"""Pytest configuration and shared fixtures for tests."""

import json

import pytest

from Calculator import config_manager


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point config_manager at throwaway files so tests never touch the real config.json."""
    config_file = tmp_path / "config.json"
    strings_file = tmp_path / "ui_strings.json"
    monkeypatch.setattr(config_manager, "config_json", config_file)
    monkeypatch.setattr(config_manager, "ui_strings", strings_file)
    return config_file


@pytest.fixture
def write_settings(isolated_settings):
    """Write a settings dict to the isolated config.json."""
    def _write(settings):
        isolated_settings.write_text(json.dumps(settings), encoding="utf-8")
        return isolated_settings
    return _write
