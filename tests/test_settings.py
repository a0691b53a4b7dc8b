"""Tests for runtime settings (svg_maker/config/settings.py)."""

from pathlib import Path

import pytest

from svg_maker.config.settings import (
    SETTINGS,
    TRANSPORTS,
    get_all_settings,
    get_output_dir,
    get_setting,
    get_working_dir,
    set_setting,
)


class TestSettings:

    def test_known_settings(self):
        assert set(get_all_settings()) == {
            "transport", "host", "port", "output_dir", "working_dir", "log_level",
        }

    def test_unknown_setting(self):
        with pytest.raises(KeyError, match="Available settings"):
            get_setting("colour")

    def test_set_unknown_setting(self):
        with pytest.raises(KeyError):
            set_setting("colour", "red")

    def test_set_setting(self, monkeypatch):
        monkeypatch.setitem(SETTINGS, "port", SETTINGS["port"])

        set_setting("port", 8080)

        assert get_setting("port") == 8080

    def test_all_settings_is_copy(self):
        settings = get_all_settings()
        settings["port"] = -1

        assert get_setting("port") != -1

    def test_directories_are_absolute(self, tmp_path, monkeypatch):
        monkeypatch.setitem(SETTINGS, "output_dir", str(tmp_path / "out"))
        monkeypatch.setitem(SETTINGS, "working_dir", str(tmp_path))

        assert get_output_dir() == (tmp_path / "out").resolve()
        assert get_working_dir().is_absolute()

    def test_transports(self):
        assert TRANSPORTS == ("stdio", "sse")
        assert isinstance(get_working_dir(), Path)
