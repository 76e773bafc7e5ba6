"""Tests for pydantic-settings based environment configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest
from pydantic import ValidationError

from booktracker.env_settings import (
    EnvSettings,
    clear_env_settings_cache,
    get_env_settings,
    load_env_settings_from_file,
)


class TestEnvSettings:
    """Tests for EnvSettings."""

    def test_default_values(self) -> None:
        """Test default values when no env vars set."""
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = EnvSettings()
            assert settings.log_level == "WARNING"
            assert settings.log_file is None
            assert settings.error_log_name == "errors.log"
            assert settings.rich_console is True

    def test_loads_from_env(self) -> None:
        """Test loading from environment variables."""
        env = {
            "BOOKTRACKER_LOG_LEVEL": "debug",
            "BOOKTRACKER_LOG_FILE": "/tmp/booktracker.log",
            "BOOKTRACKER_ERROR_LOG_NAME": "catalog-errors.log",
            "BOOKTRACKER_RICH_CONSOLE": "false",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = EnvSettings()
            assert settings.log_level == "DEBUG"
            assert settings.log_file == Path("/tmp/booktracker.log")
            assert settings.error_log_name == "catalog-errors.log"
            assert settings.rich_console is False

    def test_invalid_log_level(self) -> None:
        """Unknown level names are rejected."""
        with (
            mock.patch.dict(os.environ, {"BOOKTRACKER_LOG_LEVEL": "LOUD"}, clear=True),
            pytest.raises(ValidationError, match="BOOKTRACKER_LOG_LEVEL"),
        ):
            EnvSettings()

    @pytest.mark.parametrize("name", ["logs/errors.log", ""])
    def test_error_log_name_must_be_file_name(self, name: str) -> None:
        """Paths are not accepted as the error log name."""
        with (
            mock.patch.dict(os.environ, {"BOOKTRACKER_ERROR_LOG_NAME": name}, clear=True),
            pytest.raises(ValidationError, match="BOOKTRACKER_ERROR_LOG_NAME"),
        ):
            EnvSettings()


class TestSettingsCache:
    """Tests for cached settings access."""

    def test_cached(self) -> None:
        """Same instance until cache is cleared."""
        first = get_env_settings()
        assert get_env_settings() is first
        clear_env_settings_cache()
        assert get_env_settings() is not first

    def test_load_from_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values from a .env file are picked up."""
        env_file = tmp_path / ".env"
        env_file.write_text("BOOKTRACKER_LOG_LEVEL=ERROR\n", encoding="utf-8")
        # registered so monkeypatch restores it after load_dotenv sets it
        monkeypatch.setenv("BOOKTRACKER_LOG_LEVEL", "WARNING")

        settings = load_env_settings_from_file(env_file)
        assert settings.log_level == "ERROR"
