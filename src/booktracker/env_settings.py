"""Environment-based settings using pydantic-settings.

Usage:
    from booktracker.env_settings import get_env_settings

    env = get_env_settings()
    print(env.log_level)  # From BOOKTRACKER_LOG_LEVEL env var

Environment Variables:
    BOOKTRACKER_LOG_LEVEL - Console logging level (default: "WARNING")
    BOOKTRACKER_LOG_FILE - Optional diagnostic log file (always DEBUG)
    BOOKTRACKER_ERROR_LOG_NAME - Error log file name beside the catalog
        (default: "errors.log")
    BOOKTRACKER_RICH_CONSOLE - Use rich log formatting on stderr (default: true)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from booktracker.paths import DEFAULT_ERROR_LOG_NAME

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class EnvSettings(BaseSettings):
    """Booktracker settings from environment variables.

    Use get_env_settings() to get a cached instance.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKTRACKER_",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Console logging level")
    log_file: Path | None = Field(default=None, description="Diagnostic log file")
    error_log_name: str = Field(
        default=DEFAULT_ERROR_LOG_NAME,
        description="Error log file name, created beside the catalog",
    )
    rich_console: bool = Field(default=True, description="Rich log formatting")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"BOOKTRACKER_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {v}")
        return upper

    @field_validator("error_log_name")
    @classmethod
    def validate_error_log_name(cls, v: str) -> str:
        """Error log name must be a bare file name."""
        if not v or Path(v).name != v:
            raise ValueError(f"BOOKTRACKER_ERROR_LOG_NAME must be a file name, got: {v!r}")
        return v


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings.

    Returns:
        EnvSettings instance read from the environment on first call.
    """
    return EnvSettings()


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings.

    Useful for testing to ensure fresh settings are loaded.
    """
    get_env_settings.cache_clear()


def load_env_settings_from_file(env_file: Path) -> EnvSettings:
    """Load environment settings from a specific .env file.

    Args:
        env_file: Path to .env file to load.

    Returns:
        EnvSettings instance with configuration from the file.
    """
    from dotenv import load_dotenv

    load_dotenv(env_file, override=True)

    clear_env_settings_cache()
    return get_env_settings()
