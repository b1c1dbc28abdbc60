"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_base_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("api_base_url must start with http:// or https://")
    return v.rstrip("/")


def _check_timezone(v: str) -> str:
    try:
        ZoneInfo(v)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
    return v


def _check_interval(v: int) -> int:
    if v <= 0:
        raise ValueError("refresh intervals must be positive")
    return v


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Outpass store API configuration
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the outpass backend (without the /api prefix)",
    )
    api_timeout_seconds: float = Field(
        default=30, description="Timeout for outpass API requests in seconds"
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token forwarded to the outpass API (obtained out of band)",
    )

    # Time handling
    timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone used for naive timestamps from the API and for display",
    )

    # Polling cadence
    board_refresh_interval_seconds: int = Field(
        default=30, description="Interval between approved/active board refreshes in seconds"
    )
    activity_refresh_interval_seconds: int = Field(
        default=60, description="Interval between today's activity refreshes in seconds"
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # Optional TOML file overriding [api] and [polling] settings
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [api] and [polling] sections",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate the base URL is http(s) and strip trailing slashes."""
        return _normalize_base_url(v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        return _check_timezone(v)

    @field_validator("board_refresh_interval_seconds", "activity_refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate refresh intervals are positive."""
        return _check_interval(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    @property
    def tzinfo(self) -> ZoneInfo:
        """Configured timezone as a tzinfo."""
        return ZoneInfo(self.timezone)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file, applying [api] and [polling] settings.

        Returns the parsed TOML data. Does nothing when no file is configured.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        if not isinstance(api, dict):
            raise ValueError("TOML config 'api' must be a table")
        if "base_url" in api:
            self.api_base_url = _normalize_base_url(api["base_url"])
        if "timeout_seconds" in api:
            self.api_timeout_seconds = api["timeout_seconds"]
        if "timezone" in api:
            self.timezone = _check_timezone(api["timezone"])

        polling = toml_data.get("polling", {})
        if not isinstance(polling, dict):
            raise ValueError("TOML config 'polling' must be a table")
        if "board_refresh_interval_seconds" in polling:
            self.board_refresh_interval_seconds = _check_interval(
                polling["board_refresh_interval_seconds"]
            )
        if "activity_refresh_interval_seconds" in polling:
            self.activity_refresh_interval_seconds = _check_interval(
                polling["activity_refresh_interval_seconds"]
            )

        return toml_data
