"""Settings management using Pydantic for type validation and configuration."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_ID = "primary"
DEFAULT_MAX_RESULTS = 50
DEFAULT_CACHE_TTL = 300


class WeekGridSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Calendar feed
    ics_url: Optional[str] = Field(default=None, description="iCal feed URL")

    # Remote calendar API
    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("WEEKGRID_API_KEY", "GOOGLE_CALENDAR_API_KEY"),
        description="Calendar API key",
    )
    calendar_id: str = Field(default=DEFAULT_CALENDAR_ID, description="Calendar id to query")
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS, description="Maximum events requested from the API"
    )
    api_base_url: str = Field(
        default="https://www.googleapis.com/calendar/v3",
        description="Base URL of the calendar API",
    )

    # Caching
    cache_ttl: int = Field(default=DEFAULT_CACHE_TTL, description="Cache time-to-live in seconds")

    # Network settings
    app_name: str = Field(default="WeekGrid", description="Application name")
    request_timeout: int = Field(default=30, description="HTTP request timeout in seconds")

    # Week grid
    grid_origin_hour: int = Field(default=7, ge=0, le=23, description="First hour on the grid")
    grid_end_hour: int = Field(default=20, ge=0, le=23, description="Last hour on the grid")

    # Logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    config_file: Optional[Path] = Field(default=None, description="YAML configuration file")
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "weekgrid")

    model_config = SettingsConfigDict(
        env_prefix="WEEKGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML config file, preferring an explicit path over the user config dir."""
        if self.config_file is not None:
            return self.config_file if self.config_file.exists() else None

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _apply(self, name: str, value: Any) -> None:
        """Set a YAML value unless it was given explicitly or via the environment."""
        if value is None or name in self.model_fields_set:
            return
        setattr(self, name, value)

    def _load_source_config(self, config_data: dict) -> None:
        """Load calendar source sections from YAML data."""
        ics_config = config_data.get("ics") or {}
        self._apply("ics_url", ics_config.get("url"))

        google_config = config_data.get("google") or {}
        self._apply("api_key", google_config.get("api_key"))
        self._apply("calendar_id", google_config.get("calendar_id"))
        self._apply("max_results", google_config.get("max_results"))
        self._apply("api_base_url", google_config.get("base_url"))

    def _load_basic_settings(self, config_data: dict) -> None:
        """Load flat application settings from YAML data."""
        for setting in ("cache_ttl", "request_timeout", "log_level", "log_file"):
            self._apply(setting, config_data.get(setting))

        grid_config = config_data.get("grid") or {}
        self._apply("grid_origin_hour", grid_config.get("origin_hour"))
        self._apply("grid_end_hour", grid_config.get("end_hour"))

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open() as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
            return

        if not isinstance(config_data, dict):
            return

        self._load_source_config(config_data)
        self._load_basic_settings(config_data)
        logger.debug(f"Loaded YAML configuration from {config_file}")


_settings_instance: Optional[WeekGridSettings] = None


def get_settings() -> WeekGridSettings:
    """Get the global settings instance, creating it lazily if needed."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = WeekGridSettings()
    return _settings_instance


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    global _settings_instance
    _settings_instance = None
