"""Configuration package."""

from .settings import WeekGridSettings, get_settings, reset_settings

__all__ = ["WeekGridSettings", "get_settings", "reset_settings"]
