"""Data models for calendar source selection."""

import hashlib
import json
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..config.settings import DEFAULT_CALENDAR_ID, DEFAULT_MAX_RESULTS


class SourceType(str, Enum):
    """Which adapter serves a configuration."""

    ICS = "ics"
    GOOGLE = "google"
    UNCONFIGURED = "unconfigured"


class CalendarParams(BaseModel):
    """Per-call overrides; unset or empty fields fall back to settings.

    Accepts both snake_case and the camelCase names used by renderer payloads.
    """

    ics_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("ics_url", "icalUrl", "icsUrl")
    )
    calendar_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("calendar_id", "calendarId")
    )
    api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("api_key", "apiKey"))
    max_results: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("max_results", "maxResults")
    )

    model_config = ConfigDict(extra="ignore")


class CalendarSourceConfig(BaseModel):
    """Resolved calendar source configuration."""

    ics_url: Optional[str] = Field(default=None, description="iCal feed URL")
    calendar_id: str = Field(default=DEFAULT_CALENDAR_ID, description="Calendar id")
    api_key: Optional[str] = Field(default=None, description="Calendar API key")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, description="Result cap, passed through")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(cls, settings: Any, params: Optional[CalendarParams] = None) -> "CalendarSourceConfig":
        """Merge per-call params over settings, applying defaults.

        Empty strings count as absent and a falsy ``max_results`` uses the default.
        """
        params = params or CalendarParams()
        return cls(
            ics_url=params.ics_url or getattr(settings, "ics_url", None) or None,
            calendar_id=(
                params.calendar_id or getattr(settings, "calendar_id", None) or DEFAULT_CALENDAR_ID
            ),
            api_key=params.api_key or getattr(settings, "api_key", None) or None,
            max_results=(
                params.max_results or getattr(settings, "max_results", None) or DEFAULT_MAX_RESULTS
            ),
        )

    def signature(self) -> str:
        """Stable digest of every field that changes the fetched result."""
        payload = json.dumps(self.model_dump(mode="json"), sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()
