"""Response models for the calendar events-list endpoint."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..events.models import CanonicalEvent


class GoogleEventTime(BaseModel):
    """``start``/``end`` object: exactly one of ``dateTime`` or ``date`` is normally set."""

    date_time: Optional[str] = Field(default=None, alias="dateTime")
    date: Optional[str] = None
    time_zone: Optional[str] = Field(default=None, alias="timeZone")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def value(self) -> str:
        return self.date_time or self.date or ""


class GoogleCalendarEvent(BaseModel):
    """Single item of an events-list response."""

    id: Optional[str] = None
    summary: Optional[str] = None
    status: Optional[str] = None
    start: GoogleEventTime = Field(default_factory=GoogleEventTime)
    end: GoogleEventTime = Field(default_factory=GoogleEventTime)

    model_config = ConfigDict(extra="ignore")

    def to_canonical(self, index: int) -> CanonicalEvent:
        """Map to a canonical event.

        Raises:
            ValueError: If the item has no usable start or end
        """
        return CanonicalEvent(
            id=self.id or f"event-{index}",
            title=self.summary or "",
            start=self.start.value,
            end=self.end.value,
            all_day=bool(self.start.date),
        )


class GoogleCalendarResponse(BaseModel):
    """Events-list response body."""

    items: Optional[List[GoogleCalendarEvent]] = None

    model_config = ConfigDict(extra="ignore")
