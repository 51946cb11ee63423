"""Canonical event model shared by every calendar source."""

from datetime import date, datetime
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..utils.helpers import as_datetime, parse_event_time

DEFAULT_EVENT_TITLE = "Untitled Event"

EventTime = Union[datetime, date]


class CanonicalEvent(BaseModel):
    """Source-agnostic calendar event.

    ``start``/``end`` are local dates for all-day events and naive local
    datetimes for timed events.
    """

    id: str = Field(..., description="Source-unique event id")
    title: str = Field(default=DEFAULT_EVENT_TITLE, description="Event title")
    start: EventTime = Field(..., description="Event start")
    end: EventTime = Field(..., description="Event end")
    all_day: bool = Field(default=False, serialization_alias="allDay", description="All-day flag")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> EventTime:
        if value is None or value == "":
            raise ValueError("event time is required")
        return parse_event_time(value)

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, value: Any) -> str:
        return str(value) if value else DEFAULT_EVENT_TITLE

    @model_validator(mode="after")
    def _normalize_bounds(self) -> "CanonicalEvent":
        if self.all_day:
            # All-day bounds carry no time-of-day component
            if isinstance(self.start, datetime):
                self.start = self.start.date()
            if isinstance(self.end, datetime):
                self.end = self.end.date()
        else:
            self.start = as_datetime(self.start)
            self.end = as_datetime(self.end)

        if as_datetime(self.end) < as_datetime(self.start):
            self.end = self.start
        return self

    @property
    def start_datetime(self) -> datetime:
        """Start as a local datetime (all-day events start at midnight)."""
        return as_datetime(self.start)

    @property
    def end_datetime(self) -> datetime:
        """End as a local datetime (all-day events end at midnight)."""
        return as_datetime(self.end)

    @property
    def start_date(self) -> date:
        """Local calendar date the event starts on."""
        return self.start_datetime.date()

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the plain-data shape handed to renderers."""
        return self.model_dump(mode="json", by_alias=True)


class CalendarData(BaseModel):
    """Result handed to the rendering collaborator."""

    events: List[CanonicalEvent] = Field(default_factory=list)
    start_date: datetime = Field(..., serialization_alias="startDate")

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("start_date")
    def serialize_start_date(self, dt: datetime) -> str:
        """Serialize as an offset-qualified ISO-8601 instant."""
        return dt.astimezone().isoformat()

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to ``{"events": [...], "startDate": "..."}``."""
        return self.model_dump(mode="json", by_alias=True)
