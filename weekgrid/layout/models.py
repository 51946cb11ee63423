"""Plain-data week grid produced by the layout engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from ..events.models import CanonicalEvent
from ..events.window import WeekWindow

SLOTS_PER_HOUR = 2  # half-hour rows


@dataclass(frozen=True)
class GridConfig:
    """Vertical extent of the timed grid."""

    origin_hour: int = 7
    end_hour: int = 20

    def __post_init__(self) -> None:
        if not 0 <= self.origin_hour <= 23 or not 0 <= self.end_hour <= 23:
            raise ValueError("grid hours must be within 0-23")
        if self.end_hour < self.origin_hour:
            raise ValueError("grid end hour precedes origin hour")

    @property
    def row_count(self) -> int:
        return (self.end_hour - self.origin_hour + 1) * SLOTS_PER_HOUR


@dataclass(frozen=True)
class TimeSlot:
    hour: int
    minute: int
    label: str


@dataclass(frozen=True)
class TimedPlacement:
    """Row offset and height of a timed event, in half-hour rows from the origin."""

    event: CanonicalEvent
    offset: int
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.event.to_payload(), "offset": self.offset, "height": self.height}


@dataclass
class DayColumn:
    index: int
    date: date
    header: str
    all_day: List[CanonicalEvent] = field(default_factory=list)
    timed: List[TimedPlacement] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "date": self.date.isoformat(),
            "header": self.header,
            "allDay": [event.to_payload() for event in self.all_day],
            "timed": [placement.to_dict() for placement in self.timed],
        }


@dataclass
class WeekGrid:
    window: WeekWindow
    config: GridConfig
    days: List[DayColumn]
    time_slots: List[TimeSlot]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startDate": self.window.start.astimezone().isoformat(),
            "originHour": self.config.origin_hour,
            "rowCount": self.config.row_count,
            "timeSlots": [
                {"hour": slot.hour, "minute": slot.minute, "label": slot.label}
                for slot in self.time_slots
            ],
            "days": [day.to_dict() for day in self.days],
        }
