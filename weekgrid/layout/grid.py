"""Lays canonical events out onto a seven-column, half-hour week grid."""

import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from ..events.models import CanonicalEvent
from ..events.window import WeekWindow
from .models import SLOTS_PER_HOUR, DayColumn, GridConfig, TimedPlacement, TimeSlot, WeekGrid

logger = logging.getLogger(__name__)

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def format_day_header(day: date) -> str:
    """Column header such as ``"Mon 3/17"``."""
    return f"{DAY_NAMES[day.isoweekday() % 7]} {day.month}/{day.day}"


def format_time_label(hour: int, minute: int) -> str:
    """``"7am"``/``"12pm"`` on the hour, blank on the half hour."""
    if minute != 0:
        return ""
    period = "pm" if hour >= 12 else "am"
    display_hour = hour - 12 if hour > 12 else (12 if hour == 0 else hour)
    return f"{display_hour}{period}"


class GridLayoutEngine:
    """Assigns events to day columns and timed events to row offsets.

    Overlapping timed events share the same offset; no side-by-side tiling
    is attempted.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()

    def slot_index(self, moment: datetime) -> int:
        """Half-hour row of ``moment`` relative to the origin (may be negative)."""
        return (moment.hour - self.config.origin_hour) * SLOTS_PER_HOUR + (
            1 if moment.minute >= 30 else 0
        )

    def place_event(self, event: CanonicalEvent) -> TimedPlacement:
        offset = self.slot_index(event.start_datetime)
        end_offset = self.slot_index(event.end_datetime)
        return TimedPlacement(event=event, offset=offset, height=max(1, end_offset - offset))

    def time_slots(self) -> List[TimeSlot]:
        return [
            TimeSlot(hour=hour, minute=minute, label=format_time_label(hour, minute))
            for hour in range(self.config.origin_hour, self.config.end_hour + 1)
            for minute in (0, 30)
        ]

    def layout(self, events: Iterable[CanonicalEvent], window: WeekWindow) -> WeekGrid:
        """Bucket events by local start date into the window's seven columns.

        Events starting outside the window are left out.
        """
        days = [
            DayColumn(index=index, date=day, header=format_day_header(day))
            for index, day in enumerate(window.days())
        ]
        by_date: Dict[date, DayColumn] = {column.date: column for column in days}

        dropped = 0
        for event in events:
            column = by_date.get(event.start_date)
            if column is None:
                dropped += 1
                continue
            if event.all_day:
                column.all_day.append(event)
            else:
                column.timed.append(self.place_event(event))

        if dropped:
            logger.debug(f"{dropped} events fall outside the week grid")

        return WeekGrid(window=window, config=self.config, days=days, time_slots=self.time_slots())
