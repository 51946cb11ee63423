"""Current-week window computation and filtering."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional

from ..utils.helpers import local_now, to_local_naive
from .models import CanonicalEvent

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class WeekWindow:
    """Monday 00:00:00 through the last millisecond before the following Monday."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def days(self) -> List[date]:
        """The seven local calendar dates of the window, Monday first."""
        first = self.start.date()
        return [first + timedelta(days=offset) for offset in range(DAYS_IN_WEEK)]

    @property
    def time_min(self) -> str:
        """Window start as an offset-qualified RFC 3339 timestamp."""
        return self.start.astimezone().isoformat()

    @property
    def time_max(self) -> str:
        """Window end as an offset-qualified RFC 3339 timestamp."""
        return self.end.astimezone().isoformat(timespec="milliseconds")


def get_week_window(now: Optional[datetime] = None) -> WeekWindow:
    """Compute the local week containing ``now``.

    Args:
        now: Reference instant, defaults to the current local time. Aware
            datetimes are converted to local wall-clock time first.

    Returns:
        WeekWindow whose start is the Monday at local midnight
    """
    current = to_local_naive(now) if now is not None else local_now()

    day_of_week = current.isoweekday() % 7  # Sunday=0 .. Saturday=6
    diff = current.day - day_of_week + (-6 if day_of_week == 0 else 1)
    monday = current.date() + timedelta(days=diff - current.day)

    start = datetime.combine(monday, time.min)
    end = start + timedelta(days=DAYS_IN_WEEK) - timedelta(milliseconds=1)
    return WeekWindow(start=start, end=end)


def filter_events_to_window(
    events: Iterable[CanonicalEvent], window: WeekWindow
) -> List[CanonicalEvent]:
    """Keep events whose start falls inside the window, preserving order."""
    return [event for event in events if window.contains(event.start_datetime)]
