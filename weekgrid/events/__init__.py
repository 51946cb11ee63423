"""Canonical event model and week window."""

from .models import DEFAULT_EVENT_TITLE, CalendarData, CanonicalEvent
from .window import WeekWindow, filter_events_to_window, get_week_window

__all__ = [
    "DEFAULT_EVENT_TITLE",
    "CalendarData",
    "CanonicalEvent",
    "WeekWindow",
    "filter_events_to_window",
    "get_week_window",
]
