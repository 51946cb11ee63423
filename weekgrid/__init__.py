"""Weekly calendar ingestion, caching and grid layout."""

from .cache import EventCache
from .config import WeekGridSettings
from .events import CalendarData, CanonicalEvent, WeekWindow, get_week_window
from .layout import GridConfig, GridLayoutEngine
from .sources import CalendarParams, CalendarSourceConfig

__version__ = "1.0.0"

__all__ = [
    "CalendarData",
    "CalendarParams",
    "CalendarSourceConfig",
    "CanonicalEvent",
    "EventCache",
    "GridConfig",
    "GridLayoutEngine",
    "WeekGridSettings",
    "WeekWindow",
    "get_week_window",
]
