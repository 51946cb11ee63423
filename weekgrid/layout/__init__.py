"""Week grid layout."""

from .grid import GridLayoutEngine, format_day_header, format_time_label
from .models import DayColumn, GridConfig, TimedPlacement, TimeSlot, WeekGrid

__all__ = [
    "DayColumn",
    "GridConfig",
    "GridLayoutEngine",
    "TimeSlot",
    "TimedPlacement",
    "WeekGrid",
    "format_day_header",
    "format_time_label",
]
