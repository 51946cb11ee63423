"""Utility functions and helpers package."""

from .helpers import as_datetime, local_now, parse_event_time, parse_iso_datetime, to_local_naive
from .logging import get_logger, setup_logging

__all__ = [
    "as_datetime",
    "get_logger",
    "local_now",
    "parse_event_time",
    "parse_iso_datetime",
    "setup_logging",
    "to_local_naive",
]
