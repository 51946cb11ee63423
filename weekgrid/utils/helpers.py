"""General utility functions and helpers."""

import logging
import re
from datetime import date, datetime, time
from typing import Optional, Union

logger = logging.getLogger(__name__)

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_local_naive(dt: datetime) -> datetime:
    """Convert a datetime to naive local wall-clock time.

    Naive datetimes are assumed to already be local and are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def local_now() -> datetime:
    """Get the current local wall-clock time as a naive datetime."""
    return datetime.now()


def parse_iso_datetime(dt_string: Optional[str]) -> Optional[datetime]:
    """Parse ISO datetime string with error handling.

    Args:
        dt_string: ISO datetime string

    Returns:
        Parsed datetime or None if parsing fails
    """
    if dt_string is None:
        logger.debug("Failed to parse datetime 'None': Input is None")
        return None

    try:
        if dt_string.endswith("Z"):
            dt_string = dt_string[:-1] + "+00:00"

        return datetime.fromisoformat(dt_string)
    except (ValueError, TypeError) as e:
        logger.debug(f"Failed to parse datetime '{dt_string}': {e}")
        return None


def parse_event_time(value: Union[str, date, datetime]) -> Union[date, datetime]:
    """Parse an event boundary into a local date or a naive local datetime.

    A bare ``YYYY-MM-DD`` string is a local calendar date, never UTC midnight.
    Anything else must be an ISO date-time; offsets are converted to local time.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if _DATE_ONLY.match(text):
        return date.fromisoformat(text)

    parsed = parse_iso_datetime(text)
    if parsed is None:
        raise ValueError(f"Invalid event time: {value!r}")
    return to_local_naive(parsed)


def as_datetime(value: Union[date, datetime]) -> datetime:
    """Promote a date to local midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)
