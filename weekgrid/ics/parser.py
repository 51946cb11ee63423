"""iCalendar feed parser built on the icalendar library.

Each ``VEVENT`` component is mapped independently; a component that cannot
be mapped is skipped and recorded without affecting its siblings.
"""

import logging
from datetime import date, datetime
from typing import Any, Union

from icalendar import Calendar
from icalendar.cal import Component
from pydantic import ValidationError

from ..events.models import CanonicalEvent
from .exceptions import ICSParseError
from .models import ICSParseResult

logger = logging.getLogger(__name__)

MAX_ICS_SIZE_BYTES = 50 * 1024 * 1024  # 50MB limit
MAX_ICS_SIZE_WARNING = 10 * 1024 * 1024  # 10MB warning threshold


def component_time(component: Component, name: str) -> Union[date, datetime]:
    """Decoded DATE or DATE-TIME value of property ``name``.

    Raises:
        ValueError: If the property is missing or its value could not be parsed
    """
    prop = component.get(name)
    if prop is None:
        raise ValueError(f"missing {name}")
    try:
        value = prop.dt
    except AttributeError:
        raise ValueError(f"unreadable {name}: {prop}")
    if not isinstance(value, date):
        raise ValueError(f"unsupported {name} value: {value!r}")
    return value


def is_all_day(value: Union[date, datetime]) -> bool:
    """A DATE value (no time of day) marks a whole-day event."""
    return not isinstance(value, datetime)


class ICSParser:
    """Parses raw calendar-feed text into canonical events."""

    def __init__(self, settings: Any = None) -> None:
        self.settings = settings

    def _validate_ics_size(self, ics_content: str) -> None:
        """Reject oversized payloads before parsing them."""
        size_bytes = len(ics_content.encode("utf-8"))
        if size_bytes > MAX_ICS_SIZE_BYTES:
            raise ICSParseError(f"ICS content too large: {size_bytes} bytes")
        if size_bytes > MAX_ICS_SIZE_WARNING:
            logger.warning(f"Large ICS content: {size_bytes} bytes")

    def parse_event_component(self, component: Component, index: int) -> CanonicalEvent:
        """Map one VEVENT component.

        Args:
            component: Parsed ``VEVENT``
            index: Position of the event in the feed, used to synthesize ids

        Raises:
            ValueError: If DTSTART or DTEND is missing or unreadable
        """
        start = component_time(component, "DTSTART")
        end = component_time(component, "DTEND")

        uid = str(component.get("UID", "")).strip()
        summary = str(component.get("SUMMARY", "")).strip()

        return CanonicalEvent(
            id=uid or f"event-{index}",
            title=summary,
            start=start,
            end=end,
            all_day=is_all_day(start),
        )

    def parse_ics_content(self, ics_content: str) -> ICSParseResult:
        """Parse every event in a feed.

        Events missing required fields are skipped and recorded as warnings;
        the rest of the feed still parses.

        Raises:
            ICSParseError: If the payload exceeds the size limit or is not
                an iCalendar document
        """
        self._validate_ics_size(ics_content)

        try:
            calendars = Calendar.from_ical(ics_content, multiple=True)
        except ValueError as e:
            raise ICSParseError(f"Invalid iCalendar content: {e}") from e

        result = ICSParseResult()
        components = [
            component for calendar in calendars for component in calendar.walk("VEVENT")
        ]
        result.total_blocks = len(components)

        for index, component in enumerate(components):
            try:
                result.events.append(self.parse_event_component(component, index))
            except (ValueError, ValidationError) as e:
                result.skipped_blocks += 1
                result.warnings.append(f"Skipped event {index}: {e}")
                logger.debug(f"Skipping malformed event {index}: {e}")

        logger.debug(
            f"Parsed {result.event_count} events from {result.total_blocks} components "
            f"({result.skipped_blocks} skipped)"
        )
        return result
