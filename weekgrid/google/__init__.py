"""Remote calendar API adapter."""

from .client import GoogleCalendarClient
from .exceptions import (
    CalendarAPIError,
    CalendarAPINetworkError,
    CalendarAPIResponseError,
    CalendarAPIStatusError,
)
from .models import GoogleCalendarEvent, GoogleCalendarResponse, GoogleEventTime

__all__ = [
    "CalendarAPIError",
    "CalendarAPINetworkError",
    "CalendarAPIResponseError",
    "CalendarAPIStatusError",
    "GoogleCalendarClient",
    "GoogleCalendarEvent",
    "GoogleCalendarResponse",
    "GoogleEventTime",
]
