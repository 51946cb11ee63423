"""Remote calendar API exceptions."""

from typing import Optional


class CalendarAPIError(Exception):
    """Base exception for calendar API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CalendarAPIStatusError(CalendarAPIError):
    """The API answered with a non-success HTTP status."""


class CalendarAPINetworkError(CalendarAPIError):
    """The API could not be reached."""


class CalendarAPIResponseError(CalendarAPIError):
    """The API response body could not be decoded."""
