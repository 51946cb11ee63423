"""Shared test fixtures."""

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, List, Optional

import httpx
import pytest
from unittest.mock import Mock

from weekgrid.events.window import WeekWindow, get_week_window

# Wednesday; its week runs Mon 2024-01-01 .. Sun 2024-01-07
FIXED_NOW = datetime(2024, 1, 3, 12, 0, 0)

SAMPLE_FEED = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "PRODID:-//Test//Test//EN\r\n"
    "BEGIN:VEVENT\r\n"
    "UID:all-day-1\r\n"
    "SUMMARY:Holiday\r\n"
    "DTSTART:20240101\r\n"
    "DTEND:20240102\r\n"
    "END:VEVENT\r\n"
    "BEGIN:VEVENT\r\n"
    "UID:timed-1\r\n"
    "SUMMARY:Planning\r\n"
    "DTSTART:20240103T090000\r\n"
    "DTEND:20240103T100000\r\n"
    "END:VEVENT\r\n"
    "END:VCALENDAR\r\n"
)


@pytest.fixture
def test_settings() -> Mock:
    """Create mock settings object with common defaults."""
    settings = Mock()
    settings.app_name = "WeekGrid-Test"
    settings.ics_url = None
    settings.api_key = None
    settings.calendar_id = "primary"
    settings.max_results = 50
    settings.api_base_url = "https://calendar.example.com/v3"
    settings.cache_ttl = 300
    settings.request_timeout = 5
    settings.grid_origin_hour = 7
    settings.grid_end_hour = 20
    return settings


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def week_window() -> WeekWindow:
    return get_week_window(FIXED_NOW)


@pytest.fixture
def sample_feed() -> str:
    return SAMPLE_FEED


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], Awaitable[httpx.Response]]) -> None:
        self.requests: List[httpx.Request] = []

        async def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return await handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with a fixed response or exception."""

    def factory(
        status_code: int = 200,
        text: Optional[str] = None,
        json: Optional[object] = None,
        raises: Optional[BaseException] = None,
        headers: Optional[dict] = None,
        delay: float = 0.0,
    ) -> RecordingTransport:
        async def handler(request: httpx.Request) -> httpx.Response:
            if delay:
                await asyncio.sleep(delay)
            if raises is not None:
                raise raises
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, text=text or "", headers=headers)

        return RecordingTransport(handler)

    return factory
