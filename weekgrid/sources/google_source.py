"""Remote calendar API source handler."""

import logging
import time
from typing import Any, List, Optional

import httpx

from ..events.models import CanonicalEvent
from ..events.window import WeekWindow
from ..google import CalendarAPIError, GoogleCalendarClient
from .exceptions import FetchCancelled, SourceUnreachable

logger = logging.getLogger(__name__)


class GoogleSourceHandler:
    """Lists one week of events from the remote calendar API."""

    name = "google"

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.client = GoogleCalendarClient(settings, transport=transport)

    async def _list_events(
        self, calendar_id: str, api_key: str, max_results: int, window: WeekWindow
    ) -> List[CanonicalEvent]:
        try:
            async with self.client as client:
                return await client.list_events(calendar_id, api_key, window, max_results)
        except CalendarAPIError as e:
            raise SourceUnreachable(e.message, self.name) from e

    async def fetch_events(
        self, calendar_id: str, api_key: str, max_results: int, window: WeekWindow
    ) -> Optional[List[CanonicalEvent]]:
        """Query the API for ``window``.

        Returns:
            Mapped events (possibly empty), or None when the request failed or
            was aborted with FetchCancelled. Task cancellation propagates.
        """
        start_time = time.time()

        try:
            events = await self._list_events(calendar_id, api_key, max_results, window)
        except FetchCancelled:
            logger.info("Calendar API fetch aborted before completion")
            return None
        except SourceUnreachable as e:
            logger.error(f"Error fetching calendar events: {e.message}")
            return None

        response_time = (time.time() - start_time) * 1000
        logger.info(f"Calendar API fetch completed: {len(events)} events in {response_time:.1f}ms")
        return events
