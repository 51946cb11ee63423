"""Async client for the remote calendar service's events-list endpoint."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..events.models import CanonicalEvent
from ..events.window import WeekWindow
from .exceptions import (
    CalendarAPIError,
    CalendarAPINetworkError,
    CalendarAPIResponseError,
    CalendarAPIStatusError,
)
from .models import GoogleCalendarResponse

logger = logging.getLogger(__name__)


class GoogleCalendarClient:
    """Queries one week of events from the remote calendar API."""

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client.

        Args:
            settings: Application settings (``api_base_url``, ``request_timeout``, ``app_name``)
            transport: Optional httpx transport, used by tests to fake the network
        """
        self.settings = settings
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GoogleCalendarClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._close_client()

    async def _ensure_client(self) -> None:
        if self.client is None or self.client.is_closed:
            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.request_timeout),
                transport=self.transport,
                headers={
                    "User-Agent": f"{self.settings.app_name}/1.0.0",
                    "Accept": "application/json",
                },
            )

    async def _close_client(self) -> None:
        if self.client and not self.client.is_closed:
            await self.client.aclose()

    def events_url(self, calendar_id: str) -> str:
        base = self.settings.api_base_url.rstrip("/")
        return f"{base}/calendars/{quote(calendar_id, safe='')}/events"

    @staticmethod
    def build_params(api_key: str, window: WeekWindow, max_results: int) -> Dict[str, str]:
        """Query parameters for a single-week, recurrence-expanded listing."""
        return {
            "key": api_key,
            "timeMin": window.time_min,
            "timeMax": window.time_max,
            "maxResults": str(max_results),
            "singleEvents": "true",
            "orderBy": "startTime",
        }

    async def list_events(
        self, calendar_id: str, api_key: str, window: WeekWindow, max_results: int
    ) -> List[CanonicalEvent]:
        """Fetch and map the events of one week.

        Items that cannot be mapped are skipped with a warning.

        Raises:
            CalendarAPIStatusError: Non-success HTTP status
            CalendarAPINetworkError: Transport failure or timeout
            CalendarAPIResponseError: Body is not a valid events-list document
        """
        await self._ensure_client()
        if self.client is None:
            raise CalendarAPIError("HTTP client not initialized")

        url = self.events_url(calendar_id)
        logger.debug(f"Querying calendar API for {calendar_id} ({window.time_min} - {window.time_max})")

        try:
            response = await self.client.get(
                url, params=self.build_params(api_key, window, max_results)
            )
        except httpx.HTTPError as e:
            raise CalendarAPINetworkError(f"Network error: {e}")

        if not response.is_success:
            raise CalendarAPIStatusError(
                f"Calendar API responded with status: {response.status_code}",
                response.status_code,
            )

        try:
            body = GoogleCalendarResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CalendarAPIResponseError(f"Invalid calendar API response: {e}")

        if not body.items:
            return []

        events = []
        for index, item in enumerate(body.items):
            if item.status == "cancelled":
                continue
            try:
                events.append(item.to_canonical(index))
            except (ValueError, ValidationError) as e:
                logger.warning(f"Skipping calendar API item {item.id or index}: {e}")
        return events
