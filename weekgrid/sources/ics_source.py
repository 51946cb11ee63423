"""ICS calendar source handler."""

import logging
import time
from typing import Any, List, Optional

import httpx

from ..events.models import CanonicalEvent
from ..ics import ICSFetcher, ICSParser
from ..ics.exceptions import ICSError
from ..ics.models import ICSParseResult
from .exceptions import FetchCancelled, SourceUnreachable

logger = logging.getLogger(__name__)


class ICSSourceHandler:
    """Fetches a calendar feed and parses it into canonical events."""

    name = "ics"

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize ICS source handler.

        Args:
            settings: Application settings
            transport: Optional httpx transport passed to the fetcher
        """
        self.settings = settings
        self.fetcher = ICSFetcher(settings, transport=transport)
        self.parser = ICSParser(settings)

    async def _fetch_and_parse(self, url: str) -> ICSParseResult:
        """Fetch and parse, raising SourceUnreachable on any fetch failure."""
        try:
            async with self.fetcher as fetcher:
                response = await fetcher.fetch_ics(url)
        except ICSError as e:
            raise SourceUnreachable(e.message, self.name) from e

        if not response.success:
            raise SourceUnreachable(response.error_message or "Unknown fetch error", self.name)

        try:
            return self.parser.parse_ics_content(response.content or "")
        except ICSError as e:
            raise SourceUnreachable(f"Unparseable feed: {e.message}", self.name) from e

    async def fetch_events(self, url: str) -> Optional[List[CanonicalEvent]]:
        """Fetch and parse the feed at ``url``.

        Returns:
            Parsed events (possibly empty), or None when the fetch failed or
            was aborted with FetchCancelled. Task cancellation propagates.
        """
        start_time = time.time()

        try:
            result = await self._fetch_and_parse(url)
        except FetchCancelled:
            logger.info("ICS fetch aborted before completion")
            return None
        except SourceUnreachable as e:
            logger.error(f"ICS source unreachable: {e.message}")
            return None

        if result.skipped_blocks:
            logger.warning(f"Skipped {result.skipped_blocks} malformed ICS event blocks")

        response_time = (time.time() - start_time) * 1000
        logger.info(f"ICS fetch completed: {result.event_count} events in {response_time:.1f}ms")
        return result.events
