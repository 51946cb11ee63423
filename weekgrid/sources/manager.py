"""Routes a resolved configuration to the matching source handler."""

import logging
from typing import Any, List, Optional

import httpx

from ..events.models import CanonicalEvent
from ..events.window import WeekWindow
from .google_source import GoogleSourceHandler
from .ics_source import ICSSourceHandler
from .models import CalendarSourceConfig, SourceType
from .selector import select_source

logger = logging.getLogger(__name__)


class SourceManager:
    """Invokes the adapter chosen by :func:`select_source`."""

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.ics_handler = ICSSourceHandler(settings, transport=transport)
        self.google_handler = GoogleSourceHandler(settings, transport=transport)

    async def fetch_events(
        self, config: CalendarSourceConfig, window: WeekWindow
    ) -> Optional[List[CanonicalEvent]]:
        """Fetch events for ``config``.

        Returns:
            Events from the selected adapter, None if that adapter failed or
            was aborted, and an empty list without any I/O when nothing is
            configured
        """
        source_type = select_source(config)

        if source_type == SourceType.ICS:
            return await self.ics_handler.fetch_events(config.ics_url or "")

        if source_type == SourceType.GOOGLE:
            return await self.google_handler.fetch_events(
                config.calendar_id, config.api_key or "", config.max_results, window
            )

        logger.warning(
            "No calendar source configured. Set WEEKGRID_ICS_URL or "
            "GOOGLE_CALENDAR_API_KEY, or pass ics_url/api_key parameters."
        )
        return []
