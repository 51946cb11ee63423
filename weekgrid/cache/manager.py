"""Time-boxed cache in front of the calendar source adapters."""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..events.models import CalendarData
from ..events.window import WeekWindow, filter_events_to_window, get_week_window
from ..sources.exceptions import SourceConfigError
from ..sources.manager import SourceManager
from ..sources.models import CalendarParams, CalendarSourceConfig, SourceType
from ..sources.selector import select_source
from ..utils.helpers import local_now
from .models import Cacheable, CacheableResult, Skip, SkipReason
from .store import CacheStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "calendar-data"
CACHE_TAG = "calendar-events"

ParamsLike = Union[CalendarParams, Mapping[str, Any], None]


class EventCache:
    """Serves ``{events, startDate}`` for the current week.

    Successful, non-empty fetches are cached for ``settings.cache_ttl``
    seconds under the configuration signature. Unconfigured, failed,
    aborted and empty outcomes are never stored; those calls are answered
    by an uncached recomputation instead.
    """

    def __init__(
        self,
        settings: Any,
        source_manager: Optional[SourceManager] = None,
        store: Optional[CacheStore] = None,
        now: Callable[[], datetime] = local_now,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the event cache.

        Args:
            settings: Application settings
            source_manager: Adapter router, built from settings when omitted
            store: Backing store, a fresh in-memory store when omitted
            now: Wall-clock source for the week window and fallback timestamps
            transport: Optional httpx transport for the default source manager
        """
        self.settings = settings
        self.source_manager = source_manager or SourceManager(settings, transport=transport)
        self.store = store if store is not None else CacheStore()
        self.ttl = getattr(settings, "cache_ttl", 300)
        self._now = now

    @staticmethod
    def _coerce_params(params: ParamsLike) -> Optional[CalendarParams]:
        if params is None or isinstance(params, CalendarParams):
            return params
        try:
            return CalendarParams.model_validate(dict(params))
        except ValidationError as e:
            raise SourceConfigError(f"Invalid calendar parameters: {e.error_count()} errors") from e

    def resolve_config(self, params: ParamsLike = None) -> CalendarSourceConfig:
        """Merge ``params`` over settings.

        Raises:
            SourceConfigError: If ``params`` fails validation
        """
        return CalendarSourceConfig.resolve(self.settings, self._coerce_params(params))

    @staticmethod
    def cache_key(config: CalendarSourceConfig, window: WeekWindow) -> str:
        return f"{CACHE_KEY_PREFIX}:{config.signature()}:{window.start.date().isoformat()}"

    def _empty_result(self) -> CalendarData:
        return CalendarData(events=[], start_date=self._now())

    async def fetch_cacheable(
        self, config: CalendarSourceConfig, window: WeekWindow
    ) -> CacheableResult:
        """Fetch through the selected adapter and classify the outcome."""
        if select_source(config) == SourceType.UNCONFIGURED:
            return Skip(SkipReason.UNCONFIGURED)

        events = await self.source_manager.fetch_events(config, window)
        if events is None:
            return Skip(SkipReason.NO_RESULT)
        if not events:
            return Skip(SkipReason.EMPTY)

        return Cacheable(
            CalendarData(events=filter_events_to_window(events, window), start_date=window.start)
        )

    async def fetch_uncached(self, config: CalendarSourceConfig) -> CalendarData:
        """Recompute without touching the cache.

        Never raises; task cancellation still propagates to the caller.
        """
        try:
            if select_source(config) == SourceType.UNCONFIGURED:
                return self._empty_result()

            window = get_week_window(self._now())
            events = await self.source_manager.fetch_events(config, window)
            if events is None:
                return self._empty_result()

            return CalendarData(
                events=filter_events_to_window(events, window), start_date=window.start
            )
        except Exception:
            logger.exception("Uncached calendar fetch failed")
            return self._empty_result()

    async def get_calendar_data(self, params: ParamsLike = None) -> CalendarData:
        """Current week's events, cached when the outcome is worth keeping.

        Args:
            params: Per-call overrides of the configured source

        Returns:
            CalendarData; at worst no events and ``start_date`` set to now
        """
        try:
            config = self.resolve_config(params)
        except (SourceConfigError, ValueError) as e:
            logger.error(f"Calendar source configuration rejected: {e}")
            return self._empty_result()

        try:
            window = get_week_window(self._now())
            key = self.cache_key(config, window)

            cached = self.store.get(key)
            if cached is not None:
                logger.debug("Calendar data served from cache")
                return cached

            outcome = await self.fetch_cacheable(config, window)
        except Exception as e:
            logger.warning(f"Cache skipped or error: {e}")
            return await self.fetch_uncached(config)

        if isinstance(outcome, Cacheable):
            self.store.set(key, outcome.value, self.ttl, tags=(CACHE_TAG,))
            logger.debug(f"Cached {len(outcome.value.events)} events for {self.ttl}s")
            return outcome.value

        logger.info(f"Cache skipped ({outcome.reason.value}), fetching uncached")
        return await self.fetch_uncached(config)

    def invalidate(self) -> int:
        """Force-expire every cached calendar entry."""
        return self.store.invalidate_tag(CACHE_TAG)
