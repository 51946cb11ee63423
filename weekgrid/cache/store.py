"""In-memory key/value store with TTL expiry and tag invalidation."""

import logging
import threading
import time
from typing import Callable, Dict, Iterable, Optional

from ..events.models import CalendarData
from .models import CacheEntry

logger = logging.getLogger(__name__)


class CacheStore:
    """Thread-safe map of signature to :class:`CacheEntry`.

    Entries are immutable once written. An expired entry is dropped when
    it is read, or by the next write of any key.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[CalendarData]:
        """Return the live value for ``key``, dropping it if expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                logger.debug(f"Cache entry expired: {key[:12]}")
                return None
            return entry.value

    def set(self, key: str, value: CalendarData, ttl: float, tags: Iterable[str] = ()) -> None:
        """Store ``value`` for ``ttl`` seconds, dropping any other expired entries."""
        with self._lock:
            now = self._clock()
            self._purge_expired(now)
            self._entries[key] = CacheEntry(value=value, expires_at=now + ttl, tags=frozenset(tags))

    def _purge_expired(self, now: float) -> int:
        # Caller holds the lock
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired cache entries")
        return len(expired)

    def invalidate_tag(self, tag: str) -> int:
        """Force-expire every entry carrying ``tag``.

        Returns:
            Number of entries removed
        """
        with self._lock:
            keys = [key for key, entry in self._entries.items() if tag in entry.tags]
            for key in keys:
                del self._entries[key]
        logger.debug(f"Invalidated {len(keys)} cache entries tagged {tag!r}")
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
