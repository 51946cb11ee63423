"""Event caching package."""

from .manager import CACHE_TAG, EventCache
from .models import Cacheable, CacheEntry, Skip, SkipReason
from .store import CacheStore

__all__ = [
    "CACHE_TAG",
    "CacheEntry",
    "CacheStore",
    "Cacheable",
    "EventCache",
    "Skip",
    "SkipReason",
]
