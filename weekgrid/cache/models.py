"""Cache entry and cacheable-path result types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Union

from ..events.models import CalendarData


class SkipReason(str, Enum):
    """Why an outcome is not persisted."""

    UNCONFIGURED = "unconfigured"
    NO_RESULT = "no_result"  # source failed or fetch was aborted
    EMPTY = "empty"


@dataclass(frozen=True)
class Cacheable:
    """Outcome worth storing."""

    value: CalendarData


@dataclass(frozen=True)
class Skip:
    """Outcome that must not be stored."""

    reason: SkipReason


CacheableResult = Union[Cacheable, Skip]


@dataclass(frozen=True)
class CacheEntry:
    """Stored value with its absolute expiry on the store's clock."""

    value: CalendarData
    expires_at: float
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
