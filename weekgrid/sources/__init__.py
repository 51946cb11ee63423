"""Calendar source selection and adapters."""

from .exceptions import FetchCancelled, SourceConfigError, SourceError, SourceUnreachable
from .google_source import GoogleSourceHandler
from .ics_source import ICSSourceHandler
from .manager import SourceManager
from .models import CalendarParams, CalendarSourceConfig, SourceType
from .selector import select_source

__all__ = [
    "CalendarParams",
    "CalendarSourceConfig",
    "FetchCancelled",
    "GoogleSourceHandler",
    "ICSSourceHandler",
    "SourceConfigError",
    "SourceError",
    "SourceManager",
    "SourceType",
    "SourceUnreachable",
    "select_source",
]
