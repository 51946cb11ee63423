"""ICS calendar downloading and parsing module."""

from .exceptions import ICSError, ICSFetchError, ICSNetworkError, ICSParseError, ICSTimeoutError
from .fetcher import ICSFetcher
from .models import ICSParseResult, ICSResponse
from .parser import ICSParser

__all__ = [
    "ICSError",
    "ICSFetchError",
    "ICSFetcher",
    "ICSNetworkError",
    "ICSParseError",
    "ICSParseResult",
    "ICSParser",
    "ICSResponse",
    "ICSTimeoutError",
]
