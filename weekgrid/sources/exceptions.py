"""Source-specific exceptions."""

from typing import Optional


class SourceError(Exception):
    """Base exception for source-related errors."""

    def __init__(self, message: str, source_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source_name = source_name


class SourceUnreachable(SourceError):
    """Non-success status or network failure from a calendar source."""


class FetchCancelled(SourceError):
    """Raised by a rendering collaborator to abort an in-flight fetch."""

    def __init__(self, message: str = "Render aborted", source_name: Optional[str] = None):
        super().__init__(message, source_name)


class SourceConfigError(SourceError):
    """Per-call calendar parameters could not be validated."""
