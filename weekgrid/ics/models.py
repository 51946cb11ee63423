"""Data models for ICS calendar processing."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..events.models import CanonicalEvent


class ICSResponse(BaseModel):
    """Response from ICS fetch operation."""

    success: bool
    content: Optional[str] = None
    status_code: Optional[int] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    error_message: Optional[str] = None
    fetch_time: datetime = Field(default_factory=datetime.now)

    @property
    def content_length(self) -> Optional[int]:
        """Get content length if available."""
        if self.content:
            return len(self.content.encode("utf-8"))
        return None


class ICSParseResult(BaseModel):
    """Result of ICS parsing operation."""

    events: List[CanonicalEvent] = Field(default_factory=list)
    total_blocks: int = 0
    skipped_blocks: int = 0
    warnings: List[str] = Field(default_factory=list, description="Malformed record notes")

    @property
    def event_count(self) -> int:
        return len(self.events)
