"""Source precedence: feed URL, then API key, then nothing."""

from .models import CalendarSourceConfig, SourceType


def select_source(config: CalendarSourceConfig) -> SourceType:
    if config.ics_url:
        return SourceType.ICS
    if config.api_key:
        return SourceType.GOOGLE
    return SourceType.UNCONFIGURED
