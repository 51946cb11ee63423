"""End-to-end: remote API response through the cache into the week grid."""

from datetime import datetime

import pytest

from weekgrid.cache.manager import EventCache
from weekgrid.layout.grid import GridLayoutEngine

NOW = datetime(2024, 1, 3, 12, 0, 0)

API_BODY = {
    "items": [
        {
            "id": "tuesday",
            "summary": "Design review",
            "start": {"dateTime": "2024-01-02T09:00:00"},
            "end": {"dateTime": "2024-01-02T10:30:00"},
        },
        {
            "id": "thursday",
            "summary": "Offsite",
            "start": {"date": "2024-01-04"},
            "end": {"date": "2024-01-05"},
        },
        {
            "id": "next-week",
            "summary": "Retro",
            "start": {"dateTime": "2024-01-09T15:00:00"},
            "end": {"dateTime": "2024-01-09T16:00:00"},
        },
    ]
}


class TestPipeline:
    """Remote API events land in their day columns; out-of-week events are dropped."""

    @pytest.mark.asyncio
    async def test_api_events_bucketed_by_day(self, test_settings, make_transport, week_window):
        transport = make_transport(json=API_BODY)
        cache = EventCache(test_settings, transport=transport, now=lambda: NOW)

        data = await cache.get_calendar_data({"api_key": "k"})
        grid = GridLayoutEngine().layout(data.events, week_window)

        assert [event.id for event in data.events] == ["tuesday", "thursday"]
        assert data.start_date == week_window.start
        assert [(p.event.id, p.offset, p.height) for p in grid.days[1].timed] == [("tuesday", 4, 3)]
        assert [event.id for event in grid.days[3].all_day] == ["thursday"]
        assert sum(len(day.timed) + len(day.all_day) for day in grid.days) == 2

    @pytest.mark.asyncio
    async def test_second_call_served_from_cache(self, test_settings, make_transport):
        transport = make_transport(json=API_BODY)
        cache = EventCache(test_settings, transport=transport, now=lambda: NOW)

        await cache.get_calendar_data({"api_key": "k"})
        await cache.get_calendar_data({"api_key": "k"})

        assert len(transport.requests) == 1
