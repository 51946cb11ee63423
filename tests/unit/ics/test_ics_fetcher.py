"""Unit tests for ICS Fetcher HTTP client functionality."""

import httpx
import pytest

from weekgrid.ics.exceptions import ICSNetworkError, ICSTimeoutError
from weekgrid.ics.fetcher import ICSFetcher

FEED_URL = "https://calendar.example.com/feed.ics"


class TestICSFetcher:
    """Test ICSFetcher.fetch_ics."""

    @pytest.mark.asyncio
    async def test_successful_fetch_returns_content(self, test_settings, make_transport, sample_feed):
        transport = make_transport(text=sample_feed, headers={"content-type": "text/calendar"})

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            response = await fetcher.fetch_ics(FEED_URL)

        assert response.success is True
        assert response.status_code == 200
        assert response.content == sample_feed
        assert response.content_length == len(sample_feed.encode("utf-8"))

    @pytest.mark.asyncio
    async def test_requests_calendar_media_type(self, test_settings, make_transport, sample_feed):
        transport = make_transport(text=sample_feed)

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            await fetcher.fetch_ics(FEED_URL)

        request = transport.requests[0]
        assert request.method == "GET"
        assert request.headers["Accept"] == "text/calendar"
        assert request.headers["User-Agent"].startswith(test_settings.app_name)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 403, 500, 503])
    async def test_non_success_status_is_a_failed_response(self, test_settings, make_transport, status_code):
        transport = make_transport(status_code=status_code, text="nope")

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            response = await fetcher.fetch_ics(FEED_URL)

        assert response.success is False
        assert response.status_code == status_code
        assert str(status_code) in response.error_message

    @pytest.mark.asyncio
    async def test_empty_body_is_a_failed_response(self, test_settings, make_transport):
        transport = make_transport(text="   ")

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            response = await fetcher.fetch_ics(FEED_URL)

        assert response.success is False
        assert response.error_message == "Empty content received"

    @pytest.mark.asyncio
    async def test_connection_error_raises_network_error(self, test_settings, make_transport):
        transport = make_transport(raises=httpx.ConnectError("connection refused"))

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            with pytest.raises(ICSNetworkError):
                await fetcher.fetch_ics(FEED_URL)

    @pytest.mark.asyncio
    async def test_timeout_raises_timeout_error(self, test_settings, make_transport):
        transport = make_transport(raises=httpx.ReadTimeout("too slow"))

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            with pytest.raises(ICSTimeoutError):
                await fetcher.fetch_ics(FEED_URL)

    @pytest.mark.asyncio
    async def test_webcal_links_are_fetched_over_https(self, test_settings, make_transport, sample_feed):
        transport = make_transport(text=sample_feed)

        async with ICSFetcher(test_settings, transport=transport) as fetcher:
            await fetcher.fetch_ics("webcal://calendar.example.com/feed.ics")

        assert str(transport.requests[0].url) == FEED_URL

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self, test_settings, make_transport, sample_feed):
        fetcher = ICSFetcher(test_settings, transport=make_transport(text=sample_feed))

        async with fetcher:
            assert fetcher.client is not None
            assert not fetcher.client.is_closed

        assert fetcher.client.is_closed
