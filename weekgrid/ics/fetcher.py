"""HTTP client for downloading ICS calendar files."""

import logging
from typing import Any, Optional

import httpx

from .exceptions import ICSFetchError, ICSNetworkError, ICSTimeoutError
from .models import ICSResponse

logger = logging.getLogger(__name__)


class ICSFetcher:
    """Async HTTP client for downloading ICS calendar files."""

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize ICS fetcher.

        Args:
            settings: Application settings
            transport: Optional httpx transport, used by tests to fake the network
        """
        self.settings = settings
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ICSFetcher":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._close_client()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client exists."""
        if self.client is None or self.client.is_closed:
            timeout = httpx.Timeout(
                connect=10.0, read=self.settings.request_timeout, write=10.0, pool=30.0
            )

            self.client = httpx.AsyncClient(
                timeout=timeout,
                follow_redirects=True,
                transport=self.transport,
                headers={
                    "User-Agent": f"{self.settings.app_name}/1.0.0 ICS-Client",
                    "Accept": "text/calendar",
                    "Accept-Charset": "utf-8",
                    "Cache-Control": "no-cache",
                },
            )

    async def _close_client(self) -> None:
        """Close HTTP client."""
        if self.client and not self.client.is_closed:
            await self.client.aclose()

    @staticmethod
    def normalize_url(url: str) -> str:
        """Rewrite ``webcal://`` subscription links to HTTPS."""
        if url.lower().startswith("webcal://"):
            return "https://" + url[len("webcal://") :]
        return url

    async def fetch_ics(self, url: str) -> ICSResponse:
        """Download ICS content.

        Args:
            url: Feed URL (``http``, ``https`` or ``webcal``)

        Returns:
            ICSResponse; ``success`` is False for non-2xx statuses and empty bodies

        Raises:
            ICSTimeoutError: The request timed out
            ICSNetworkError: DNS, connection or TLS failure
            ICSFetchError: Any other client failure
        """
        await self._ensure_client()
        if self.client is None:
            raise ICSFetchError("HTTP client not initialized")

        url = self.normalize_url(url)
        logger.debug(f"Fetching ICS from {url}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching ICS from {url}: {e}")
            raise ICSTimeoutError(f"Request timeout after {self.settings.request_timeout}s")

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching ICS from {url}: {e.response.status_code}")
            return ICSResponse(
                success=False,
                status_code=e.response.status_code,
                error_message=f"HTTP {e.response.status_code}: {e.response.reason_phrase}",
                headers=dict(e.response.headers),
            )

        except httpx.TransportError as e:
            logger.error(f"Network error fetching ICS from {url}: {e}")
            raise ICSNetworkError(f"Network error: {e}")

        except httpx.HTTPError as e:
            logger.error(f"Unexpected error fetching ICS from {url}: {e}")
            raise ICSFetchError(f"Unexpected error: {e}")

        return self._create_response(response)

    def _create_response(self, http_response: httpx.Response) -> ICSResponse:
        """Create ICS response from HTTP response."""
        headers = dict(http_response.headers)
        content = http_response.text

        content_type = headers.get("content-type", "").lower()
        if content_type and not any(ct in content_type for ct in ["text/calendar", "text/plain"]):
            logger.warning(f"Unexpected content type: {content_type}")

        if not content or not content.strip():
            logger.error("Empty ICS content received")
            return ICSResponse(
                success=False,
                status_code=http_response.status_code,
                error_message="Empty content received",
                headers=headers,
            )

        if "BEGIN:VCALENDAR" not in content:
            logger.warning("Content does not appear to be valid ICS format")

        logger.debug(f"Successfully fetched ICS content ({len(content)} bytes)")
        return ICSResponse(
            success=True,
            content=content,
            status_code=http_response.status_code,
            headers=headers,
        )
