"""
HTTP Fetch Adapter

Implements PageFetcher port using httpx.
"""
import logging
from urllib.parse import urlparse

import httpx

from ..core.domain import RawDocument
from ..core.ports import PageFetcher

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "webfetch-ux-mcp/0.1 (+https://modelcontextprotocol.io)"


class HttpxFetcher(PageFetcher):
    """Page fetcher using a synchronous httpx client"""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport  # injectable for tests (httpx.MockTransport)

    def fetch(self, url: str) -> tuple[RawDocument, int]:
        """GET url following redirects, return (document, status_code)"""
        scheme = urlparse(url).scheme.lower()
        if scheme not in ("http", "https"):
            raise ValueError(f"Unsupported URL scheme: {url!r} (only http and https)")

        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,text/plain;q=0.9,*/*;q=0.8",
        }

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers=headers,
                transport=self.transport
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException:
            raise RuntimeError(f"Fetch timed out after {self.timeout:g} seconds")
        except httpx.HTTPError as e:
            raise RuntimeError(f"Fetch failed: {e}") from e

        logger.info(f"GET {url} -> {response.status_code} ({len(response.content)} bytes)")

        if not response.is_success:
            raise RuntimeError(f"HTTP {response.status_code} {response.reason_phrase} for {response.url}")

        document = RawDocument(
            content=response.text,
            source_url=str(response.url),
            content_type=response.headers.get("content-type")
        )
        return document, response.status_code
