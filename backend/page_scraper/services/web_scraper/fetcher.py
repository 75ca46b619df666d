"""HTTP page fetcher.

Single GET per request, bounded by a fixed timeout. Failures are classified
into the ``FetchError`` taxonomy; nothing is retried.
"""

import asyncio
import logging
from typing import Optional

import httpx

from page_scraper.services.web_scraper.constants import (
    DEFAULT_USER_AGENT,
    PAGE_TIMEOUT_SECONDS,
)
from page_scraper.services.web_scraper.exceptions import (
    FetchError,
    FetchFailedError,
    FetchForbiddenError,
    FetchNotFoundError,
    FetchTimeoutError,
)

logger = logging.getLogger(__name__)


class PageFetcher:
    """Downloads raw page markup with a browser-like user agent."""

    def __init__(
        self,
        *,
        timeout: float = PAGE_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """GET *url* and return the decoded response body.

        Raises:
            FetchTimeoutError: No complete response within ``timeout`` seconds.
            FetchNotFoundError: Server answered 404.
            FetchForbiddenError: Server answered 403.
            FetchFailedError: Any other transport error or non-2xx status.
        """
        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Timeout fetching {url}: {e!r}")
            raise FetchTimeoutError(url=url) from e
        except httpx.HTTPError as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise FetchFailedError(url=url) from e

        status = response.status_code
        if response.is_success:
            return response.text

        logger.warning(f"Fetching {url} returned HTTP {status}")
        raise self._status_error(status, url)

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        ) as client:
            return await client.get(url)

    @staticmethod
    def _status_error(status: int, url: str) -> FetchError:
        if status == 404:
            return FetchNotFoundError(url=url)
        if status == 403:
            return FetchForbiddenError(url=url)
        return FetchFailedError(url=url)
