"""Slim orchestrator for single-page scraping.

Coordinates validate -> fetch -> parse -> extract without containing any
extraction logic itself.
"""

import logging
import time
from typing import Any, Optional

from page_scraper.models.scrape import ScrapeResponse
from page_scraper.services.web_scraper.content_extractor import ContentExtractor
from page_scraper.services.web_scraper.document import Document
from page_scraper.services.web_scraper.exceptions import FetchFailedError, ScrapeError
from page_scraper.services.web_scraper.fetcher import PageFetcher
from page_scraper.services.web_scraper.url_validation import validate_url

logger = logging.getLogger(__name__)

# Singleton state
_service: Optional["ScraperService"] = None


class ScraperService:
    """Scrapes one URL into a structured ``ScrapeResponse``."""

    def __init__(
        self,
        *,
        fetcher: Optional[PageFetcher] = None,
        extractor: Optional[ContentExtractor] = None,
    ) -> None:
        # Sub-components (injectable for testing)
        self.fetcher = fetcher or PageFetcher()
        self.extractor = extractor or ContentExtractor()

    async def scrape(self, raw_url: Any) -> ScrapeResponse:
        """Main entry point: validate, fetch and extract *raw_url*.

        Raises:
            ScrapeError: Subclass describing the first failure; its
                ``status_code`` and ``message`` are what the caller sees.
        """
        start_time = time.time()

        # Phase 1: Validate input
        url = validate_url(raw_url)

        # Phase 2: Fetch
        logger.info(f"Scraping {url}")
        try:
            markup = await self.fetcher.fetch(url)
        except ScrapeError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error fetching {url}: {e}")
            raise FetchFailedError(url=url) from e

        # Phase 3: Extract
        try:
            result = self.extractor.extract(Document.from_html(markup), url)
            response = ScrapeResponse.from_result(url, result)
        except Exception as e:
            logger.exception(f"Extraction failed for {url}: {e}")
            raise ScrapeError(url=url) from e

        logger.info(
            f"Scraped {url}: {len(result.content)} chars of content, "
            f"{len(result.tags)} tags in {int((time.time() - start_time) * 1000)}ms"
        )
        return response


# =====================================================================
# Singleton factory
# =====================================================================


def get_scraper_service() -> ScraperService:
    """Get or create the singleton ``ScraperService`` from settings."""
    global _service
    if _service is None:
        from page_scraper.config import get_settings

        settings = get_settings()
        _service = ScraperService(
            fetcher=PageFetcher(
                timeout=settings.scraper_timeout,
                user_agent=settings.scraper_user_agent,
            ),
            extractor=ContentExtractor(
                min_content_length=settings.min_content_length,
                max_content_length=settings.max_content_length,
            ),
        )
    return _service


def reset_scraper_service() -> None:
    """Reset service for testing."""
    global _service
    _service = None
