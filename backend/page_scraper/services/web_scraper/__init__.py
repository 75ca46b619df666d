"""Web scraper package: fetch a page and extract its article content.

Re-exports the public API so consumers can use::

    from page_scraper.services.web_scraper import ScraperService, get_scraper_service
"""

from page_scraper.services.web_scraper.content_extractor import ContentExtractor
from page_scraper.services.web_scraper.document import Document
from page_scraper.services.web_scraper.fetcher import PageFetcher
from page_scraper.services.web_scraper.scraper import (
    ScraperService,
    get_scraper_service,
    reset_scraper_service,
)

__all__ = [
    "ContentExtractor",
    "Document",
    "PageFetcher",
    "ScraperService",
    "get_scraper_service",
    "reset_scraper_service",
]
