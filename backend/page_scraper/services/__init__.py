from page_scraper.services.web_scraper import (
    ContentExtractor,
    PageFetcher,
    ScraperService,
    get_scraper_service,
    reset_scraper_service,
)

__all__ = [
    # Extraction
    "ContentExtractor",
    # Fetching
    "PageFetcher",
    # Scraper service
    "ScraperService",
    "get_scraper_service",
    "reset_scraper_service",
]
