from page_scraper.models.scrape import (
    ErrorResponse,
    ExtractionResult,
    ScrapeRequest,
    ScrapeResponse,
)

__all__ = [
    # Scrape models
    "ErrorResponse",
    "ExtractionResult",
    "ScrapeRequest",
    "ScrapeResponse",
]
