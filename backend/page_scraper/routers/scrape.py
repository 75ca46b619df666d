"""Scrape API router."""

from fastapi import APIRouter, Depends

from page_scraper.models.scrape import ErrorResponse, ScrapeRequest, ScrapeResponse
from page_scraper.services.web_scraper import ScraperService, get_scraper_service

router = APIRouter(prefix="/api", tags=["scrape"])


@router.post(
    "/scrape",
    response_model=ScrapeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed URL"},
        403: {"model": ErrorResponse, "description": "Target page is forbidden"},
        404: {"model": ErrorResponse, "description": "Target page not found"},
        408: {"model": ErrorResponse, "description": "Fetching the page timed out"},
        500: {"model": ErrorResponse, "description": "Any other scrape failure"},
    },
)
async def scrape_page(
    request: ScrapeRequest,
    scraper: ScraperService = Depends(get_scraper_service),
) -> ScrapeResponse:
    """
    Fetch a single page and extract its article content.

    Returns title, description, author, publish date, primary image,
    cleaned body text (at most 10,000 characters) and keyword tags,
    with the requested URL echoed back.

    Errors are returned as ``{"error": "<message>"}`` with the matching
    status code; see ``ScrapeError`` for the mapping.
    """
    return await scraper.scrape(request.url)
