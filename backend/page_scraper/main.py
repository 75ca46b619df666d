"""Page Scraper - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from page_scraper import __version__
from page_scraper.config import get_settings
from page_scraper.routers import scrape
from page_scraper.services.web_scraper import reset_scraper_service
from page_scraper.services.web_scraper.exceptions import ScrapeError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    logger.info("Starting Page Scraper...")
    logger.info(
        f"Fetch timeout {settings.scraper_timeout}s, "
        f"content cap {settings.max_content_length} chars"
    )

    yield

    logger.info("Shutting down Page Scraper...")
    reset_scraper_service()
    logger.info("Page Scraper shutdown complete")


app = FastAPI(
    title="Page Scraper",
    description="Extracts title, metadata and main article text from a web page",
    version=__version__,
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(scrape.router)


@app.exception_handler(ScrapeError)
async def scrape_error_handler(request: Request, exc: ScrapeError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"Scraping error for {exc.url}: {exc.message}")
    else:
        logger.info(f"Scrape rejected for {exc.url}: {exc.message} ({exc.status_code})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(f"Malformed request body: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ScrapeError().to_dict(),
    )


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "page-scraper", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "page_scraper.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
