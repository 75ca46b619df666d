"""Scrape request/response data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScrapeRequest(BaseModel):
    """Request body for ``POST /api/scrape``.

    ``url`` is optional at the schema level so that a missing or empty
    value is reported as "URL is required" rather than a validation error.
    """

    url: Any = Field(None, description="Absolute URL of the page to scrape")


class ExtractionResult(BaseModel):
    """Structured record extracted from one HTML page.

    Every string field defaults to ``""`` and ``tags`` to ``[]``; none are
    ever null. Instances are immutable once built.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Page title")
    description: str = Field(default="", description="Meta description")
    author: str = Field(default="", description="Author name")
    publish_date: str = Field(
        default="",
        alias="publishDate",
        description="Publication date as found in the source, unvalidated",
    )
    image: str = Field(default="", description="Primary image URL, possibly relative")
    content: str = Field(default="", description="Cleaned body text")
    tags: list[str] = Field(default_factory=list, description="Keywords in source order")
    scraped_at: str = Field(
        default="",
        alias="scrapedAt",
        description="ISO-8601 UTC timestamp of extraction",
    )


class ScrapeResponse(ExtractionResult):
    """Successful scrape: the extraction result with the URL echoed back."""

    url: str = Field(..., description="URL that was scraped")

    @classmethod
    def from_result(cls, url: str, result: ExtractionResult) -> "ScrapeResponse":
        return cls(url=url, **result.model_dump())


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    error: str = Field(..., description="Human-readable error message")
