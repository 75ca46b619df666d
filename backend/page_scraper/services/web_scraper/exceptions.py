"""Error taxonomy for a single scrape request.

Every error is terminal for the request it belongs to and carries the HTTP
status and message returned to the caller.
"""

from typing import Optional


class ScrapeError(Exception):
    """Base class for scrape request errors."""

    status_code: int = 500
    default_message: str = "Failed to scrape content"

    def __init__(self, message: Optional[str] = None, *, url: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.url = url
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


# ---------------------------------------------------------------------------
# Input errors (raised before any fetch is attempted)
# ---------------------------------------------------------------------------


class MissingUrlError(ScrapeError):
    """Request carried no URL."""

    status_code = 400
    default_message = "URL is required"


class InvalidUrlError(ScrapeError):
    """URL is not a well-formed absolute URI."""

    status_code = 400
    default_message = "Invalid URL format"


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------


class FetchError(ScrapeError):
    """Base class for failures while downloading the page."""


class FetchTimeoutError(FetchError):
    status_code = 408
    default_message = "Request timeout"


class FetchNotFoundError(FetchError):
    status_code = 404
    default_message = "Page not found"


class FetchForbiddenError(FetchError):
    status_code = 403
    default_message = "Access forbidden"


class FetchFailedError(FetchError):
    """Any other fetch failure (transport error, unexpected status)."""


__all__ = [
    "ScrapeError",
    "MissingUrlError",
    "InvalidUrlError",
    "FetchError",
    "FetchTimeoutError",
    "FetchNotFoundError",
    "FetchForbiddenError",
    "FetchFailedError",
]
