"""Input-boundary URL checks, run before any fetch is attempted."""

import re
from typing import Any
from urllib.parse import urlsplit

from page_scraper.services.web_scraper.exceptions import InvalidUrlError, MissingUrlError

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_REQUIRED_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def is_valid_url(url: str) -> bool:
    """Return ``True`` if *url* is a syntactically well-formed absolute URI."""
    if any(ch.isspace() for ch in url):
        return False

    try:
        parts = urlsplit(url)
        # Accessing .port validates the port component.
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False

    if parts.scheme.lower() in _HOST_REQUIRED_SCHEMES:
        return bool(parts.hostname)

    return bool(parts.netloc or parts.path or parts.query)


def normalize_url(url: str) -> str:
    """Give host-based URLs written without ``//`` their authority back.

    ``http:example.com`` and ``http:/example.com`` both become
    ``http://example.com``, the way browsers resolve them.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    if parts.scheme.lower() not in _HOST_REQUIRED_SCHEMES or parts.netloc:
        return url

    rest = url[len(parts.scheme) + 1 :].lstrip("/\\")
    return f"{parts.scheme}://{rest}"


def _coerce(raw: Any) -> str:
    """String form of a non-string URL value, as JavaScript would print it."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (list, tuple)):
        return ",".join("" if item is None else _coerce(item) for item in raw)
    return str(raw)


def validate_url(raw: Any) -> str:
    """Validate the URL from a scrape request and return it normalized.

    Raises:
        MissingUrlError: If *raw* is missing or empty.
        InvalidUrlError: If *raw* is not a well-formed absolute URI.
    """
    if raw is None or (isinstance(raw, (str, int, float)) and not raw):
        raise MissingUrlError(url=raw if isinstance(raw, str) else None)

    url = _coerce(raw).strip()
    if not url:
        raise InvalidUrlError(url=url)

    url = normalize_url(url)
    if not is_valid_url(url):
        raise InvalidUrlError(url=url)
    return url
