"""Heuristic HTML -> ExtractionResult extractor.

No network access. Each field is resolved from an ordered
list of candidate sources, taking the first non-empty one. Body text is
taken from the first content container whose cleaned text is substantial,
falling back to the whole page.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from page_scraper.models.scrape import ExtractionResult
from page_scraper.services.web_scraper.constants import (
    CONTENT_SELECTORS,
    DEFAULT_TITLE,
    MAX_CONTENT_LENGTH,
    MIN_CONTENT_LENGTH,
    NOISE_SELECTORS,
)
from page_scraper.services.web_scraper.document import (
    WHITESPACE_RE,
    Document,
    elements_text,
    trim,
)

logger = logging.getLogger(__name__)

Candidate = Callable[[], str]


def first_non_empty(candidates: Iterable[Candidate], default: str = "") -> str:
    """Evaluate *candidates* in order and return the first non-empty value."""
    for candidate in candidates:
        value = candidate()
        if value:
            return value
    return default


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space and trim."""
    return trim(WHITESPACE_RE.sub(" ", text))


def parse_keywords(raw: str) -> list[str]:
    """Split a ``keywords`` meta value on commas, trimming each piece."""
    if not raw:
        return []
    return [trim(tag) for tag in raw.split(",")]


def utc_timestamp(moment: datetime) -> str:
    """Format *moment* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentExtractor:
    """Extracts title, metadata and main body text from a parsed page."""

    def __init__(
        self,
        *,
        content_selectors: Sequence[str] = CONTENT_SELECTORS,
        noise_selectors: Sequence[str] = NOISE_SELECTORS,
        min_content_length: int = MIN_CONTENT_LENGTH,
        max_content_length: int = MAX_CONTENT_LENGTH,
        default_title: str = DEFAULT_TITLE,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.content_selectors = tuple(content_selectors)
        self.noise_selectors = tuple(noise_selectors)
        self.min_content_length = min_content_length
        self.max_content_length = max_content_length
        self.default_title = default_title
        self._clock = clock or _utcnow

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, document: Document, source_url: str) -> ExtractionResult:
        """Extract a structured record from *document*.

        Never raises for a parsed document: every field falls back to an
        empty value. Noise subtrees are removed from *document* in place,
        so it must not be reused for a second extraction.
        """
        title = self._resolve_title(document)
        description = self._resolve_description(document)
        author = self._resolve_author(document)
        publish_date = self._resolve_publish_date(document)
        image = self._resolve_image(document)

        content = normalize_whitespace(self._resolve_body(document, source_url))
        content = content[: self.max_content_length]

        tags = parse_keywords(document.meta_content("keywords"))

        return ExtractionResult(
            title=title,
            description=description,
            author=author,
            publish_date=publish_date,
            image=image,
            content=content,
            tags=tags,
            scraped_at=utc_timestamp(self._clock()),
        )

    def extract_html(self, markup: str, source_url: str) -> ExtractionResult:
        """Parse *markup* and extract it."""
        return self.extract(Document.from_html(markup), source_url)

    # ------------------------------------------------------------------
    # Field resolution
    # ------------------------------------------------------------------

    def _resolve_title(self, doc: Document) -> str:
        return first_non_empty(
            (
                lambda: doc.text("title"),
                lambda: doc.meta_content("og:title", attribute="property"),
                lambda: doc.first_text("h1"),
            ),
            default=self.default_title,
        )

    def _resolve_description(self, doc: Document) -> str:
        return first_non_empty(
            (
                lambda: doc.meta_content("description"),
                lambda: doc.meta_content("og:description", attribute="property"),
            )
        )

    def _resolve_author(self, doc: Document) -> str:
        return first_non_empty(
            (
                lambda: doc.meta_content("author"),
                lambda: doc.meta_content("article:author", attribute="property"),
                lambda: doc.text('[rel="author"]'),
            )
        )

    def _resolve_publish_date(self, doc: Document) -> str:
        return first_non_empty(
            (
                lambda: doc.meta_content("article:published_time", attribute="property"),
                lambda: doc.meta_content("publishdate"),
                lambda: doc.attr("time", "datetime"),
            )
        )

    def _resolve_image(self, doc: Document) -> str:
        return first_non_empty(
            (
                lambda: doc.meta_content("og:image", attribute="property"),
                lambda: doc.meta_content("twitter:image"),
                lambda: doc.attr("img", "src"),
            )
        )

    # ------------------------------------------------------------------
    # Body resolution
    # ------------------------------------------------------------------

    def _resolve_body(self, doc: Document, source_url: str) -> str:
        """Return the trimmed, not yet whitespace-normalized body text.

        Candidate containers are tried in priority order. Noise is stripped
        from each matched container before its text is measured, and stays
        stripped even when the container is rejected, so later candidates
        and the fallback see the already-cleaned tree.
        """
        noise = ", ".join(self.noise_selectors)

        for selector in self.content_selectors:
            elements = doc.select(selector)
            if not elements:
                continue

            if noise:
                doc.remove(noise, within=elements)
            text = elements_text(elements)
            if len(text) > self.min_content_length:
                logger.debug(f"Body for {source_url} taken from '{selector}' ({len(text)} chars)")
                return text

        if noise:
            doc.remove(noise)
        logger.debug(f"No substantial content container for {source_url}, using page body")
        return doc.body_text()
