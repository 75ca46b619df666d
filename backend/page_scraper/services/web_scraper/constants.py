"""Named constants for the web scraper package.

Centralizes selectors and thresholds so they can be tuned from one place
and overridden when constructing the extractor.
"""

# ---------------------------------------------------------------------------
# Content limits (characters)
# ---------------------------------------------------------------------------
MAX_CONTENT_LENGTH = 10_000  # Hard cut applied to the cleaned body text
MIN_CONTENT_LENGTH = 100  # A candidate container must exceed this to be used

# ---------------------------------------------------------------------------
# Fetch behaviour
# ---------------------------------------------------------------------------
PAGE_TIMEOUT_SECONDS = 30
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# ---------------------------------------------------------------------------
# Field fallbacks
# ---------------------------------------------------------------------------
DEFAULT_TITLE = "Untitled"

# ---------------------------------------------------------------------------
# Body content selectors, highest priority first
# ---------------------------------------------------------------------------
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    '[role="main"]',
    ".post-content",
    ".entry-content",
    ".content",
    ".article-body",
    ".story-body",
    ".post-body",
    "main",
    ".main-content",
)

# ---------------------------------------------------------------------------
# Subtrees stripped before reading body text
# ---------------------------------------------------------------------------
NOISE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "nav",
    "footer",
    "header",
    ".sidebar",
    ".comments",
    ".social-share",
    ".advertisement",
    ".ad",
)
