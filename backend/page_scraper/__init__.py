"""Page Scraper - extract article metadata and body text from web pages."""

__version__ = "0.1.0"
