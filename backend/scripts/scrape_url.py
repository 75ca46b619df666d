"""Scrape a single URL from the command line and print the JSON result.

Usage:
    python scripts/scrape_url.py https://example.com/some-article
"""

import asyncio
import json
import os
import sys

# Add the backend directory to sys.path to import page_scraper modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from page_scraper.services.web_scraper import get_scraper_service
from page_scraper.services.web_scraper.exceptions import ScrapeError


async def scrape(url: str) -> int:
    service = get_scraper_service()
    print(f"Scraping {url}...")
    try:
        result = await service.scrape(url)
    except ScrapeError as e:
        print(f"❌ {e.status_code}: {e.message}")
        return 1

    print(f"✅ {result.title} ({len(result.content)} chars)")
    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(scrape(sys.argv[1])))
