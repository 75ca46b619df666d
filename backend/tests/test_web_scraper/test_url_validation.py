"""Tests for page_scraper.services.web_scraper.url_validation."""

import pytest

from page_scraper.services.web_scraper.exceptions import InvalidUrlError, MissingUrlError
from page_scraper.services.web_scraper.url_validation import (
    is_valid_url,
    normalize_url,
    validate_url,
)


class TestValidateUrl:
    @pytest.mark.parametrize("raw", [None, "", 0, False])
    def test_missing(self, raw):
        with pytest.raises(MissingUrlError) as exc_info:
            validate_url(raw)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "URL is required"

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-url",
            "example.com/page",
            "https://",
            "ht tp://x.com",
            "https://exa mple.com",
            "   ",
            42,
            True,
            [],
            {"href": "https://x.com"},
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidUrlError) as exc_info:
            validate_url(raw)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid URL format"

    def test_valid_is_returned_trimmed(self):
        assert validate_url("  https://example.com/a?b=1  ") == "https://example.com/a?b=1"

    def test_single_item_list_is_coerced(self):
        assert validate_url(["https://x.com"]) == "https://x.com"

    def test_missing_authority_is_restored(self):
        assert validate_url("http:example.com/a") == "http://example.com/a"


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("http:example.com", "http://example.com"),
            ("https:/example.com/x", "https://example.com/x"),
            ("http:///path", "http://path"),
            ("https://example.com", "https://example.com"),
            ("mailto:someone@example.com", "mailto:someone@example.com"),
            ("not-a-url", "not-a-url"),
        ],
    )
    def test_normalize(self, url, expected):
        assert normalize_url(url) == expected


class TestIsValidUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://localhost:8000/path",
            "https://sub.example.co.uk/a/b?c=d#e",
            "http://127.0.0.1",
            "mailto:someone@example.com",
        ],
    )
    def test_accepts(self, url):
        assert is_valid_url(url)

    def test_rejects_bad_port(self):
        assert not is_valid_url("https://example.com:99999/")

    def test_rejects_host_based_without_host(self):
        assert not is_valid_url("http:///path")
