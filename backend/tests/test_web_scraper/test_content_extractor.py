"""Tests for page_scraper.services.web_scraper.content_extractor."""

from datetime import datetime, timezone

import pytest

from page_scraper.services.web_scraper.content_extractor import (
    ContentExtractor,
    first_non_empty,
    normalize_whitespace,
    parse_keywords,
    utc_timestamp,
)
from page_scraper.services.web_scraper.document import Document

URL = "https://example.com/post"

LONG = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 4  # 228 chars


def _fixed_clock() -> datetime:
    return datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


def _extract(html: str, **kwargs):
    extractor = ContentExtractor(clock=_fixed_clock, **kwargs)
    return extractor.extract(Document.from_html(html), URL)


def _page(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


class TestHelpers:
    def test_normalize_whitespace(self):
        assert normalize_whitespace("Hello\n\n  world\t!") == "Hello world !"

    def test_normalize_whitespace_trims(self):
        assert normalize_whitespace("  \n a \r\n b \t") == "a b"

    def test_parse_keywords_trims_and_keeps_order(self):
        assert parse_keywords("a, b ,c") == ["a", "b", "c"]

    def test_parse_keywords_empty(self):
        assert parse_keywords("") == []

    def test_first_non_empty_short_circuits(self):
        calls = []

        def make(value):
            def candidate():
                calls.append(value)
                return value

            return candidate

        assert first_non_empty([make(""), make("x"), make("y")]) == "x"
        assert calls == ["", "x"]

    def test_first_non_empty_default(self):
        assert first_non_empty([lambda: ""], default="d") == "d"

    def test_utc_timestamp_format(self):
        assert utc_timestamp(_fixed_clock()) == "2024-05-01T12:30:45.123Z"


class TestTitle:
    def test_title_tag_wins(self):
        html = _page(
            '<title> Real </title><meta property="og:title" content="OG">',
            "<h1>Heading</h1>",
        )
        assert _extract(html).title == "Real"

    def test_og_title_fallback(self):
        html = _page('<meta property="og:title" content="OG">', "<h1>Heading</h1>")
        assert _extract(html).title == "OG"

    def test_h1_fallback_uses_first(self):
        html = _page(body="<h1>  One </h1><h1>Two</h1>")
        assert _extract(html).title == "One"

    def test_untitled_when_nothing_matches(self):
        assert _extract(_page(body="<p>nothing here</p>")).title == "Untitled"

    def test_empty_title_tag_falls_through(self):
        html = _page("<title>   </title>", "<h1>Heading</h1>")
        assert _extract(html).title == "Heading"


class TestMetadataFields:
    def test_description_order(self):
        html = _page(
            '<meta property="og:description" content="og">'
            '<meta name="description" content="plain">'
        )
        assert _extract(html).description == "plain"

    def test_description_og_fallback(self):
        html = _page('<meta property="og:description" content="og">')
        assert _extract(html).description == "og"

    def test_author_meta(self):
        html = _page(
            '<meta name="author" content="Ann">', '<a rel="author">Bob</a>'
        )
        assert _extract(html).author == "Ann"

    def test_author_article_meta(self):
        html = _page('<meta property="article:author" content="Cid">')
        assert _extract(html).author == "Cid"

    def test_author_rel_link(self):
        html = _page(body='<span>By <a rel="author" href="/bob"> Bob </a></span>')
        assert _extract(html).author == "Bob"

    def test_publish_date_order(self):
        html = _page(
            '<meta name="publishdate" content="2020-01-01">'
            '<meta property="article:published_time" content="2021-02-02T10:00:00Z">',
            '<time datetime="2019-03-03">March</time>',
        )
        assert _extract(html).publish_date == "2021-02-02T10:00:00Z"

    def test_publish_date_from_time_element(self):
        html = _page(body='<time datetime="2019-03-03">March</time><time datetime="x">')
        assert _extract(html).publish_date == "2019-03-03"

    def test_publish_date_only_first_time_element(self):
        html = _page(body='<time>no attr</time><time datetime="2019-03-03"></time>')
        assert _extract(html).publish_date == ""

    def test_image_order(self):
        html = _page(
            '<meta name="twitter:image" content="/tw.png">'
            '<meta property="og:image" content="/og.png">',
            '<img src="/inline.png">',
        )
        assert _extract(html).image == "/og.png"

    def test_image_twitter_then_img(self):
        assert _extract(_page('<meta name="twitter:image" content="/tw.png">')).image == "/tw.png"
        assert _extract(_page(body='<img src="/a.png"><img src="/b.png">')).image == "/a.png"

    def test_tags_from_keywords(self):
        html = _page('<meta name="keywords" content="a, b ,c">')
        assert _extract(html).tags == ["a", "b", "c"]

    def test_tags_empty_meta(self):
        html = _page('<meta name="keywords" content="">')
        assert _extract(html).tags == []

    def test_missing_everything_defaults(self):
        result = _extract("")
        assert result.title == "Untitled"
        assert result.description == ""
        assert result.author == ""
        assert result.publish_date == ""
        assert result.image == ""
        assert result.content == ""
        assert result.tags == []
        assert result.scraped_at == "2024-05-01T12:30:45.123Z"


class TestBodyContent:
    def test_article_used_and_later_selectors_ignored(self):
        html = _page(
            body=(
                f"<article><p>{LONG}</p><script>evil()</script>"
                "<div class='ad'>Advert</div></article>"
                "<main>Main text that should never appear</main>"
            )
        )
        result = _extract(html)
        assert result.content == normalize_whitespace(LONG)
        assert "Advert" not in result.content
        assert "Main text" not in result.content

    def test_later_candidate_used_when_article_too_short(self):
        html = _page(
            body=(
                "<article>short</article>"
                f"<div class='entry-content'>{LONG}</div>"
            )
        )
        assert _extract(html).content == normalize_whitespace(LONG)

    def test_threshold_is_strictly_greater(self):
        exactly = "x" * 100
        html = _page(body=f"<nav>menu</nav><article>{exactly}</article><p>tail</p>")
        # Not accepted as a container, so the whole body is used.
        assert _extract(html).content == exactly + "tail"

    def test_role_main_candidate(self):
        html = _page(body=f'<div role="main">{LONG}</div><p>other</p>')
        assert _extract(html).content == normalize_whitespace(LONG)

    def test_fallback_to_body_with_noise_removed(self):
        html = _page(
            body=(
                "<header>Site header</header>"
                "<nav>Menu</nav>"
                "<p>Short body</p>"
                "<div class='sidebar'>Side</div>"
                "<footer>Footer</footer>"
            )
        )
        assert _extract(html).content == "Short body"

    def test_rejected_candidate_noise_stays_removed(self):
        html = _page(
            body=(
                "<article>tiny<div class='comments'>A comment</div></article>"
                "<p>rest</p>"
            )
        )
        extractor = ContentExtractor(clock=_fixed_clock, noise_selectors=(".comments",))
        doc = Document.from_html(html)
        result = extractor.extract(doc, URL)
        assert result.content == "tinyrest"
        assert doc.select(".comments") == []

    def test_noise_removed_only_from_matched_container(self):
        html = _page(
            body=(
                f"<article>{LONG}</article>"
                "<nav>outside nav</nav>"
            )
        )
        doc = Document.from_html(html)
        ContentExtractor(clock=_fixed_clock).extract(doc, URL)
        assert doc.text("nav") == "outside nav"

    def test_whitespace_collapsed(self):
        html = _page(body="<p>Hello\n\n  world\t!</p>")
        assert _extract(html).content == "Hello world !"

    def test_content_truncated_to_cap(self):
        html = _page(body=f"<article>{'word ' * 5000}</article>")
        result = _extract(html)
        assert len(result.content) == 10_000
        assert result.content.startswith("word word")

    def test_custom_thresholds(self):
        html = _page(body="<article>abcdefghij</article><p>zzz</p>")
        result = _extract(html, min_content_length=5, max_content_length=4)
        assert result.content == "abcd"

    def test_custom_content_selectors(self):
        html = _page(body=f"<section id='body'>{LONG}</section><p>other</p>")
        result = _extract(html, content_selectors=("#body",))
        assert result.content == normalize_whitespace(LONG)

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "<p>" + "a" * 20_000 + "</p>",
            "<article>" + "b " * 20_000 + "</article>",
            "<main>" + "c" * 10_001 + "</main>",
        ],
    )
    def test_content_never_exceeds_cap(self, body):
        assert len(_extract(_page(body=body)).content) <= 10_000


class TestExtractHtml:
    def test_extract_html_parses_markup(self):
        extractor = ContentExtractor(clock=_fixed_clock)
        result = extractor.extract_html(_page("<title>T</title>", "<p>x</p>"), URL)
        assert result.title == "T"
        assert result.content == "x"

    def test_result_is_immutable(self):
        result = _extract(_page("<title>T</title>"))
        with pytest.raises(Exception):
            result.title = "changed"

    def test_serializes_with_camel_case_aliases(self):
        result = _extract(_page('<meta property="article:published_time" content="2024">'))
        data = result.model_dump(by_alias=True)
        assert data["publishDate"] == "2024"
        assert data["scrapedAt"] == "2024-05-01T12:30:45.123Z"


class TestWhitespaceParity:
    def test_byte_order_mark_collapsed(self):
        assert normalize_whitespace("a\ufeff\ufeffb") == "a b"

    def test_unicode_spaces_collapsed(self):
        assert normalize_whitespace("a\xa0\u2003\u3000b\u2028c") == "a b c"

    def test_information_separators_kept(self):
        assert normalize_whitespace("a\x1cb") == "a\x1cb"


class TestBodylessPage:
    def test_head_text_not_in_fallback_content(self):
        result = ContentExtractor(clock=_fixed_clock).extract_html(
            "<title>My Title</title><p>short</p>", URL
        )
        assert result.title == "My Title"
        assert result.content == "short"
