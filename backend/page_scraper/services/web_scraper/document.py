"""Queryable markup tree used by the content extractor.

Thin wrapper over BeautifulSoup that exposes only what extraction needs:
CSS selection, trimmed text, attribute lookup and destructive removal of
subtrees. A ``Document`` is owned by a single extraction call and is
mutated by it.
"""

import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup, Tag

_PARSER = "html.parser"

# Whitespace and line terminators as browsers define them for String.trim
# and the regex \s class. Unlike str.isspace this includes U+FEFF and
# excludes the U+001C..U+001F separators.
WHITESPACE_CHARS = "".join(
    chr(c)
    for c in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)
WHITESPACE_RE = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")

# Elements the HTML parsing algorithm places in <head> when the markup
# omits <body>; their text never belongs to the page body.
_HEAD_ONLY_TAGS = ["head", "title"]


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip(WHITESPACE_CHARS)


class Document:
    """Navigable representation of one parsed HTML page."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_html(cls, markup: str) -> "Document":
        """Parse raw markup into a Document."""
        return cls(BeautifulSoup(markup or "", _PARSER))

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, selector: str) -> list[Tag]:
        """Return every element matching *selector* in document order."""
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    # ------------------------------------------------------------------
    # Text and attributes
    # ------------------------------------------------------------------

    def text(self, selector: str) -> str:
        """Concatenated text of all elements matching *selector*, trimmed."""
        return elements_text(self.select(selector))

    def first_text(self, selector: str) -> str:
        """Trimmed text of the first element matching *selector*."""
        element = self.select_one(selector)
        if element is None:
            return ""
        return trim(element.get_text())

    def attr(self, selector: str, name: str) -> str:
        """Attribute *name* of the first element matching *selector*.

        Returns an empty string when nothing matches or the attribute is
        missing. Multi-valued attributes (``class``, ``rel``) are joined
        with a space.
        """
        element = self.select_one(selector)
        if element is None:
            return ""
        value = element.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return value

    def meta_content(self, key: str, *, attribute: str = "name") -> str:
        """``content`` of the first ``<meta>`` whose *attribute* equals *key*."""
        return self.attr(f'meta[{attribute}="{key}"]', "content")

    def body_text(self) -> str:
        """Trimmed text of ``<body>``.

        ``html.parser`` builds no implied body, so for markup without a
        ``<body>`` tag the text of the whole tree is used, minus anything
        inside ``<head>`` or ``<title>``.
        """
        body = self._soup.body
        if body is not None:
            return trim(body.get_text())
        return trim(
            "".join(s for s in self._soup.strings if s.find_parent(_HEAD_ONLY_TAGS) is None)
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def remove(self, selector: str, *, within: Optional[Iterable[Tag]] = None) -> int:
        """Destructively remove subtrees matching *selector*.

        When *within* is given, only descendants of those elements are
        considered; otherwise the whole document is searched.

        Returns:
            Number of subtrees removed.
        """
        roots = [self._soup] if within is None else list(within)

        removed = 0
        for root in roots:
            if getattr(root, "decomposed", False):
                continue
            for node in root.select(selector):
                # A match can sit inside a subtree removed earlier in this pass.
                if node.decomposed:
                    continue
                node.decompose()
                removed += 1
        return removed


def elements_text(elements: Iterable[Tag]) -> str:
    """Concatenate the text of *elements* and trim the result.

    Elements already removed from the tree contribute nothing.
    """
    return trim("".join(el.get_text() for el in elements if not el.decomposed))
