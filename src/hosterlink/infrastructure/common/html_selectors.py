"""CSS-selector-based HTML extraction helpers.

Thin wrappers around BeautifulSoup so callers never deal with parser
selection or attribute coercion.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string into a BeautifulSoup tree (``lxml`` parser)."""
    return BeautifulSoup(html, "lxml")


def extract_all_attrs(
    root: BeautifulSoup | Tag,
    selector: str,
    attr: str,
) -> list[str]:
    """Extract an attribute from all matching elements in document order.

    Elements whose attribute is missing or empty are skipped.
    """
    return [str(tag[attr]) for tag in root.select(selector) if tag.get(attr)]
