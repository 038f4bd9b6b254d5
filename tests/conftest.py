"""Shared test fixtures for the hosterlink test suite."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from hosterlink.domain.entities.catalog import CatalogItem, SearchResponse, Subtitle
from hosterlink.domain.entities.results import FetchErrorKind, FetchResult
from hosterlink.infrastructure.common.html_selectors import parse_html
from hosterlink.infrastructure.hoster_resolvers.registry import HosterRegistry

# ---------------------------------------------------------------------------
# Fake ports
# ---------------------------------------------------------------------------


@dataclass
class FakePageFetcher:
    """PageFetcherPort stand-in that serves canned HTML and counts calls."""

    html: str | None = "<html><body></body></html>"
    error: FetchErrorKind | None = None
    calls: list[str] = field(default_factory=list)

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        if self.error is not None:
            return FetchResult.failure(self.error, url)
        return FetchResult.success(parse_html(self.html or ""))


@pytest.fixture()
def fake_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture()
def registry() -> HosterRegistry:
    return HosterRegistry()


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def catalog_item() -> CatalogItem:
    return CatalogItem(
        id="4711",
        title="Der Pate",
        poster_url="https://img.movie2k.ch/poster/4711.jpg",
        year=1972,
        genre="Drama",
        trailer_url="https://www.youtube.com/watch?v=sY1S34973zA",
        subtitles=(Subtitle(lang="de", url="https://subs.example.org/4711.de.vtt"),),
    )


@pytest.fixture()
def search_response() -> SearchResponse:
    return SearchResponse(title="Der Pate", url="/watch/4711", year=1972)


@pytest.fixture()
def make_fetcher():
    """Factory for FakePageFetcher instances with custom HTML or error."""

    def _make(
        html: str | None = "<html><body></body></html>",
        error: FetchErrorKind | None = None,
    ) -> FakePageFetcher:
        return FakePageFetcher(html=html, error=error)

    return _make
