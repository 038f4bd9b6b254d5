"""Port for retrieving and parsing hoster embed pages."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hosterlink.domain.entities.results import FetchResult


@runtime_checkable
class PageFetcherPort(Protocol):
    """Fetches an embed page and returns a navigable document tree.

    Implementations never raise; every failure is reported as a
    :class:`FetchResult` carrying a :class:`FetchError`.
    """

    async def fetch(self, url: str) -> FetchResult:
        """GET *url* and parse the body as HTML."""
        ...
