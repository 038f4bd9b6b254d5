"""Movie2K provider use case: main page, search, links and favorites."""

from __future__ import annotations

from typing import Awaitable, Callable

import structlog

from hosterlink.domain.entities.catalog import (
    CatalogItem,
    ContentType,
    HomePage,
    HomePageList,
    SearchResponse,
)
from hosterlink.domain.entities.links import StreamLink
from hosterlink.domain.ports.cache import PageCachePort
from hosterlink.domain.ports.catalog import CatalogClientPort
from hosterlink.domain.ports.favorites import FavoritesPort
from hosterlink.domain.ports.link_resolver import LinkResolverPort

log = structlog.get_logger(__name__)


def to_search_response(item: CatalogItem) -> SearchResponse:
    """Map a catalog entry onto the host's search result shape."""
    return SearchResponse(
        title=item.title,
        url=f"/watch/{item.id}",
        poster_url=item.poster_url,
        year=item.year,
        genres=[item.genre] if item.genre else [],
        trailer_url=item.trailer_url,
        subtitles=item.subtitles,
    )


class Movie2kProvider:
    """The provider object registered with the host.

    Owns no I/O itself: catalog, page cache, resolver and favorites are
    injected by the composition root.
    """

    has_main_page: bool = True
    has_chromecast_support: bool = True
    supported_types: frozenset[ContentType] = frozenset({"movie", "tv_series"})

    def __init__(
        self,
        *,
        catalog: CatalogClientPort,
        cache: PageCachePort,
        resolver: LinkResolverPort,
        favorites: FavoritesPort,
        name: str = "Movie2K",
        main_url: str = "https://www2.movie2k.ch",
        page_size: int = 20,
        aclose: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self.name = name
        self.main_url = main_url
        self._catalog = catalog
        self._cache = cache
        self._resolver = resolver
        self._favorites = favorites
        self._page_size = page_size
        self._aclose = aclose

    # ------------------------------------------------------------------
    # Main page
    # ------------------------------------------------------------------

    async def _category(
        self, key: str, *, genre: str = "", order_by: str = "trending", page: int
    ) -> list[CatalogItem]:
        async def fetch() -> list[CatalogItem]:
            return await self._catalog.browse(
                genre=genre, order_by=order_by, page=page, limit=self._page_size
            )

        try:
            return await self._cache.get_or_fetch(key, fetch)
        except Exception:
            log.warning("main_page_category_failed", key=key, exc_info=True)
            return []

    async def get_main_page(self, page: int = 1) -> HomePage:
        """Action, trending and new-release rows for *page*.

        A failing row is rendered empty and retried on the next call.
        """
        action = await self._category(f"ActionPage_{page}", genre="Action", page=page)
        trending = await self._category(
            f"TrendingPage_{page}", order_by="trending", page=page
        )
        releases = await self._category(
            f"ReleasesPage_{page}", order_by="releases", page=page
        )

        rows = [
            HomePageList("Action Filme", [to_search_response(i) for i in action]),
            HomePageList("Filme Im Trend", [to_search_response(i) for i in trending]),
            HomePageList("Neue Releases", [to_search_response(i) for i in releases]),
        ]
        has_next = any(
            len(items) >= self._page_size for items in (action, trending, releases)
        )
        log.debug("main_page_built", page=page, has_next=has_next)
        return HomePage(lists=rows, has_next=has_next)

    # ------------------------------------------------------------------
    # Search / links
    # ------------------------------------------------------------------

    async def search(self, query: str) -> list[SearchResponse]:
        """Keyword search. Empty list on failure.

        A blank or whitespace-only query returns ``[]`` without calling the
        catalog. Sent as ``keyword=""`` the browse API would answer with an
        unfiltered listing, which is not a search result.
        """
        if not query.strip():
            return []
        items = await self._catalog.search(query, limit=self._page_size)
        return [to_search_response(i) for i in items]

    async def load_links(self, url: str) -> list[StreamLink]:
        """Playable stream links for a hoster embed URL (empty if unsupported)."""
        return await self._resolver.resolve(url)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def add_to_favorites(self, item: SearchResponse) -> bool:
        """Host callback for the "Add to Favorites" action.

        Returns False for results that do not offer the action.
        """
        if not item.is_favoritable:
            return False
        self._favorites.add(item)
        return True

    @property
    def favorites(self) -> list[SearchResponse]:
        return self._favorites.items()

    async def aclose(self) -> None:
        """Release the shared HTTP client, if the composition root handed one over."""
        if self._aclose is not None:
            await self._aclose()
            self._aclose = None
