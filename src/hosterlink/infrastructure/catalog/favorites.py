"""Session-scoped favorites list."""

from __future__ import annotations

import threading

import structlog

from hosterlink.domain.entities.catalog import SearchResponse

log = structlog.get_logger(__name__)


class FavoritesStore:
    """In-memory favorites, lifetime = host session.

    All mutations hold a ``threading.Lock`` since "Add to Favorites" can be
    triggered from several host UI callbacks at once. Adding the same result
    twice keeps both entries.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[SearchResponse] = []

    def add(self, item: SearchResponse) -> None:
        with self._lock:
            self._items.append(item)
            count = len(self._items)
        log.debug("favorite_added", url=item.url, count=count)

    def remove(self, item: SearchResponse) -> bool:
        """Drop the first matching entry. True when something was removed."""
        with self._lock:
            try:
                self._items.remove(item)
            except ValueError:
                return False
        log.debug("favorite_removed", url=item.url)
        return True

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def items(self) -> list[SearchResponse]:
        """Snapshot copy; safe to iterate while others mutate."""
        with self._lock:
            return list(self._items)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
