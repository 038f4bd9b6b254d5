"""In-memory page cache for catalog results."""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog

log = structlog.get_logger(__name__)

T = TypeVar("T")


class _CacheEntry:
    """Cached value with an optional expiry on the cache clock."""

    __slots__ = ("value", "fetched_at", "expires_at")

    def __init__(self, value: Any, now: float, ttl: float | None) -> None:
        self.value = value
        self.fetched_at = now
        self.expires_at = None if ttl is None else now + ttl

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class InMemoryPageCache:
    """Read-mostly cache keyed by category + page (e.g. ``"ActionPage_1"``).

    Not locked: two coroutines missing the same key may both fetch; the
    last write wins.

    ``ttl_seconds=None`` (or 0) keeps entries until eviction or restart.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds or None
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Any:
        """Cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._entries.pop(key, None)
            log.debug("page_cache_expired", key=key)
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = _CacheEntry(value, self._clock(), self._ttl)

    async def get_or_fetch(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value for *key* or await *fetch* and store it.

        Exceptions from *fetch* propagate and nothing is cached.
        """
        cached = self.get(key)
        if cached is not None:
            log.debug("page_cache_hit", key=key)
            return cached

        value = await fetch()
        self.set(key, value)
        log.debug("page_cache_stored", key=key)
        return value

    def evict(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()
