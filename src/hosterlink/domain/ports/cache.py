"""Page cache port: in-process memoization of catalog pages."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, TypeVar

T = TypeVar("T")


class PageCachePort(Protocol):
    """Port for a read-mostly key/value cache with compute-on-miss.

    ``get_or_fetch`` is not atomic: concurrent callers missing the same
    key may both run *fetch*. Callers must pass idempotent fetches.
    """

    async def get_or_fetch(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value for *key*, computing it with *fetch* on a miss."""
        ...

    def get(self, key: str) -> Any:
        """Cached value or None (missing / expired)."""
        ...

    def evict(self, key: str) -> bool:
        """Drop *key*. True = removed, False = was not cached."""
        ...

    def clear(self) -> None:
        ...
