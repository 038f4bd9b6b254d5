"""Port for the remote catalog API."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hosterlink.domain.entities.catalog import CatalogItem


@runtime_checkable
class CatalogClientPort(Protocol):
    """Async interface for catalog browse and search."""

    async def browse(
        self,
        genre: str = "",
        order_by: str = "trending",
        page: int = 1,
        limit: int = 20,
        keyword: str = "",
        year: str = "",
        rating: str = "",
        language: str | None = None,
    ) -> list[CatalogItem]:
        """Fetch one catalog page (language defaults to the configured one, "2").

        Raises CatalogError on transport or deserialization failures.
        """
        ...

    async def search(self, keyword: str, limit: int = 20) -> list[CatalogItem]:
        """Keyword search. Returns [] on any failure."""
        ...
