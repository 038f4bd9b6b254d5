"""Port for the session favorites list."""

from __future__ import annotations

from typing import Protocol

from hosterlink.domain.entities.catalog import SearchResponse


class FavoritesPort(Protocol):
    """Favorites shared by every host UI callback.

    Implementations MUST serialize mutations.
    """

    def add(self, item: SearchResponse) -> None: ...

    def remove(self, item: SearchResponse) -> bool: ...

    def items(self) -> list[SearchResponse]: ...
