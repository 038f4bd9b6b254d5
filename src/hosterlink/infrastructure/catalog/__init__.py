"""Catalog API client, page cache and favorites."""

from __future__ import annotations

from .client import DEFAULT_BASE_URL, HttpxCatalogClient
from .favorites import FavoritesStore
from .page_cache import InMemoryPageCache

__all__ = [
    "DEFAULT_BASE_URL",
    "FavoritesStore",
    "HttpxCatalogClient",
    "InMemoryPageCache",
]
