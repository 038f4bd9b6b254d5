"""Catalog API client: async httpx implementation."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from hosterlink.domain.entities.catalog import CatalogItem
from hosterlink.domain.entities.errors import (
    CatalogDeserializationError,
    CatalogFetchError,
)

from .schema import BrowseResponse

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.movie2k.ch/data/browse/"


class HttpxCatalogClient:
    """Async catalog client using a shared httpx client.

    Implements ``CatalogClientPort`` from domain.ports.catalog.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
        language: str = "2",
    ) -> None:
        self._http = http_client
        self._base_url = base_url
        self._language = language

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _params(
        *,
        language: str,
        genre: str,
        order_by: str,
        page: int,
        limit: int,
        year: str,
        rating: str,
        keyword: str,
    ) -> list[tuple[str, Any]]:
        """Query params in the order the API documents them.

        Empty filters are sent as empty values, not omitted.
        """
        return [
            ("lang", language),
            ("genre", genre),
            ("order_by", order_by),
            ("page", page),
            ("limit", limit),
            ("year", year),
            ("rating", rating),
            ("keyword", keyword),
        ]

    async def _get_json(self, params: list[tuple[str, Any]]) -> Any:
        try:
            resp = await self._http.get(self._base_url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogFetchError(
                f"catalog returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"catalog request failed: {exc}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogDeserializationError("catalog response is not JSON") from exc

    # ------------------------------------------------------------------
    # Public API (CatalogClientPort)
    # ------------------------------------------------------------------

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
        """Fetch one catalog page.

        Raises:
            CatalogFetchError: network failure or non-2xx status.
            CatalogDeserializationError: body is not the expected JSON shape.
        """
        params = self._params(
            language=language or self._language,
            genre=genre,
            order_by=order_by,
            page=page,
            limit=limit,
            year=year,
            rating=rating,
            keyword=keyword,
        )
        data = await self._get_json(params)
        try:
            parsed = BrowseResponse.model_validate(data)
        except ValidationError as exc:
            raise CatalogDeserializationError(
                f"unexpected catalog payload: {exc.error_count()} errors"
            ) from exc

        items = [m.to_entity() for m in parsed.items]
        log.debug(
            "catalog_page_fetched",
            genre=genre,
            order_by=order_by,
            page=page,
            count=len(items),
        )
        return items

    async def search(self, keyword: str, limit: int = 20) -> list[CatalogItem]:
        """Keyword search. Returns [] on any failure."""
        try:
            return await self.browse(keyword=keyword, limit=limit)
        except Exception:
            log.warning("catalog_search_failed", keyword=keyword, exc_info=True)
            return []
