"""Tests for HttpxCatalogClient (catalog API adapter)."""

from __future__ import annotations

import httpx
import pytest
import respx

from hosterlink.domain.entities.catalog import CatalogItem, Subtitle
from hosterlink.domain.entities.errors import (
    CatalogDeserializationError,
    CatalogFetchError,
)
from hosterlink.infrastructure.catalog.client import (
    DEFAULT_BASE_URL,
    HttpxCatalogClient,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> HttpxCatalogClient:
    return HttpxCatalogClient(http_client=httpx.AsyncClient())


_BROWSE_RESPONSE = {
    "list": [
        {
            "id": "4711",
            "title": "Der Pate",
            "poster": "https://img.movie2k.ch/poster/4711.jpg",
            "year": 1972,
            "genre": "Drama",
            "trailer": "https://www.youtube.com/watch?v=sY1S34973zA",
            "subtitles": [
                {"lang": "de", "url": "https://subs.example.org/4711.de.vtt"},
                {"lang": "en", "url": "https://subs.example.org/4711.en.vtt"},
            ],
            "rating": 9.2,
        },
        {"id": 815, "title": "Minimal"},
    ]
}


# ---------------------------------------------------------------------------
# browse
# ---------------------------------------------------------------------------


class TestBrowse:
    @respx.mock
    @pytest.mark.asyncio
    async def test_deserializes_items(self, client: HttpxCatalogClient) -> None:
        respx.get(DEFAULT_BASE_URL).respond(json=_BROWSE_RESPONSE)

        items = await client.browse(genre="Action")

        assert items == [
            CatalogItem(
                id="4711",
                title="Der Pate",
                poster_url="https://img.movie2k.ch/poster/4711.jpg",
                year=1972,
                genre="Drama",
                trailer_url="https://www.youtube.com/watch?v=sY1S34973zA",
                subtitles=(
                    Subtitle(lang="de", url="https://subs.example.org/4711.de.vtt"),
                    Subtitle(lang="en", url="https://subs.example.org/4711.en.vtt"),
                ),
            ),
            CatalogItem(id="815", title="Minimal"),
        ]

    @respx.mock
    @pytest.mark.asyncio
    async def test_query_parameters(self, client: HttpxCatalogClient) -> None:
        route = respx.get(DEFAULT_BASE_URL).respond(json={"list": []})

        await client.browse(genre="Action", order_by="releases", page=3, limit=20)

        request = route.calls.last.request
        assert list(request.url.params.multi_items()) == [
            ("lang", "2"),
            ("genre", "Action"),
            ("order_by", "releases"),
            ("page", "3"),
            ("limit", "20"),
            ("year", ""),
            ("rating", ""),
            ("keyword", ""),
        ]

    @respx.mock
    @pytest.mark.asyncio
    async def test_language_override(self) -> None:
        route = respx.get("https://catalog.test/browse").respond(json={"list": []})
        client = HttpxCatalogClient(
            http_client=httpx.AsyncClient(),
            base_url="https://catalog.test/browse",
            language="1",
        )

        await client.browse()
        assert route.calls.last.request.url.params["lang"] == "1"

        await client.browse(language="3")
        assert route.calls.last.request.url.params["lang"] == "3"

    @respx.mock
    @pytest.mark.asyncio
    async def test_http_error_raises_fetch_error(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).respond(500)

        with pytest.raises(CatalogFetchError):
            await client.browse()

    @respx.mock
    @pytest.mark.asyncio
    async def test_network_error_raises_fetch_error(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).mock(side_effect=httpx.ConnectError("down"))

        with pytest.raises(CatalogFetchError):
            await client.browse()

    @respx.mock
    @pytest.mark.asyncio
    async def test_non_json_raises_deserialization_error(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).respond(200, text="<html>maintenance</html>")

        with pytest.raises(CatalogDeserializationError):
            await client.browse()

    @respx.mock
    @pytest.mark.asyncio
    async def test_missing_list_raises_deserialization_error(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).respond(json={"items": []})

        with pytest.raises(CatalogDeserializationError):
            await client.browse()

    @respx.mock
    @pytest.mark.asyncio
    async def test_item_without_title_raises_deserialization_error(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).respond(json={"list": [{"id": "1"}]})

        with pytest.raises(CatalogDeserializationError):
            await client.browse()


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------


class TestSearch:
    @respx.mock
    @pytest.mark.asyncio
    async def test_passes_keyword(self, client: HttpxCatalogClient) -> None:
        route = respx.get(DEFAULT_BASE_URL).respond(json=_BROWSE_RESPONSE)

        items = await client.search("pate")

        assert [i.title for i in items] == ["Der Pate", "Minimal"]
        params = route.calls.last.request.url.params
        assert params["keyword"] == "pate"
        assert params["order_by"] == "trending"
        assert params["limit"] == "20"

    @respx.mock
    @pytest.mark.asyncio
    async def test_network_error_returns_empty(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).mock(side_effect=httpx.ConnectError("down"))

        assert await client.search("pate") == []

    @respx.mock
    @pytest.mark.asyncio
    async def test_malformed_json_returns_empty(
        self, client: HttpxCatalogClient
    ) -> None:
        respx.get(DEFAULT_BASE_URL).respond(json={"list": "nope"})

        assert await client.search("pate") == []
