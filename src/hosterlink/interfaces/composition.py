"""Composition root: wires the provider from an AppConfig."""

from __future__ import annotations

import httpx
import structlog

from hosterlink.application.use_cases.provider import Movie2kProvider
from hosterlink.infrastructure.catalog import (
    FavoritesStore,
    HttpxCatalogClient,
    InMemoryPageCache,
)
from hosterlink.infrastructure.config.schema import AppConfig
from hosterlink.infrastructure.hoster_resolvers import (
    HosterRegistry,
    HttpxPageFetcher,
    LinkResolver,
)

log = structlog.get_logger(__name__)


def build_http_client(config: AppConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=config.http_follow_redirects,
    )


def build_provider(
    config: AppConfig,
    *,
    http_client: httpx.AsyncClient | None = None,
    favorites: FavoritesStore | None = None,
) -> Movie2kProvider:
    """Build a fully wired :class:`Movie2kProvider`.

    When *http_client* is None a client is created here and closed by
    ``provider.aclose()``; a caller-supplied client stays caller-owned.
    """
    owns_client = http_client is None
    client = http_client or build_http_client(config)

    registry = HosterRegistry()
    resolver = LinkResolver(
        registry,
        HttpxPageFetcher(client, timeout=config.http_timeout_seconds),
    )
    catalog = HttpxCatalogClient(
        http_client=client,
        base_url=config.catalog_base_url,
        language=config.catalog_language,
    )

    provider = Movie2kProvider(
        catalog=catalog,
        cache=InMemoryPageCache(ttl_seconds=config.cache_ttl_seconds),
        resolver=resolver,
        favorites=favorites or FavoritesStore(),
        name=config.provider_name,
        main_url=config.main_url,
        page_size=config.catalog_page_size,
        aclose=client.aclose if owns_client else None,
    )
    log.info(
        "provider_built",
        provider=provider.name,
        hosters=registry.names,
        catalog=config.catalog_base_url,
    )
    return provider
