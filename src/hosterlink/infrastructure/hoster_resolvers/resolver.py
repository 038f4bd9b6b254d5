"""Resolve hoster embed pages to playable stream links.

Resolution steps:
1. Classify the embed URL against the :class:`HosterRegistry`
   (unsupported URLs never hit the network).
2. Fetch and parse the embed page once (no retries).
3. Collect the ``src`` of every ``<video>`` and ``<source>`` element.
4. Name the hoster and infer quality from each media src.
"""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup

from hosterlink.domain.entities.links import StreamLink, StreamQuality
from hosterlink.domain.ports.page_fetcher import PageFetcherPort
from hosterlink.infrastructure.common.html_selectors import extract_all_attrs

from .registry import HosterRegistry

log = structlog.get_logger(__name__)

_MEDIA_SELECTOR = "video, source"


def infer_quality(link: str) -> StreamQuality:
    """Infer stream quality from markers in a media URL.

    Checks run in fixed order, so ``.../4k/720p.mp4`` is UHD.
    """
    lowered = link.lower()
    if "4k" in lowered:
        return StreamQuality.UHD
    if "1080p" in link:
        return StreamQuality.FULL_HD
    if "720p" in link:
        return StreamQuality.HD
    if "sd" in lowered:
        return StreamQuality.SD
    return StreamQuality.STANDARD


class LinkResolver:
    """Turns an embed page URL into a list of :class:`StreamLink`.

    ``resolve`` is fail-soft: every failure ends in an empty list.
    """

    def __init__(self, registry: HosterRegistry, fetcher: PageFetcherPort) -> None:
        self._registry = registry
        self._fetcher = fetcher

    async def resolve(self, url: str) -> list[StreamLink]:
        embed_hoster = self._registry.classify(url)
        if embed_hoster is None:
            log.debug("hoster_unsupported", url=url)
            return []

        try:
            result = await self._fetcher.fetch(url)
            if not result.ok:
                log.info(
                    "hoster_resolve_failed",
                    hoster=embed_hoster,
                    url=url,
                    reason=result.error.kind.value if result.error else None,
                )
                return []
            links = self._extract_links(result.document, embed_hoster)
        except Exception:
            log.exception("hoster_resolve_error", hoster=embed_hoster, url=url)
            return []

        log.info(
            "hoster_resolve_success",
            hoster=embed_hoster,
            url=url,
            link_count=len(links),
        )
        return links

    def _extract_links(
        self, document: BeautifulSoup, embed_hoster: str
    ) -> list[StreamLink]:
        return [
            StreamLink(
                hoster_name=self._registry.name_for_link(src),
                url=src,
                quality=infer_quality(src),
                embed_hoster=embed_hoster,
            )
            for src in extract_all_attrs(document, _MEDIA_SELECTOR, "src")
        ]
