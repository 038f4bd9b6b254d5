"""Port for resolving hoster embed URLs to stream links."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hosterlink.domain.entities.links import StreamLink


@runtime_checkable
class LinkResolverPort(Protocol):
    """Resolves a hoster embed page URL to the stream links it embeds."""

    async def resolve(self, url: str) -> list[StreamLink]:
        """Return every playable link found, or [] when resolution fails.

        Never raises.
        """
        ...
