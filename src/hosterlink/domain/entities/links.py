"""Domain entities for hoster classification and stream links.

Pure value objects: no framework dependencies, no I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

UNKNOWN_HOSTER = "Unknown"


class StreamQuality(IntEnum):
    """Ranked quality levels (higher value = better quality)."""

    STANDARD = 0
    SD = 10
    HD = 20
    FULL_HD = 30
    UHD = 40

    @property
    def label(self) -> str:
        return _QUALITY_LABELS[self]


_QUALITY_LABELS: dict[StreamQuality, str] = {
    StreamQuality.STANDARD: "Standard",
    StreamQuality.SD: "SD",
    StreamQuality.HD: "HD (720p)",
    StreamQuality.FULL_HD: "Full HD (1080p)",
    StreamQuality.UHD: "UHD (4K)",
}


@dataclass(frozen=True)
class HosterPattern:
    """A known hoster: embed URL shape plus the marker found in its media URLs."""

    name: str  # Display name, e.g. "Voe"
    rule: re.Pattern[str]  # Must match the whole embed page URL
    marker: str  # Substring identifying the hoster in a media src, e.g. "voe."

    def matches(self, url: str) -> bool:
        return self.rule.fullmatch(url) is not None


@dataclass(frozen=True)
class StreamLink:
    """A playable media URL extracted from a hoster embed page."""

    hoster_name: str  # From the media src; registry name or "Unknown"
    url: str
    quality: StreamQuality = StreamQuality.STANDARD
    embed_hoster: str | None = None  # Classification of the embed page URL
