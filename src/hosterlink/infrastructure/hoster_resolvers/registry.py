"""Registry of known hosters: embed URL shapes and media-src markers."""

from __future__ import annotations

import re
from typing import Iterable

import structlog

from hosterlink.domain.entities.links import UNKNOWN_HOSTER, HosterPattern

log = structlog.get_logger(__name__)

_ID = r"[a-zA-Z0-9]+"


def _pattern(name: str, marker: str, regex: str) -> HosterPattern:
    return HosterPattern(name=name, rule=re.compile(regex), marker=marker)


# Declaration order is the match order.
DEFAULT_HOSTER_PATTERNS: tuple[HosterPattern, ...] = (
    _pattern("Dood", "dood.", rf"https://dood\.(re|li|to)/d/{_ID}"),
    _pattern(
        "Streamtape",
        "streamtape.",
        r"https://(streamtape\.(net|to|xyz|site|online)|strcloud\.link"
        r"|shavetape\.cash|strtapeadblock\.me|scloud\.online|tapeblocker)"
        rf"/e/{_ID}",
    ),
    _pattern("Voe", "voe.", rf"https://voe\.sx/e/{_ID}"),
    _pattern("Vinovo", "vinovo.", rf"https://vinovo\.to/e/{_ID}"),
    _pattern("Filemoon", "filemoon.", rf"https://filemoon\.(sx|to)/e/{_ID}"),
    _pattern("Mixdrop", "mixdrop.", rf"https://mixdrop\.(co|to|ag)/e/{_ID}"),
    _pattern("Dropload", "dropload.", rf"https://dropload\.(io|to)/e/{_ID}"),
    _pattern(
        "Supervideo", "supervideo.", rf"https://supervideo\.cc/embed-{_ID}\.html"
    ),
    _pattern("Swiftload", "swiftload.", rf"https://swiftload\.io/e/{_ID}"),
)


class HosterRegistry:
    """Ordered table of :class:`HosterPattern` entries.

    Lookups are first-match-wins in registration order. Patterns are
    appended at startup and never removed.
    """

    def __init__(self, patterns: Iterable[HosterPattern] | None = None) -> None:
        self._patterns: list[HosterPattern] = []
        for pattern in DEFAULT_HOSTER_PATTERNS if patterns is None else patterns:
            self.register(pattern)

    def register(self, pattern: HosterPattern) -> None:
        """Append a hoster pattern (lowest priority so far)."""
        self._patterns.append(pattern)
        log.debug("hoster_pattern_registered", hoster=pattern.name)

    @property
    def names(self) -> list[str]:
        """Hoster names in match order."""
        return [p.name for p in self._patterns]

    def classify(self, url: str) -> str | None:
        """Return the hoster whose embed URL shape matches *url* entirely.

        Returns ``None`` for unsupported URLs.
        """
        for pattern in self._patterns:
            if pattern.matches(url):
                return pattern.name
        return None

    def name_for_link(self, link: str) -> str:
        """Name the hoster of a media src by marker substring (case-sensitive).

        Falls back to ``"Unknown"``. Independent of :meth:`classify`, so the
        two can disagree for the same resolved link.
        """
        for pattern in self._patterns:
            if pattern.marker in link:
                return pattern.name
        return UNKNOWN_HOSTER
