"""Domain entities for the remote catalog and the host display model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ContentType = Literal["movie", "tv_series"]


@dataclass(frozen=True)
class Subtitle:
    """Subtitle track attached to a catalog entry."""

    lang: str
    url: str


@dataclass(frozen=True)
class CatalogItem:
    """A browsable title as listed by the catalog API."""

    id: str
    title: str
    poster_url: str | None = None
    year: int | None = None
    genre: str | None = None
    trailer_url: str | None = None
    subtitles: tuple[Subtitle, ...] = ()


@dataclass(frozen=True)
class SearchResponse:
    """Search/browse result in the shape the host renders.

    ``is_favoritable`` tells the host to offer an "Add to Favorites"
    action; the action itself is wired by the host layer.
    """

    title: str
    url: str  # Detail page path, e.g. "/watch/123"
    poster_url: str | None = None
    year: int | None = None
    genres: list[str] = field(default_factory=list)
    trailer_url: str | None = None
    subtitles: tuple[Subtitle, ...] = ()
    is_favoritable: bool = True


@dataclass(frozen=True)
class HomePageList:
    """Named row on the provider main page."""

    name: str
    items: list[SearchResponse] = field(default_factory=list)


@dataclass(frozen=True)
class HomePage:
    """Main page response: category rows plus a paging hint."""

    lists: list[HomePageList] = field(default_factory=list)
    has_next: bool = False
