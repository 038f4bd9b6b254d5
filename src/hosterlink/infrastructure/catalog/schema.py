"""Pydantic models for the catalog browse response."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hosterlink.domain.entities.catalog import CatalogItem, Subtitle


class SubtitleModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lang: str
    url: str


class MovieModel(BaseModel):
    """One entry of ``list`` in the browse response."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    poster: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    trailer: Optional[str] = None
    subtitles: Optional[list[SubtitleModel]] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: object) -> object:
        # The API returns numeric ids for some titles.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_entity(self) -> CatalogItem:
        return CatalogItem(
            id=self.id,
            title=self.title,
            poster_url=self.poster,
            year=self.year,
            genre=self.genre,
            trailer_url=self.trailer,
            subtitles=tuple(
                Subtitle(lang=s.lang, url=s.url) for s in self.subtitles or ()
            ),
        )


class BrowseResponse(BaseModel):
    """Top-level ``{"list": [...]}`` envelope."""

    model_config = ConfigDict(extra="ignore")

    items: list[MovieModel] = Field(alias="list")
