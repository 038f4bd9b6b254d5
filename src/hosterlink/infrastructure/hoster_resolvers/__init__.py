"""Hoster classification, embed page fetching and stream link extraction."""

from __future__ import annotations

from .page_fetcher import HttpxPageFetcher
from .registry import DEFAULT_HOSTER_PATTERNS, HosterRegistry
from .resolver import LinkResolver, infer_quality

__all__ = [
    "DEFAULT_HOSTER_PATTERNS",
    "HosterRegistry",
    "HttpxPageFetcher",
    "LinkResolver",
    "infer_quality",
]
