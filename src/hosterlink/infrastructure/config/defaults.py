"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "environment": "dev",
    "provider": {
        "name": "Movie2K",
        "main_url": "https://www2.movie2k.ch",
    },
    "catalog": {
        "base_url": "https://api.movie2k.ch/data/browse/",
        "language": "2",
        "page_size": 20,
    },
    "http": {
        "timeout_seconds": 15.0,
        "follow_redirects": True,
    },
    "cache": {
        "ttl_seconds": None,  # keep pages until the host session ends
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
