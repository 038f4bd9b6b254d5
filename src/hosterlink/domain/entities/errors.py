"""Catalog boundary exceptions."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog API errors."""


class CatalogFetchError(CatalogError):
    """Raised when the catalog endpoint is unreachable or returns an HTTP error."""


class CatalogDeserializationError(CatalogError):
    """Raised when the catalog response is not the expected JSON shape."""
