from .catalog import (
    CatalogItem,
    ContentType,
    HomePage,
    HomePageList,
    SearchResponse,
    Subtitle,
)
from .errors import (
    CatalogDeserializationError,
    CatalogError,
    CatalogFetchError,
)
from .links import UNKNOWN_HOSTER, HosterPattern, StreamLink, StreamQuality
from .results import FetchError, FetchErrorKind, FetchResult

__all__ = [
    "UNKNOWN_HOSTER",
    "CatalogDeserializationError",
    "CatalogError",
    "CatalogFetchError",
    "CatalogItem",
    "ContentType",
    "FetchError",
    "FetchErrorKind",
    "FetchResult",
    "HomePage",
    "HomePageList",
    "HosterPattern",
    "SearchResponse",
    "StreamLink",
    "StreamQuality",
    "Subtitle",
]
