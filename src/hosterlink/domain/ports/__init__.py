from .cache import PageCachePort
from .catalog import CatalogClientPort
from .favorites import FavoritesPort
from .host import HostPort
from .link_resolver import LinkResolverPort
from .page_fetcher import PageFetcherPort

__all__ = [
    "CatalogClientPort",
    "FavoritesPort",
    "HostPort",
    "LinkResolverPort",
    "PageCachePort",
    "PageFetcherPort",
]
