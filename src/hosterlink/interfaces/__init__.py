from .composition import build_provider
from .plugin import Movie2kPlugin

__all__ = ["Movie2kPlugin", "build_provider"]
