from .provider import Movie2kProvider, to_search_response

__all__ = ["Movie2kProvider", "to_search_response"]
