"""Movie2K content provider with hoster link resolution."""

__version__ = "0.1.0"
