from __future__ import annotations

from .setup import build_logging_config, configure_logging

__all__ = ["build_logging_config", "configure_logging"]
