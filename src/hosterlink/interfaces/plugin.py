"""Host-facing plugin entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from hosterlink.application.use_cases.provider import Movie2kProvider
from hosterlink.domain.ports.host import HostPort
from hosterlink.infrastructure.config import AppConfig, load_config
from hosterlink.infrastructure.logging import configure_logging

from .composition import build_provider

log = structlog.get_logger(__name__)


class Movie2kPlugin:
    """Registers the Movie2K provider with the host's extension loader.

    The host calls :meth:`load` once per session. A failed registration is
    logged and swallowed so one broken plugin cannot abort the loader.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        config_path: Path | None = None,
        dotenv_path: Path | None = None,
        configure_logs: bool = True,
    ) -> None:
        self._config = config
        self._config_path = config_path
        self._dotenv_path = dotenv_path
        self._configure_logs = configure_logs
        self.provider: Movie2kProvider | None = None

    def load(self, host: HostPort, **provider_kwargs: Any) -> Movie2kProvider | None:
        try:
            config = self._config or load_config(
                config_path=self._config_path, dotenv_path=self._dotenv_path
            )
            if self._configure_logs:
                configure_logging(config)
            provider = build_provider(config, **provider_kwargs)
            host.register_main_api(provider)
        except Exception:
            log.exception("plugin_registration_failed", plugin=type(self).__name__)
            return None

        self.provider = provider
        log.info("plugin_registered", provider=provider.name)
        return provider
