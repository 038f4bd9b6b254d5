"""Port for the media-browsing host that loads this provider."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostPort(Protocol):
    """The host's extension loader as seen by the plugin."""

    def register_main_api(self, provider: Any) -> None:
        """Make *provider* available in the host UI."""
        ...
