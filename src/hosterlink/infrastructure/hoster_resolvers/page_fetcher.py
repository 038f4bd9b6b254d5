"""httpx + BeautifulSoup implementation of :class:`PageFetcherPort`."""

from __future__ import annotations

import httpx
import structlog

from hosterlink.domain.entities.results import FetchErrorKind, FetchResult
from hosterlink.infrastructure.common.html_selectors import parse_html

log = structlog.get_logger(__name__)

_DEFAULT_TIMEOUT = 15.0


class HttpxPageFetcher:
    """Fetches embed pages with a single GET and parses them with lxml.

    The shared ``httpx.AsyncClient`` is owned by the caller.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._timeout = timeout

    async def fetch(self, url: str) -> FetchResult:
        """GET *url* and parse it. Never raises."""
        try:
            resp = await self._http.get(url, timeout=self._timeout)
            resp.raise_for_status()
        except httpx.TimeoutException:
            log.warning("hoster_fetch_timeout", url=url, timeout=self._timeout)
            return FetchResult.failure(FetchErrorKind.TIMEOUT, url)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            log.warning("hoster_fetch_http_status", url=url, status=status)
            return FetchResult.failure(
                FetchErrorKind.HTTP_STATUS, url, status_code=status
            )
        except httpx.HTTPError as exc:
            log.warning("hoster_fetch_network_error", url=url, error=str(exc))
            return FetchResult.failure(
                FetchErrorKind.NETWORK, url, message=str(exc)
            )

        try:
            document = parse_html(resp.text)
        except Exception as exc:  # noqa: BLE001
            log.warning("hoster_fetch_parse_error", url=url, error=str(exc))
            return FetchResult.failure(
                FetchErrorKind.PARSE_ERROR, url, message=str(exc)
            )

        log.debug("hoster_page_fetched", url=url, status=resp.status_code)
        return FetchResult.success(document)
