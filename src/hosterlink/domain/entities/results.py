"""Explicit result types for network boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FetchErrorKind(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class FetchError:
    """Why an embed page could not be fetched or parsed."""

    kind: FetchErrorKind
    url: str
    status_code: int | None = None  # Only for HTTP_STATUS
    message: str = ""


@dataclass(frozen=True)
class FetchResult:
    """Either a parsed document or a :class:`FetchError`, never both."""

    document: Any = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.document is not None

    @classmethod
    def success(cls, document: Any) -> FetchResult:
        return cls(document=document)

    @classmethod
    def failure(
        cls,
        kind: FetchErrorKind,
        url: str,
        *,
        status_code: int | None = None,
        message: str = "",
    ) -> FetchResult:
        return cls(
            error=FetchError(
                kind=kind, url=url, status_code=status_code, message=message
            )
        )
