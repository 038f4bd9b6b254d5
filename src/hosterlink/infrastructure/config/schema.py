"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppConfig(BaseModel):
    """
    Canonical provider configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (provider/catalog/http/cache/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < overrides) in load.py.
    """

    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Provider identity (YAML section: provider.*)
    provider_name: str = Field(
        default="Movie2K",
        validation_alias=AliasChoices(
            "provider_name",
            AliasPath("provider", "name"),
        ),
        description="Name shown in the host's provider list.",
    )
    main_url: str = Field(
        default="https://www2.movie2k.ch",
        validation_alias=AliasChoices(
            "main_url",
            AliasPath("provider", "main_url"),
        ),
        description="Website the provider represents.",
    )

    # Catalog API (YAML section: catalog.*)
    catalog_base_url: str = Field(
        default="https://api.movie2k.ch/data/browse/",
        validation_alias=AliasChoices(
            "catalog_base_url",
            AliasPath("catalog", "base_url"),
        ),
        description="Browse endpoint of the catalog API.",
    )
    catalog_language: str = Field(
        default="2",
        validation_alias=AliasChoices(
            "catalog_language",
            AliasPath("catalog", "language"),
        ),
        description="Catalog `lang` parameter (2 = German).",
    )
    catalog_page_size: int = Field(
        default=20,
        validation_alias=AliasChoices(
            "catalog_page_size",
            AliasPath("catalog", "page_size"),
        ),
        description="Items requested per catalog page.",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=15.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Timeout for catalog and embed page requests.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
        ),
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Page cache (YAML section: cache.*)
    cache_ttl_seconds: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices(
            "cache_ttl_seconds",
            AliasPath("cache", "ttl_seconds"),
        ),
        description="Main page cache TTL in seconds. None/0 = until restart.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("catalog_page_size")
    @classmethod
    def _validate_page_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("catalog_page_size must be > 0")
        return v

    @field_validator("cache_ttl_seconds")
    @classmethod
    def _validate_cache_ttl(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("cache_ttl_seconds must be >= 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml.
        """
        return {
            "environment": self.environment,
            "provider": {"name": self.provider_name, "main_url": self.main_url},
            "catalog": {
                "base_url": self.catalog_base_url,
                "language": self.catalog_language,
                "page_size": self.catalog_page_size,
            },
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "cache": {"ttl_seconds": self.cache_ttl_seconds},
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    load.py creates EnvOverrides() to read HOSTERLINK_* variables,
    converts to a dict of set values and merges it over YAML/defaults
    before validating AppConfig.

    Supported env var examples (flat, explicit):
    - HOSTERLINK_CATALOG_BASE_URL
    - HOSTERLINK_HTTP_TIMEOUT_SECONDS
    - HOSTERLINK_CACHE_TTL_SECONDS
    - HOSTERLINK_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="HOSTERLINK_",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Optional[Environment] = None

    provider_name: Optional[str] = None
    main_url: Optional[str] = None

    catalog_base_url: Optional[str] = None
    catalog_language: Optional[str] = None
    catalog_page_size: Optional[int] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    cache_ttl_seconds: Optional[int] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
