"""Centralized configuration management for the storefront service."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from urllib.parse import urlsplit

from dotenv import load_dotenv
from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables defined in a local .env file before instantiating the
# settings singleton so every consumer importing :mod:`storefront.settings` sees
# the same values.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_CATALOG_URL = "https://dummyjson.com/products"
DEFAULT_CATALOG_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_origin(origin: str) -> str:
    """Return the origin stripped of whitespace and trailing slashes."""

    return origin.strip().rstrip("/")


def is_valid_endpoint(url: str | None) -> bool:
    """Return ``True`` when ``url`` is an absolute http(s) URL."""

    if not url:
        return False

    try:
        parsed = urlsplit(url.strip())
    except ValueError:
        return False

    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Only a handful of knobs exist: where the catalog lives, how long to wait
    for it, whether to fetch it on startup, and how chatty logging should be.
    """

    _explicit_catalog_url: bool = PrivateAttr(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def __init__(self, **values: object) -> None:
        """Capture explicit overrides prior to delegating to ``BaseSettings``."""

        normalized_keys = {str(key).lower() for key in values}
        super().__init__(**values)
        self._explicit_catalog_url = "catalog_url" in normalized_keys
        catalog_env = os.getenv("CATALOG_URL")
        if catalog_env is not None and catalog_env.strip():
            self._explicit_catalog_url = True

    catalog_url: str = Field(
        default=DEFAULT_CATALOG_URL,
        alias="CATALOG_URL",
        description="Endpoint returning the product catalog envelope.",
    )
    catalog_timeout_seconds: float = Field(
        default=DEFAULT_CATALOG_TIMEOUT_SECONDS,
        alias="CATALOG_TIMEOUT_SECONDS",
        gt=0,
        description="Overall timeout applied to a single catalog fetch.",
    )
    refresh_on_startup: bool = Field(
        default=True,
        alias="REFRESH_ON_STARTUP",
        description="Fetch the catalog once when the application starts.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of CORS origins allowed to call the API.",
    )

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return normalised CORS origins supplied via environment variables."""

        if not self.cors_allow_origins_raw:
            return []

        origins = [
            _normalize_origin(origin)
            for origin in self.cors_allow_origins_raw.split(",")
            if origin.strip()
        ]
        return [origin for origin in origins if origin]

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset or suspicious configuration."""

        warnings: list[str] = []

        if not self._explicit_catalog_url and self.catalog_url == DEFAULT_CATALOG_URL:
            warnings.append(
                "CATALOG_URL is not set - using the public demo catalog at "
                f"{DEFAULT_CATALOG_URL}"
            )

        if not is_valid_endpoint(self.catalog_url):
            warnings.append(
                f"CATALOG_URL '{self.catalog_url}' is not an absolute http(s) URL - "
                "catalog refreshes will fail"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


settings = get_settings()

__all__ = [
    "AppSettings",
    "DEFAULT_CATALOG_TIMEOUT_SECONDS",
    "DEFAULT_CATALOG_URL",
    "DEFAULT_LOG_LEVEL",
    "get_settings",
    "is_valid_endpoint",
    "settings",
]
