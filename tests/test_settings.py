"""Unit tests covering the typed application settings implementation."""

from __future__ import annotations

import logging

import pytest

from storefront.main import _validate_environment
from storefront.settings import (
    DEFAULT_CATALOG_TIMEOUT_SECONDS,
    DEFAULT_CATALOG_URL,
    AppSettings,
    is_valid_endpoint,
)


def test_defaults_point_at_public_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without overrides the service targets the public demo catalog."""

    monkeypatch.delenv("CATALOG_URL", raising=False)
    monkeypatch.delenv("CATALOG_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("REFRESH_ON_STARTUP", raising=False)
    configured = AppSettings()

    assert configured.catalog_url == DEFAULT_CATALOG_URL
    assert configured.catalog_timeout_seconds == DEFAULT_CATALOG_TIMEOUT_SECONDS
    assert configured.refresh_on_startup is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_URL", "https://catalog.example.com/products")
    monkeypatch.setenv("CATALOG_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("REFRESH_ON_STARTUP", "false")
    configured = AppSettings()

    assert configured.catalog_url == "https://catalog.example.com/products"
    assert configured.catalog_timeout_seconds == 2.5
    assert configured.refresh_on_startup is False


def test_log_level_numeric_falls_back_to_info() -> None:
    assert AppSettings(log_level="debug").log_level_numeric == logging.DEBUG
    assert AppSettings(log_level="chatty").log_level_numeric == logging.INFO


def test_cors_origins_are_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "CORS_ALLOW_ORIGINS", " https://shop.example.com/ , ,http://localhost:3000"
    )
    configured = AppSettings()

    assert configured.cors_allow_origins == [
        "https://shop.example.com",
        "http://localhost:3000",
    ]


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://dummyjson.com/products", True),
        ("http://localhost:8080/products", True),
        ("dummyjson.com/products", False),
        ("ftp://dummyjson.com/products", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_endpoint(url: str | None, expected: bool) -> None:
    assert is_valid_endpoint(url) is expected


def test_optional_config_warnings_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Relying on the demo catalog should be called out."""

    monkeypatch.delenv("CATALOG_URL", raising=False)
    configured = AppSettings()

    warnings = configured.optional_config_warnings()

    assert any("CATALOG_URL is not set" in warning for warning in warnings)


def test_optional_config_warnings_flag_invalid_url(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CATALOG_URL", "not-a-url")
    configured = AppSettings()

    warnings = configured.optional_config_warnings()

    assert len(warnings) == 1
    assert "not an absolute http(s) URL" in warnings[0]


def test_validate_environment_logging(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """The environment validator should emit warnings when optional inputs are absent."""

    monkeypatch.delenv("CATALOG_URL", raising=False)
    candidate = AppSettings()

    with caplog.at_level(logging.WARNING):
        _validate_environment(active_settings=candidate)

    assert "CATALOG_URL is not set" in caplog.text


def test_validate_environment_silent_when_overrides_present(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Providing full configuration should avoid warning output."""

    monkeypatch.setenv("CATALOG_URL", "https://catalog.example.com/products")
    candidate = AppSettings()

    with caplog.at_level(logging.WARNING):
        _validate_environment(active_settings=candidate)

    assert "Environment Configuration Warnings" not in caplog.text
