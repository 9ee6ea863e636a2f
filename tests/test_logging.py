"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from trailer_studio.config.settings import get_settings
from trailer_studio.monitoring.logging import CHATTY_LOGGERS, configure_logging, resolve_level


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("loud", logging.INFO), (None, logging.INFO)],
)
def test_resolve_level(name: str | None, expected: int) -> None:
    assert resolve_level(name) == expected


def test_configure_logging_uses_settings_and_quiets_http_clients(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()
    try:
        assert configure_logging() == logging.DEBUG
    finally:
        get_settings.cache_clear()

    for name in CHATTY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_explicit_level_overrides_settings() -> None:
    assert configure_logging("error") == logging.ERROR
    assert logging.getLogger("httpx").level == logging.ERROR
