"""Logging setup for the API process and the maintenance scripts."""

from __future__ import annotations

import logging

from trailer_studio.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# HTTP client libraries log every request line at INFO, including reference image URLs.
CHATTY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "openai")


def resolve_level(name: str | None) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value, defaulting to INFO."""

    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> int:
    """Configure the root logger and return the effective level.

    ``level`` overrides ``LOG_LEVEL`` from the settings.
    """

    effective = resolve_level(level or get_settings().log_level)
    logging.basicConfig(level=effective, format=LOG_FORMAT)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
    return effective
