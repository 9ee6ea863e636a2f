"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    aitunnel_api_key: str = ""
    aitunnel_base_url: str = "https://api.aitunnel.ru/v1"
    aitunnel_image_model: str = "gemini-2.5-flash-image"
    aitunnel_image_size: str = "1536x1024"
    aitunnel_image_quality: str = "high"

    request_timeout: float = 120.0
    max_sessions: int = 1000


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        aitunnel_api_key=os.getenv("AITUNNEL_API_KEY", ""),
        aitunnel_base_url=os.getenv("AITUNNEL_BASE_URL", "https://api.aitunnel.ru/v1"),
        aitunnel_image_model=os.getenv("AITUNNEL_IMAGE_MODEL", "gemini-2.5-flash-image"),
        aitunnel_image_size=os.getenv("AITUNNEL_IMAGE_SIZE", "1536x1024"),
        aitunnel_image_quality=os.getenv("AITUNNEL_IMAGE_QUALITY", "high"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "120")),
        max_sessions=int(os.getenv("MAX_SESSIONS", "1000")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
