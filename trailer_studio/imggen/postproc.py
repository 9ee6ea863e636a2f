"""Helpers for turning a generated render into a downloadable file."""

from __future__ import annotations

import base64
import binascii
from datetime import datetime, timezone


class ImageDecodeError(ValueError):
    """Raised when a ``data:`` URL cannot be decoded."""


def download_filename(now: datetime | None = None) -> str:
    """Return ``trailer-preview-<epoch ms>.png`` for the given moment."""

    moment = now or datetime.now(timezone.utc)
    return f"trailer-preview-{int(moment.timestamp() * 1000)}.png"


def is_data_url(image: str) -> bool:
    return image.startswith("data:") and "," in image


def decode_data_url(image: str) -> tuple[bytes, str]:
    """Split a base64 ``data:`` URL into raw bytes and its media type."""

    if not is_data_url(image):
        raise ImageDecodeError("Image is not a data URL.")
    header, encoded = image.split(",", 1)
    media_type = header[len("data:"):].split(";", 1)[0] or "image/png"
    if ";base64" not in header:
        raise ImageDecodeError("Only base64 data URLs are supported.")
    try:
        return base64.b64decode(encoded, validate=True), media_type
    except (ValueError, binascii.Error) as exc:
        raise ImageDecodeError("Image payload is not valid base64.") from exc


def to_data_url(data: bytes, media_type: str) -> str:
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"
