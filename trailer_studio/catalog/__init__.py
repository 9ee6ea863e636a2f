"""Immutable trailer model and color theme catalog."""

from .constants import (
    COLOR_THEMES,
    FALLBACK_IMAGE_URL,
    OFFICIAL_IMAGES,
    TRAILER_MODELS,
    CatalogLookupError,
    ColorTheme,
    TrailerModel,
    get_model,
    get_theme,
    resolve_reference_image,
)

__all__ = [
    "COLOR_THEMES",
    "FALLBACK_IMAGE_URL",
    "OFFICIAL_IMAGES",
    "TRAILER_MODELS",
    "CatalogLookupError",
    "ColorTheme",
    "TrailerModel",
    "get_model",
    "get_theme",
    "resolve_reference_image",
]
