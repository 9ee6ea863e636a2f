"""Trailer models, color themes and reference image locations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class CatalogLookupError(LookupError):
    """Raised when a model or theme id is not part of the catalog."""


@dataclass(frozen=True, slots=True)
class TrailerModel:
    """Trailer body that can be wrapped."""

    id: str
    name: str
    image_url: str


@dataclass(frozen=True, slots=True)
class ColorTheme:
    """Named palette. Gradient and glow values are Tailwind classes for the front-end."""

    id: str
    name: str
    description: str
    gradient_text: str
    gradient_border: str
    glow: str


TRAILER_MODELS: tuple[TrailerModel, ...] = (
    TrailerModel(
        id="single-cold",
        name="Single Cold Model",
        image_url="https://i.imgur.com/wzKkCcR.png",
    ),
    TrailerModel(
        id="double-hot",
        name="Double Hot Model",
        image_url="https://i.imgur.com/SaBAdqf.png",
    ),
)

FALLBACK_IMAGE_URL = "https://i.imgur.com/u5a2S0X.png"

COLOR_THEMES: tuple[ColorTheme, ...] = (
    ColorTheme(
        id="fresh-aqua",
        name="Fresh Aqua",
        description="a bright blue and green palette symbolizing freshness and water",
        gradient_text="from-cyan-400 to-emerald-400",
        gradient_border="from-cyan-400 to-emerald-400",
        glow="shadow-cyan-400/50",
    ),
    ColorTheme(
        id="eco-bright",
        name="Eco Bright",
        description="a vibrant green palette representing eco-friendly operations",
        gradient_text="from-lime-400 to-green-500",
        gradient_border="from-lime-400 to-green-500",
        glow="shadow-lime-400/50",
    ),
    ColorTheme(
        id="american-classic",
        name="American Classic",
        description="a bold red, white, and blue palette inspired by the American flag",
        gradient_text="from-red-500 to-blue-500",
        gradient_border="from-red-500 to-blue-500",
        glow="shadow-red-500/50",
    ),
)

# Canonical renders sent to the generator as the unmodifiable base.
OFFICIAL_IMAGES: dict[str, str] = {
    "single-cold": "https://i.imgur.com/wzKkCcR.png",
    "double-hot": "https://i.imgur.com/SaBAdqf.png",
}

_MODELS_BY_ID = {model.id: model for model in TRAILER_MODELS}
_THEMES_BY_ID = {theme.id: theme for theme in COLOR_THEMES}


def get_model(model_id: str) -> TrailerModel:
    """Return the catalog model with the given id."""

    try:
        return _MODELS_BY_ID[model_id]
    except KeyError as exc:
        raise CatalogLookupError(f"Unknown trailer model: {model_id}") from exc


def get_theme(theme_id: str) -> ColorTheme:
    """Return the catalog theme with the given id."""

    try:
        return _THEMES_BY_ID[theme_id]
    except KeyError as exc:
        raise CatalogLookupError(f"Unknown color theme: {theme_id}") from exc


def resolve_reference_image(model_id: str | None) -> str:
    """Map a model id to its official reference image, or the fallback image."""

    key = (model_id or "").lower()
    url = OFFICIAL_IMAGES.get(key)
    if url is None:
        logger.warning("No official reference image for model %r; using fallback.", model_id)
        return FALLBACK_IMAGE_URL
    return url
