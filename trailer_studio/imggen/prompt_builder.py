"""Prompt construction for the trailer wrap render."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from trailer_studio.catalog.constants import (
    FALLBACK_IMAGE_URL,
    OFFICIAL_IMAGES,
    ColorTheme,
    TrailerModel,
)

BRANDING_FIELDS: tuple[str, ...] = ("slogan", "website", "phone")


class PromptValidationError(ValueError):
    """Raised when the prompt is requested without a model or a theme."""


@dataclass(frozen=True, slots=True)
class BrandingDetails:
    """Free-text branding overlaid on the wrap. Every field is optional."""

    slogan: str = ""
    website: str = ""
    phone: str = ""

    def with_field(self, name: str, value: str) -> "BrandingDetails":
        if name not in BRANDING_FIELDS:
            raise ValueError(f"Unknown branding field: {name}")
        return replace(self, **{name: value})

    def is_empty(self) -> bool:
        return not (self.slogan or self.website or self.phone)

    def lines(self) -> list[str]:
        """Return ``Label: "value".`` entries for the non-empty fields in fixed order."""

        lines: list[str] = []
        if self.slogan:
            lines.append(f'Slogan: "{self.slogan}".')
        if self.website:
            lines.append(f'Website: "{self.website}".')
        if self.phone:
            lines.append(f'Phone: "{self.phone}".')
        return lines


class ThemeStyle(str, Enum):
    """Stylistic direction chosen from the theme name."""

    FRESH_AQUA = "Fresh Aqua"
    ECO_BRIGHT = "Eco Bright"
    DEFAULT = "default"

    @classmethod
    def for_theme_name(cls, name: str) -> "ThemeStyle":
        # Exact match only; every other name, "American Classic" included, takes the default arm.
        for style in (cls.FRESH_AQUA, cls.ECO_BRIGHT):
            if style.value == name:
                return style
        return cls.DEFAULT


STYLE_CLAUSES: dict[ThemeStyle, str] = {
    ThemeStyle.FRESH_AQUA: (
        "Use fresh blue-green tones with modern water-inspired energy lines, waves, and bright aqua "
        "gradients. Add subtle white or chrome details for contrast."
    ),
    ThemeStyle.ECO_BRIGHT: (
        "Use natural green tones with organic curves, flowing shapes, and eco-friendly textures. "
        "Consider abstract leaves or sunlight accents."
    ),
    ThemeStyle.DEFAULT: (
        "Use bold patriotic tones — red, white, blue with stripes, stars, or shield-like motifs in a "
        "clean fleet branding layout."
    ),
}

_missing_styles = set(ThemeStyle) - set(STYLE_CLAUSES)
if _missing_styles:
    raise RuntimeError(f"Theme styles without a clause: {sorted(s.name for s in _missing_styles)}")

BASE_INSTRUCTIONS = f"""You are a professional commercial vehicle wrap designer.
Generate a high-quality promotional rendering of a bin trailer using ONLY the official reference image as the base.
Do not modify the physical model — use it as your canvas.

Reference images:
- Single Cold: {OFFICIAL_IMAGES["single-cold"]}
- Double Hot: {OFFICIAL_IMAGES["double-hot"]}
If the reference cannot be accessed, use this fallback: {FALLBACK_IMAGE_URL}.

Keep identical proportions, frame, wheels, and perspective.
Do NOT generate new vehicles or change the structure."""

WRAP_DIRECTIONS = """For the wrap design:
- Create distinct visual concepts — every generation should look like a new wrap proposal.
- You may redesign the graphics, stripe layout, color blending, logo placement zones, and background panel textures.
- Be bold and commercial: include gradients, abstract lines, layered compositions, or geometric wraps.
- Feel free to reinterpret the theme artistically, as long as the trailer body shape remains correct.
- Mix finishes: matte + gloss, or metallic + painted areas.
- Avoid duplicating the same look or plain recolors."""

OVERLAY_INSTRUCTIONS = """After completing the creative wrap, overlay the logo and branding details (slogan, website, phone) if provided.
Keep lighting realistic, with neutral studio background, clean reflections, and professional presentation."""

LOGO_CLAUSE = " Add the uploaded logo clearly on the side panel."
BRANDING_INTRO = " Include the following text on or near the trailer:"
CLOSING_CLAUSE = (
    " The final image must look like a professional product photo with realistic lighting "
    "and a clean neutral background."
)


class PromptBuilder:
    """Builds the wrap-design instruction sent to the image generator."""

    def build(
        self,
        model: TrailerModel | None,
        theme: ColorTheme | None,
        branding: BrandingDetails | None = None,
        *,
        has_logo: bool = False,
    ) -> str:
        """Return the natural-language instruction for rendering ``model`` wrapped in ``theme``."""

        if model is None:
            raise PromptValidationError("A trailer model is required to build the prompt.")
        if theme is None:
            raise PromptValidationError("A color theme is required to build the prompt.")

        style = ThemeStyle.for_theme_name(theme.name)
        prompt = "\n\n".join(
            [
                BASE_INSTRUCTIONS,
                f'Now apply the selected theme creatively: "{theme.name}" ({theme.description}).',
                WRAP_DIRECTIONS,
                STYLE_CLAUSES[style],
                OVERLAY_INSTRUCTIONS,
            ]
        )

        if has_logo:
            prompt += LOGO_CLAUSE

        branding = branding or BrandingDetails()
        if not branding.is_empty():
            prompt += BRANDING_INTRO
            prompt += "".join(f" {line}" for line in branding.lines())

        prompt += CLOSING_CLAUSE
        return prompt
