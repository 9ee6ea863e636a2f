"""Request and response models for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from trailer_studio.catalog.constants import ColorTheme, TrailerModel
from trailer_studio.session.lifecycle import GenerationStatus
from trailer_studio.session.state import SelectionState

AI_NOTICE = (
    "Images are generated using artificial intelligence. Some visual details may differ slightly "
    "from the real product. If you notice inconsistencies, please regenerate the simulation for a "
    "more accurate preview."
)


class TrailerModelOut(BaseModel):
    id: str
    name: str
    image_url: str

    @classmethod
    def from_model(cls, model: TrailerModel) -> "TrailerModelOut":
        return cls(id=model.id, name=model.name, image_url=model.image_url)


class ColorThemeOut(BaseModel):
    id: str
    name: str
    description: str
    gradient_text: str
    gradient_border: str
    glow: str

    @classmethod
    def from_theme(cls, theme: ColorTheme) -> "ColorThemeOut":
        return cls(
            id=theme.id,
            name=theme.name,
            description=theme.description,
            gradient_text=theme.gradient_text,
            gradient_border=theme.gradient_border,
            glow=theme.glow,
        )


class ModelSelection(BaseModel):
    model_id: str


class ThemeSelection(BaseModel):
    theme_id: str


class BrandingUpdate(BaseModel):
    """Partial branding edit; omitted fields keep their value."""

    slogan: str | None = None
    website: str | None = None
    phone: str | None = None


class BrandingOut(BaseModel):
    slogan: str
    website: str
    phone: str


class GeneratedImageOut(BaseModel):
    url: str
    created_at: datetime


class SessionOut(BaseModel):
    """Everything the front-end needs to render the configurator."""

    session_id: str
    model_id: str | None
    theme_id: str | None
    branding: BrandingOut
    logo_preview_url: str | None
    preview_image_url: str
    show_fallback_notice: bool
    status: GenerationStatus
    is_loading: bool
    error: str | None
    generated_image: GeneratedImageOut | None
    notice: str = AI_NOTICE

    @classmethod
    def from_state(cls, state: SelectionState) -> "SessionOut":
        lifecycle = state.lifecycle
        image = lifecycle.image
        return cls(
            session_id=state.session_id,
            model_id=state.model.id if state.model else None,
            theme_id=state.theme.id if state.theme else None,
            branding=BrandingOut(
                slogan=state.branding.slogan,
                website=state.branding.website,
                phone=state.branding.phone,
            ),
            logo_preview_url=state.logo_preview.data_url if state.logo_preview else None,
            preview_image_url=state.preview_image_url(),
            show_fallback_notice=state.show_fallback_notice(),
            status=lifecycle.status,
            is_loading=lifecycle.is_loading,
            error=lifecycle.error,
            generated_image=GeneratedImageOut(url=image.url, created_at=image.created_at) if image else None,
        )
