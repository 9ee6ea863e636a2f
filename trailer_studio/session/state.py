"""Per-session selection state for the configurator."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from trailer_studio.catalog.constants import FALLBACK_IMAGE_URL, ColorTheme, TrailerModel
from trailer_studio.imggen.generator_client import LogoUpload
from trailer_studio.imggen.postproc import to_data_url
from trailer_studio.imggen.prompt_builder import BrandingDetails
from trailer_studio.session.lifecycle import GenerationLifecycle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LogoPreview:
    """Locally displayable rendering of the uploaded logo."""

    data_url: str | None
    preview_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    released: bool = False

    def release(self) -> None:
        self.data_url = None
        self.released = True


class SelectionState:
    """User choices for one configurator session. Setters replace whole slots."""

    def __init__(self, session_id: str | None = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.model: TrailerModel | None = None
        self.theme: ColorTheme | None = None
        self.branding = BrandingDetails()
        self.logo: LogoUpload | None = None
        self.logo_preview: LogoPreview | None = None
        self.lifecycle = GenerationLifecycle()

    def select_model(self, model: TrailerModel) -> None:
        self.model = model

    def select_theme(self, theme: ColorTheme) -> None:
        self.theme = theme

    def set_branding(self, branding: BrandingDetails) -> None:
        self.branding = branding

    def set_branding_field(self, name: str, value: str) -> None:
        self.branding = self.branding.with_field(name, value)

    def set_logo(self, logo: LogoUpload) -> LogoPreview:
        """Store a new logo and swap its preview in, releasing the old one."""

        previous = self.logo_preview
        self.logo = logo
        self.logo_preview = LogoPreview(data_url=to_data_url(logo.data, logo.content_type or "image/png"))
        if previous is not None:
            previous.release()
            logger.debug("Released logo preview %s for session %s", previous.preview_id, self.session_id)
        return self.logo_preview

    def preview_image_url(self) -> str:
        """Generated render, else the selected model's photo, else the fallback image."""

        image = self.lifecycle.image
        if image is not None:
            return image.url
        if self.model is not None:
            return self.model.image_url
        return FALLBACK_IMAGE_URL

    def show_fallback_notice(self) -> bool:
        return self.model is None and self.lifecycle.image is None

    def release(self) -> None:
        """Drop resources held by the session."""

        if self.logo_preview is not None:
            self.logo_preview.release()
        self.logo = None
