"""Async client for AITunnel image generation of trailer wraps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Any

import httpx
from openai import APIError, AsyncOpenAI, BadRequestError
from PIL import Image, UnidentifiedImageError

from trailer_studio.catalog.constants import FALLBACK_IMAGE_URL
from trailer_studio.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ImageGenerationError(RuntimeError):
    """Raised when the image provider fails to produce a render."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


@dataclass(slots=True)
class LogoUpload:
    """Logo image as received from the browser."""

    filename: str
    content_type: str
    data: bytes


@dataclass(slots=True)
class GenerationRequest:
    """Everything the generator needs for one render."""

    model_image: str
    prompt: str
    theme_name: str
    logo: LogoUpload | None = None
    slogan: str = ""
    website: str = ""
    phone: str = ""


class ImageGeneratorClient:
    """Renders wrap proposals on top of the official trailer image."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        if not settings.aitunnel_api_key:
            raise RuntimeError("AITunnel API key is not configured.")

        self._settings = settings
        self._http = httpx.AsyncClient(timeout=settings.request_timeout, follow_redirects=True)
        self._client = AsyncOpenAI(
            api_key=settings.aitunnel_api_key,
            base_url=settings.aitunnel_base_url.rstrip("/"),
            timeout=settings.request_timeout,
        )

    async def generate_trailer_image(self, request: GenerationRequest) -> str | None:
        """Return the render as a displayable URL (usually a ``data:`` URL) or ``None``."""

        image_files: list[BytesIO] = []
        try:
            reference = await self._fetch_reference(request.model_image)
            image_files.append(self._image_as_png(reference, "trailer"))
            if request.logo is not None:
                image_files.append(self._image_as_png(request.logo.data, "logo"))

            try:
                result = await self._client.images.edit(
                    model=self._settings.aitunnel_image_model,
                    image=image_files,  # type: ignore[arg-type]
                    prompt=request.prompt,
                    size=self._settings.aitunnel_image_size,  # type: ignore[arg-type]
                    quality=self._settings.aitunnel_image_quality,  # type: ignore[arg-type]
                )
            except BadRequestError as exc:
                if "No valid image files provided" not in str(exc):
                    raise ImageGenerationError(str(exc), status_code=exc.status_code) from exc
                logger.warning("Provider rejected reference images; retrying as text-only generation.")
                return await self._generate_with_prompt(request.prompt)
            except APIError as exc:
                raise ImageGenerationError(f"Image provider error: {exc}") from exc
        finally:
            for file in image_files:
                file.close()

        return self._to_display_url(result)

    async def _fetch_reference(self, url: str) -> bytes:
        """Download the reference render, falling back to the generic trailer image once."""

        try:
            return await self._download(url)
        except httpx.HTTPError as exc:
            if url == FALLBACK_IMAGE_URL:
                raise ImageGenerationError(f"Could not download reference image {url}: {exc}") from exc
            logger.warning("Reference image %s failed to load (%s); using fallback image.", url, exc)
        try:
            return await self._download(FALLBACK_IMAGE_URL)
        except httpx.HTTPError as exc:
            raise ImageGenerationError(
                f"Could not download reference image {url} or fallback {FALLBACK_IMAGE_URL}: {exc}",
            ) from exc

    async def _download(self, url: str) -> bytes:
        response = await self._http.get(url)
        response.raise_for_status()
        return response.content

    def _image_as_png(self, data: bytes, name_prefix: str) -> BytesIO:
        """Convert arbitrary image bytes to PNG since the edit API requires PNG input."""

        try:
            with Image.open(BytesIO(data)) as img:
                img = img.convert("RGBA")
                buffer = BytesIO()
                img.save(buffer, format="PNG")
        except UnidentifiedImageError as exc:
            raise ImageGenerationError(f"{name_prefix} is not a supported image.") from exc
        buffer.seek(0)
        buffer.name = f"{name_prefix}.png"
        return buffer

    async def _generate_with_prompt(self, prompt: str) -> str | None:
        try:
            result = await self._client.images.generate(
                model=self._settings.aitunnel_image_model,
                prompt=prompt,
                size=self._settings.aitunnel_image_size,  # type: ignore[arg-type]
                quality=self._settings.aitunnel_image_quality,  # type: ignore[arg-type]
            )
        except BadRequestError as exc:
            if "no_images_generated" in str(exc).lower():
                return None
            raise ImageGenerationError(str(exc), status_code=exc.status_code) from exc
        except APIError as exc:
            raise ImageGenerationError(f"Image provider error: {exc}") from exc
        return self._to_display_url(result)

    @staticmethod
    def _to_display_url(result: Any) -> str | None:
        data_attr = getattr(result, "data", None)
        if not isinstance(data_attr, list) or not data_attr:
            logger.warning("Image response has no data entries: %s", result)
            return None
        primary = data_attr[0]
        image_base64 = getattr(primary, "b64_json", None)
        image_url = getattr(primary, "url", None)
        if image_base64 is None and isinstance(primary, dict):
            image_base64 = primary.get("b64_json")
            image_url = image_url or primary.get("url")
        if image_base64:
            return f"data:image/png;base64,{image_base64}"
        return image_url or None

    async def ping(self) -> bool:
        """Return ``True`` when the service responds to a model listing call."""

        models = await self._client.models.list()
        return bool(models.data)

    async def close(self) -> None:
        """Close the underlying HTTP sessions."""

        await self._http.aclose()
        await self._client.close()
