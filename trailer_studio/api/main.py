"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, File, HTTPException, Request, Response, UploadFile, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from trailer_studio.catalog.constants import COLOR_THEMES, TRAILER_MODELS, CatalogLookupError, get_model, get_theme
from trailer_studio.config.settings import get_settings
from trailer_studio.imggen.generator_client import ImageGeneratorClient, LogoUpload
from trailer_studio.imggen.postproc import ImageDecodeError, decode_data_url, download_filename, is_data_url
from trailer_studio.logic import (
    ConfiguratorLogic,
    SelectionValidationError,
    TrailerImageGenerator,
    validate_selection,
)
from trailer_studio.monitoring.logging import configure_logging
from trailer_studio.session.lifecycle import GenerationInProgressError
from trailer_studio.session.state import SelectionState
from trailer_studio.session.store import SessionLimitError, SessionNotFoundError, SessionStore

from .schemas import (
    BrandingUpdate,
    ColorThemeOut,
    ModelSelection,
    SessionOut,
    ThemeSelection,
    TrailerModelOut,
)

logger = logging.getLogger(__name__)


def _store(request: Request) -> SessionStore:
    return request.app.state.store


def _session(request: Request, session_id: str) -> SelectionState:
    try:
        return _store(request).get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


def _logic(request: Request) -> ConfiguratorLogic:
    logic = request.app.state.logic
    if logic is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Image generator is not configured.",
        )
    return logic


def create_app(generator: TrailerImageGenerator | None = None) -> FastAPI:
    """Initialise the FastAPI application.

    ``generator`` replaces the AITunnel client, mainly for tests.
    """

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        client: ImageGeneratorClient | None = None
        if app.state.logic is None and settings.aitunnel_api_key:
            client = ImageGeneratorClient(settings)
            app.state.logic = ConfiguratorLogic(client)
        elif app.state.logic is None:
            logger.warning("AITUNNEL_API_KEY is not set; generation is disabled.")
        try:
            yield
        finally:
            if client is not None:
                await client.close()

    app = FastAPI(
        title="Trailer Studio API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )
    app.state.store = SessionStore(max_sessions=settings.max_sessions)
    app.state.logic = ConfiguratorLogic(generator) if generator is not None else None

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/metrics", tags=["system"])
    async def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/catalog/models", tags=["catalog"])
    async def list_models() -> list[TrailerModelOut]:
        return [TrailerModelOut.from_model(model) for model in TRAILER_MODELS]

    @app.get("/catalog/themes", tags=["catalog"])
    async def list_themes() -> list[ColorThemeOut]:
        return [ColorThemeOut.from_theme(theme) for theme in COLOR_THEMES]

    @app.post("/sessions", status_code=status.HTTP_201_CREATED, tags=["sessions"])
    async def create_session(request: Request) -> SessionOut:
        try:
            state = await _store(request).create()
        except SessionLimitError as exc:
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
        return SessionOut.from_state(state)

    @app.get("/sessions/{session_id}", tags=["sessions"])
    async def get_session(request: Request, session_id: str) -> SessionOut:
        return SessionOut.from_state(_session(request, session_id))

    @app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["sessions"])
    async def delete_session(request: Request, session_id: str) -> Response:
        try:
            await _store(request).delete(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.put("/sessions/{session_id}/model", tags=["sessions"])
    async def select_model(request: Request, session_id: str, body: ModelSelection) -> SessionOut:
        state = _session(request, session_id)
        try:
            state.select_model(get_model(body.model_id))
        except CatalogLookupError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return SessionOut.from_state(state)

    @app.put("/sessions/{session_id}/theme", tags=["sessions"])
    async def select_theme(request: Request, session_id: str, body: ThemeSelection) -> SessionOut:
        state = _session(request, session_id)
        try:
            state.select_theme(get_theme(body.theme_id))
        except CatalogLookupError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return SessionOut.from_state(state)

    @app.patch("/sessions/{session_id}/branding", tags=["sessions"])
    async def update_branding(request: Request, session_id: str, body: BrandingUpdate) -> SessionOut:
        state = _session(request, session_id)
        for name, value in body.model_dump(exclude_none=True).items():
            state.set_branding_field(name, value)
        return SessionOut.from_state(state)

    @app.put("/sessions/{session_id}/logo", tags=["sessions"])
    async def upload_logo(request: Request, session_id: str, file: UploadFile = File(...)) -> SessionOut:
        state = _session(request, session_id)
        async with _store(request).lock_for(session_id):
            data = await file.read()
            state.set_logo(
                LogoUpload(
                    filename=file.filename or "logo",
                    content_type=file.content_type or "image/png",
                    data=data,
                )
            )
        return SessionOut.from_state(state)

    @app.post("/sessions/{session_id}/generate", tags=["generation"])
    async def generate(request: Request, session_id: str) -> SessionOut:
        state = _session(request, session_id)
        try:
            validate_selection(state)
            await _logic(request).generate(state)
        except SelectionValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except GenerationInProgressError as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
        return SessionOut.from_state(state)

    @app.get("/sessions/{session_id}/image", tags=["generation"])
    async def download_image(request: Request, session_id: str) -> Response:
        state = _session(request, session_id)
        image = state.lifecycle.image
        if image is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No generated image yet.")

        if is_data_url(image.url):
            try:
                content, media_type = decode_data_url(image.url)
            except ImageDecodeError as exc:
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
        else:
            async with httpx.AsyncClient(timeout=settings.request_timeout, follow_redirects=True) as client:
                try:
                    upstream = await client.get(image.url)
                    upstream.raise_for_status()
                except httpx.HTTPError as exc:
                    raise HTTPException(
                        status_code=status.HTTP_502_BAD_GATEWAY,
                        detail=f"Could not fetch generated image: {exc}",
                    ) from exc
            content = upstream.content
            media_type = upstream.headers.get("content-type", "image/png")

        filename = download_filename()
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


app = create_app()
