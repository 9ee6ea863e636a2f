"""Generation flow: validate the selection, compose the prompt, call the generator."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from trailer_studio.catalog.constants import resolve_reference_image
from trailer_studio.imggen.generator_client import GenerationRequest
from trailer_studio.imggen.prompt_builder import PromptBuilder
from trailer_studio.metrics.prometheus_exporter import trailer_generation_total
from trailer_studio.session.lifecycle import GeneratedImage
from trailer_studio.session.state import SelectionState

logger = logging.getLogger(__name__)

MISSING_MODEL_MESSAGE = "Please select a trailer model."
MISSING_THEME_MESSAGE = "Please choose a color theme."
EMPTY_RESULT_MESSAGE = "Image generation returned no result."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class SelectionValidationError(ValueError):
    """Raised when generation is triggered before a model and a theme are chosen."""


def validate_selection(state: SelectionState) -> None:
    """Raise ``SelectionValidationError`` unless both a model and a theme are chosen."""

    if state.model is None:
        raise SelectionValidationError(MISSING_MODEL_MESSAGE)
    if state.theme is None:
        raise SelectionValidationError(MISSING_THEME_MESSAGE)


class TrailerImageGenerator(Protocol):
    async def generate_trailer_image(self, request: GenerationRequest) -> str | None: ...


class ConfiguratorLogic:
    """Runs one generation per trigger and records the outcome on the session."""

    def __init__(self, generator: TrailerImageGenerator, prompt_builder: PromptBuilder | None = None) -> None:
        self._generator = generator
        self._prompt_builder = prompt_builder or PromptBuilder()

    async def generate(self, state: SelectionState) -> SelectionState:
        """Trigger a render for ``state``.

        Raises ``SelectionValidationError`` without touching the state when the
        model or theme is missing, and ``GenerationInProgressError`` while a
        previous request is outstanding. Generator failures never propagate;
        they end up in the FAILED state.
        """

        validate_selection(state)

        prompt = self._prompt_builder.build(
            state.model,
            state.theme,
            state.branding,
            has_logo=state.logo is not None,
        )
        reference = resolve_reference_image(state.model.id)
        logger.info("Using reference image %s for session %s", reference, state.session_id)

        request = GenerationRequest(
            model_image=reference,
            prompt=prompt,
            theme_name=state.theme.name,
            logo=state.logo,
            slogan=state.branding.slogan,
            website=state.branding.website,
            phone=state.branding.phone,
        )

        state.lifecycle.begin()

        try:
            image = await self._generator.generate_trailer_image(request)
            if not image:
                raise RuntimeError(EMPTY_RESULT_MESSAGE)
        except asyncio.CancelledError:
            state.lifecycle.fail("Generation was cancelled.")
            raise
        except Exception as exc:
            logger.error("Trailer generation failed for session %s: %s", state.session_id, exc)
            trailer_generation_total.labels(outcome="failed").inc()
            state.lifecycle.fail(str(exc) or UNKNOWN_ERROR_MESSAGE)
            return state

        logger.info("Generated trailer preview for session %s", state.session_id)
        trailer_generation_total.labels(outcome="succeeded").inc()
        state.lifecycle.succeed(GeneratedImage(url=image, prompt=prompt))
        return state
