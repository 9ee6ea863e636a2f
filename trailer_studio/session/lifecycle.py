"""Finite state machine for a single preview generation request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class GenerationInProgressError(RuntimeError):
    """Raised when a generation is triggered while another one is outstanding."""


class GenerationStatus(str, Enum):
    """Lifecycle stages of a generation request."""

    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class GeneratedImage:
    """Render returned by the generator, as a displayable URL."""

    url: str
    prompt: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class GenerationLifecycle:
    """Keeps status, image and error consistent with each other.

    The image is only present while SUCCEEDED and the error only while FAILED.
    """

    def __init__(self) -> None:
        self._status = GenerationStatus.IDLE
        self._image: GeneratedImage | None = None
        self._error: str | None = None

    @property
    def status(self) -> GenerationStatus:
        return self._status

    @property
    def image(self) -> GeneratedImage | None:
        return self._image

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_loading(self) -> bool:
        return self._status is GenerationStatus.REQUESTING

    def begin(self) -> None:
        """Enter REQUESTING, dropping any previous image or error."""

        if self.is_loading:
            raise GenerationInProgressError("A preview is already being generated.")
        self._status = GenerationStatus.REQUESTING
        self._image = None
        self._error = None

    def succeed(self, image: GeneratedImage) -> None:
        self._require_requesting()
        self._status = GenerationStatus.SUCCEEDED
        self._image = image

    def fail(self, message: str) -> None:
        self._require_requesting()
        self._status = GenerationStatus.FAILED
        self._error = message

    def _require_requesting(self) -> None:
        if not self.is_loading:
            raise RuntimeError(f"Cannot resolve a request from state {self._status.value}.")
