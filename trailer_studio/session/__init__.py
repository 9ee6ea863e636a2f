"""Configurator session state."""

from .lifecycle import GeneratedImage, GenerationInProgressError, GenerationLifecycle, GenerationStatus
from .state import LogoPreview, SelectionState
from .store import SessionLimitError, SessionNotFoundError, SessionStore

__all__ = [
    "GeneratedImage",
    "GenerationInProgressError",
    "GenerationLifecycle",
    "GenerationStatus",
    "LogoPreview",
    "SelectionState",
    "SessionLimitError",
    "SessionNotFoundError",
    "SessionStore",
]
