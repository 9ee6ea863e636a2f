"""In-memory registry of configurator sessions."""

from __future__ import annotations

import asyncio
import logging

from trailer_studio.metrics.prometheus_exporter import active_sessions
from trailer_studio.session.state import SelectionState

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a session id is unknown or expired."""


class SessionLimitError(RuntimeError):
    """Raised when the store already holds the configured number of sessions."""


class SessionStore:
    """Holds one ``SelectionState`` per browser session, for the process lifetime."""

    def __init__(self, max_sessions: int = 1000) -> None:
        self._max_sessions = max_sessions
        self._sessions: dict[str, SelectionState] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._registry_lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self) -> SelectionState:
        async with self._registry_lock:
            if len(self._sessions) >= self._max_sessions:
                raise SessionLimitError("Too many active sessions, try again later.")
            state = SelectionState()
            self._sessions[state.session_id] = state
            self._locks[state.session_id] = asyncio.Lock()
            active_sessions.set(len(self._sessions))
        logger.info("Created session %s", state.session_id)
        return state

    def get(self, session_id: str) -> SelectionState:
        try:
            return self._sessions[session_id]
        except KeyError as exc:
            raise SessionNotFoundError(f"Unknown session: {session_id}") from exc

    def lock_for(self, session_id: str) -> asyncio.Lock:
        """Lock that serialises mutations of one session."""

        self.get(session_id)
        return self._locks[session_id]

    async def delete(self, session_id: str) -> None:
        async with self._registry_lock:
            state = self._sessions.pop(session_id, None)
            self._locks.pop(session_id, None)
            active_sessions.set(len(self._sessions))
        if state is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        state.release()
        logger.info("Deleted session %s", session_id)
