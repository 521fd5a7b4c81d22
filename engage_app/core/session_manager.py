"""Thread-safe facade over the session store shared by the API and the ticker."""

from __future__ import annotations

from copy import deepcopy
import logging
from threading import Lock
from typing import Any

from engage_app.core.commands import Command
from engage_app.core.models import SessionSnapshot, UserRole
from engage_app.core.services.audio_cues import CuePlayer
from engage_app.core.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionManager:
    """Serializes every session mutation behind one lock."""

    def __init__(self, store: SessionStore | None = None, cue_player: CuePlayer | None = None) -> None:
        self._lock = Lock()
        self._store = store or SessionStore(cue_player=cue_player)

    # --- Rooms ---

    def create_room(self) -> str:
        with self._lock:
            session = self._store.create_session()
        logger.info("Created room %s", session.room_code)
        return session.room_code

    def join_room(self, raw_code: str) -> str:
        """Resolve a typed room code to an existing room. Raises if unknown."""
        with self._lock:
            session = self._store.get_session(raw_code)
        logger.info("Participant joined room %s", session.room_code)
        return session.room_code

    def has_room(self, raw_code: str) -> bool:
        with self._lock:
            return self._store.has_session(raw_code)

    def get_room_count(self) -> int:
        with self._lock:
            return len(self._store.get_room_codes())

    # --- Commands and reads ---

    def apply(self, room_code: str, command: Command, role: UserRole) -> Any:
        with self._lock:
            session = self._store.get_session(room_code)
            result = session.apply(command, role)
            result = deepcopy(result)
        logger.debug("Room %s: %s applied %s", session.room_code, role.value, type(command).__name__)
        return result

    def snapshot(self, room_code: str) -> SessionSnapshot:
        with self._lock:
            return self._store.get_session(room_code).snapshot()

    def tick_all(self) -> None:
        with self._lock:
            for session in self._store.get_sessions():
                session.tick()
