"""Service for looking up sessions by room code."""

from __future__ import annotations

import random

from engage_app.core.errors import NotFoundError, ValidationError
from engage_app.core.identifiers import generate_room_code, is_valid_room_code, normalize_room_code
from engage_app.core.services.audio_cues import CuePlayer
from engage_app.core.session import Session


class SessionStore:
    """In-memory room code -> session map. Sessions live as long as the process."""

    def __init__(self, cue_player: CuePlayer | None = None, rng: random.Random | None = None) -> None:
        self._sessions: dict[str, Session] = {}
        self._cue_player = cue_player
        self._rng = rng or random.Random()

    def create_session(self) -> Session:
        code = generate_room_code(self._rng, self._sessions)
        session = Session(code, cue_player=self._cue_player)
        self._sessions[code] = session
        return session

    def get_session(self, raw_code: str) -> Session:
        code = normalize_room_code(raw_code)
        if not is_valid_room_code(code):
            raise ValidationError("Room codes are six letters or digits.")
        session = self._sessions.get(code)
        if session is None:
            raise NotFoundError(f"Room {code} does not exist.")
        return session

    def has_session(self, raw_code: str) -> bool:
        return normalize_room_code(raw_code) in self._sessions

    def get_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def get_room_codes(self) -> list[str]:
        return list(self._sessions)
