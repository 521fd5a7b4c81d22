"""Identifier helpers: creation-time entity ids and room codes."""

from __future__ import annotations

import random
import time
from collections.abc import Container
from threading import Lock

from engage_app.constants.session_constants import ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH


class IdSequence:
    """Millisecond timestamps, bumped by one whenever two ids share a millisecond."""

    def __init__(self) -> None:
        self._last: int = 0
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            self._last = max(candidate, self._last + 1)
            return self._last


def generate_room_code(rng: random.Random, taken: Container[str] = ()) -> str:
    """Draw a fresh room code that is not already in ``taken``."""
    while True:
        code = "".join(rng.choices(ROOM_CODE_ALPHABET, k=ROOM_CODE_LENGTH))
        if code not in taken:
            return code


def normalize_room_code(raw_code: str) -> str:
    return raw_code.strip().upper()


def is_valid_room_code(code: str) -> bool:
    return len(code) == ROOM_CODE_LENGTH and all(char in ROOM_CODE_ALPHABET for char in code)
