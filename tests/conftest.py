import random

import pytest
from fastapi.testclient import TestClient

from engage_app.core.services.audio_cues import AudioCue, CuePlayer
from engage_app.core.services.session_store import SessionStore
from engage_app.core.session import Session
from engage_app.core.session_manager import SessionManager
from engage_app.server.api_server import create_api_app


class RecordingCuePlayer(CuePlayer):
    """Keeps every cue so tests can assert on what would have played."""

    def __init__(self) -> None:
        self.cues: list[AudioCue] = []

    def play(self, cue: AudioCue) -> None:
        self.cues.append(cue)


@pytest.fixture
def cue_player():
    return RecordingCuePlayer()


@pytest.fixture
def session(cue_player):
    return Session("ROOM01", cue_player=cue_player)


@pytest.fixture
def manager(cue_player):
    store = SessionStore(cue_player=cue_player, rng=random.Random(1234))
    return SessionManager(store=store)


@pytest.fixture
def client(manager):
    return TestClient(create_api_app(manager))


@pytest.fixture
def room_code(client):
    resp = client.post("/rooms")
    return resp.json()["room_code"]
