"""Named audio cues and the fire-and-forget player interface.

Architecture note:
    The core only decides *when* a cue should sound. Producing the tone is the
    job of whatever client renders the session, so each cue carries a short
    tone description (waveform, frequency sweep, gain, length) that a client
    can feed to its own synthesizer. The default player just logs the cue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class AudioCue(Enum):
    SHORT_BEEP = "short-beep"
    LONG_BEEP = "long-beep"
    MILESTONE_BEEP = "milestone-beep"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    START = "start"


@dataclass(frozen=True, slots=True)
class ToneSpec:
    """Oscillator settings for a cue. ``end_hz`` equals ``start_hz`` for flat tones."""

    waveform: str
    start_hz: float
    end_hz: float
    gain: float
    duration_s: float


TONES: dict[AudioCue, ToneSpec] = {
    AudioCue.SHORT_BEEP: ToneSpec("sine", 880.0, 880.0, 0.5, 0.2),
    AudioCue.LONG_BEEP: ToneSpec("triangle", 440.0, 440.0, 0.7, 0.8),
    AudioCue.MILESTONE_BEEP: ToneSpec("sine", 660.0, 660.0, 0.4, 0.3),
    AudioCue.CORRECT: ToneSpec("sine", 523.25, 1046.5, 0.3, 0.3),
    AudioCue.INCORRECT: ToneSpec("square", 220.0, 110.0, 0.4, 0.4),
    AudioCue.START: ToneSpec("sawtooth", 261.63, 523.25, 0.3, 0.2),
}


class CuePlayer:
    """Receives cues emitted by a session. Subclasses override :meth:`play`."""

    def play(self, cue: AudioCue) -> None:
        raise NotImplementedError


class LoggingCuePlayer(CuePlayer):
    """Default player: records each cue in the application log."""

    def play(self, cue: AudioCue) -> None:
        tone = TONES[cue]
        logger.debug(
            "Cue %s (%s %.0f-%.0f Hz, %.1fs)",
            cue.value,
            tone.waveform,
            tone.start_hz,
            tone.end_hz,
            tone.duration_s,
        )
