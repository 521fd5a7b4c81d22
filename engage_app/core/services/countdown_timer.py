"""Tick-driven countdown used by the agenda and the quiz."""

from __future__ import annotations

from engage_app.core.errors import ValidationError


class CountdownTimer:
    """Counts whole seconds down to zero, one :meth:`tick` at a time."""

    def __init__(self, duration_seconds: int = 0) -> None:
        self._duration = self._validate(duration_seconds)
        self._seconds: int = self._duration
        self._active: bool = False

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def duration(self) -> int:
        return self._duration

    def is_active(self) -> bool:
        return self._active

    def is_finished(self) -> bool:
        return self._seconds == 0 and not self._active

    def start(self) -> None:
        if self._seconds > 0:
            self._active = True

    def pause(self) -> None:
        self._active = False

    def reset(self, new_seconds: int | None = None) -> None:
        """Load ``new_seconds`` (or the configured duration) and halt."""
        if new_seconds is not None:
            self._duration = self._validate(new_seconds)
        self._seconds = self._duration
        self._active = False

    def tick(self) -> bool:
        """Advance one second. Returns True on the tick that reaches zero."""
        if not self._active:
            return False
        self._seconds = max(0, self._seconds - 1)
        if self._seconds == 0:
            self._active = False
            return True
        return False

    @staticmethod
    def _validate(seconds: int) -> int:
        if seconds < 0:
            raise ValidationError("Timer duration cannot be negative.")
        return seconds


def format_clock(total_seconds: int) -> str:
    """Render seconds as ``MM:SS``."""
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"
