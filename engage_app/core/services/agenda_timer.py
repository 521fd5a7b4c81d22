"""Service for the session agenda and its countdown."""

from __future__ import annotations

from collections.abc import Callable

from engage_app.constants.session_constants import (
    COUNTDOWN_BEEP_WINDOW_SECONDS,
    MILESTONE_SECONDS,
)
from engage_app.core.errors import InvalidStateTransition, NotFoundError, ValidationError
from engage_app.core.identifiers import IdSequence
from engage_app.core.models import AgendaItem
from engage_app.core.services.audio_cues import AudioCue
from engage_app.core.services.countdown_timer import CountdownTimer


class AgendaTimer:
    """Runs an ordered list of timed items, advancing when each one runs out."""

    def __init__(self, ids: IdSequence, play_cue: Callable[[AudioCue], None]) -> None:
        self._ids = ids
        self._play_cue = play_cue
        self._items: list[AgendaItem] = []
        self._current_index: int = 0
        self._timer = CountdownTimer()
        self._complete: bool = False

    def get_items(self) -> list[AgendaItem]:
        return list(self._items)

    def get_current_index(self) -> int:
        return self._current_index

    def get_current_item(self) -> AgendaItem | None:
        if not self._items:
            return None
        return self._items[self._current_index]

    def is_timer_active(self) -> bool:
        return self._timer.is_active()

    def get_seconds(self) -> int:
        return self._timer.seconds

    def is_complete(self) -> bool:
        return self._complete

    def add_item(self, title: str, duration_minutes: int) -> AgendaItem:
        cleaned_title = title.strip()
        if not cleaned_title:
            raise ValidationError("Agenda item title must not be empty.")
        if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
            raise ValidationError("Duration must be a whole number of minutes.")
        if duration_minutes <= 0:
            raise ValidationError("Duration must be a positive number of minutes.")

        item = AgendaItem(id=self._ids.next_id(), title=cleaned_title, duration=duration_minutes * 60)
        self._items.append(item)
        if len(self._items) == 1:
            self._load_current_item()
        elif self._complete:
            self._current_index = len(self._items) - 1
            self._load_current_item()
        return item

    def remove_item(self, item_id: int) -> AgendaItem:
        index = next((i for i, item in enumerate(self._items) if item.id == item_id), -1)
        if index < 0:
            raise NotFoundError(f"Agenda item {item_id} does not exist.")

        removed = self._items.pop(index)
        if index < self._current_index:
            self._current_index -= 1
        elif index == self._current_index:
            self._current_index = min(self._current_index, max(0, len(self._items) - 1))
            self._load_current_item()
        return removed

    def start(self) -> None:
        if not self._items:
            raise InvalidStateTransition("Add an agenda item before starting the timer.")
        if self._complete:
            raise InvalidStateTransition("The agenda is complete; reset the timer to run it again.")
        self._timer.start()

    def pause(self) -> None:
        self._timer.pause()

    def reset_current(self) -> None:
        if not self._items:
            raise InvalidStateTransition("There is no agenda item to reset.")
        self._load_current_item()

    def tick(self) -> None:
        if not self._timer.is_active():
            return
        finished = self._timer.tick()
        if finished:
            self._play_cue(AudioCue.LONG_BEEP)
            self._advance()
            return

        seconds = self._timer.seconds
        if 0 < seconds <= COUNTDOWN_BEEP_WINDOW_SECONDS:
            self._play_cue(AudioCue.SHORT_BEEP)
        elif seconds in MILESTONE_SECONDS:
            self._play_cue(AudioCue.MILESTONE_BEEP)

    def _advance(self) -> None:
        if self._current_index < len(self._items) - 1:
            self._current_index += 1
            self._timer.reset(self._items[self._current_index].duration)
            self._timer.start()
        else:
            self._complete = True

    def _load_current_item(self) -> None:
        current = self.get_current_item()
        self._timer.reset(current.duration if current else 0)
        self._complete = False
