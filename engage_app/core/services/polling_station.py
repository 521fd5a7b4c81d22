"""Service for the single active poll of a session."""

from __future__ import annotations

from engage_app.core.errors import InvalidStateTransition, ValidationError
from engage_app.core.models import Poll, PollOption, PollType, PollView


class PollingStation:
    """Holds at most one poll and the view the host has published for it."""

    def __init__(self) -> None:
        self._active_poll: Poll | None = None
        self._poll_view: PollView = PollView.VOTE

    def get_active_poll(self) -> Poll | None:
        return self._active_poll

    def get_poll_view(self) -> PollView:
        """Shared view that participants mirror."""
        return self._poll_view

    def get_host_view(self) -> PollView:
        if self._active_poll is None:
            return PollView.CREATE
        return self._poll_view

    def start_poll(self, question: str, poll_type: PollType, options: list[str] | None = None) -> Poll:
        cleaned_question = question.strip()
        if not cleaned_question:
            raise ValidationError("Poll question must not be empty.")

        poll_options: list[PollOption] = []
        if poll_type is PollType.MULTIPLE_CHOICE:
            poll_options = [PollOption(text=text.strip()) for text in options or [] if text.strip()]
            if not poll_options:
                raise ValidationError("A multiple-choice poll needs at least one option.")

        self._active_poll = Poll(question=cleaned_question, type=poll_type, options=poll_options)
        self._poll_view = PollView.VOTE
        return self._active_poll

    def submit_vote(self, option_index: int | None = None, text: str | None = None) -> Poll | None:
        """Count one vote. Returns None when no poll is open."""
        poll = self._active_poll
        if poll is None:
            return None

        if poll.type is PollType.MULTIPLE_CHOICE:
            if option_index is None or not 0 <= option_index < len(poll.options):
                raise ValidationError("Choose one of the poll options.")
            poll.options[option_index].votes += 1
        else:
            answer = (text or "").strip()
            if not answer:
                raise ValidationError("Answer text must not be empty.")
            poll.open_text_answers.append(answer)
        return poll

    def show_results(self) -> None:
        self._require_poll()
        self._poll_view = PollView.RESULTS

    def show_vote(self) -> None:
        self._require_poll()
        self._poll_view = PollView.VOTE

    def close_poll(self) -> None:
        self._active_poll = None
        self._poll_view = PollView.VOTE

    def get_total_votes(self) -> int:
        if self._active_poll is None:
            return 0
        return sum(option.votes for option in self._active_poll.options)

    def get_vote_percentages(self) -> list[float]:
        if self._active_poll is None:
            return []
        divisor = self.get_total_votes() or 1
        return [(option.votes / divisor) * 100 for option in self._active_poll.options]

    def _require_poll(self) -> Poll:
        if self._active_poll is None:
            raise InvalidStateTransition("No poll is currently active.")
        return self._active_poll
