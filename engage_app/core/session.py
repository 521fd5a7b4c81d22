"""Session aggregate: one room's agenda, poll, Q&A, word cloud and quiz."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from copy import deepcopy
from typing import Any

from engage_app.constants.quiz_catalog import QUIZ_QUESTIONS
from engage_app.core import commands as cmd
from engage_app.core.errors import AuthorizationError
from engage_app.core.identifiers import IdSequence
from engage_app.core.localizer import translate
from engage_app.core.models import QuizQuestion, SessionSnapshot, UserRole
from engage_app.core.services.agenda_timer import AgendaTimer
from engage_app.core.services.audio_cues import CuePlayer, LoggingCuePlayer
from engage_app.core.services.polling_station import PollingStation
from engage_app.core.services.qna_board import QnABoard
from engage_app.core.services.quiz_game import QuizGame
from engage_app.core.services.word_cloud import WordCloud


class Session:
    """All state for one room, changed only through :meth:`apply` and :meth:`tick`."""

    def __init__(
        self,
        room_code: str,
        cue_player: CuePlayer | None = None,
        quiz_questions: Sequence[QuizQuestion] = QUIZ_QUESTIONS,
    ) -> None:
        self.room_code = room_code
        self._cue_player = cue_player or LoggingCuePlayer()
        ids = IdSequence()

        self.agenda = AgendaTimer(ids, self._cue_player.play)
        self.polling = PollingStation()
        self.qna = QnABoard(ids)
        self.word_cloud = WordCloud()
        self.quiz = QuizGame(quiz_questions, self._cue_player.play)

        self._handlers: dict[type[cmd.Command], Callable[[Any], Any]] = {
            cmd.AddAgendaItem: lambda c: self.agenda.add_item(c.title, c.duration_minutes),
            cmd.RemoveAgendaItem: lambda c: self.agenda.remove_item(c.item_id),
            cmd.StartTimer: lambda c: self.agenda.start(),
            cmd.PauseTimer: lambda c: self.agenda.pause(),
            cmd.ResetTimer: lambda c: self.agenda.reset_current(),
            cmd.StartPoll: lambda c: self.polling.start_poll(c.question, c.poll_type, list(c.options)),
            cmd.SubmitVote: lambda c: self.polling.submit_vote(c.option_index, c.text),
            cmd.ShowPollResults: lambda c: self.polling.show_results(),
            cmd.ShowPollVote: lambda c: self.polling.show_vote(),
            cmd.ClosePoll: lambda c: self.polling.close_poll(),
            cmd.SubmitQuestion: lambda c: self.qna.submit(
                c.text, c.author, translate("anonymous", c.language)
            ),
            cmd.UpvoteQuestion: lambda c: self.qna.upvote(c.question_id),
            cmd.ToggleAnswered: lambda c: self.qna.toggle_answered(c.question_id),
            cmd.SubmitWord: lambda c: self.word_cloud.submit_word(c.text),
            cmd.JoinQuiz: lambda c: self.quiz.join(c.name),
            cmd.StartQuiz: lambda c: self.quiz.start(),
            cmd.AnswerQuiz: lambda c: self.quiz.answer(c.player_id, c.option_index),
            cmd.RevealQuizResult: lambda c: self.quiz.reveal(),
            cmd.NextQuizQuestion: lambda c: self.quiz.next(),
            cmd.PlayQuizAgain: lambda c: self.quiz.play_again(),
        }

    def apply(self, command: cmd.Command, role: UserRole) -> Any:
        """Authorize and run ``command``; returns whatever the handling service returns."""
        if command.host_only and role is not UserRole.HOST:
            raise AuthorizationError(f"{type(command).__name__} is reserved for the host.")
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")
        return handler(command)

    def tick(self) -> None:
        """One-second step for every running timer in the room."""
        self.agenda.tick()
        self.quiz.tick()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            room_code=self.room_code,
            agenda=deepcopy(self.agenda.get_items()),
            current_item_index=self.agenda.get_current_index(),
            is_timer_active=self.agenda.is_timer_active(),
            active_poll=deepcopy(self.polling.get_active_poll()),
            poll_view=self.polling.get_poll_view(),
            qna_questions=deepcopy(self.qna.get_questions()),
            word_cloud_words=self.word_cloud.get_words(),
            quiz_state=deepcopy(self.quiz.get_state()),
            timer_seconds=self.agenda.get_seconds(),
            agenda_complete=self.agenda.is_complete(),
            quiz_seconds_remaining=self.quiz.get_seconds_remaining(),
            word_cloud=self.word_cloud.entries(),
            leaderboard=deepcopy(self.quiz.leaderboard()),
            host_poll_view=self.polling.get_host_view(),
            poll_total_votes=self.polling.get_total_votes(),
            poll_percentages=self.polling.get_vote_percentages(),
            current_answers=deepcopy(self.quiz.get_current_answers()),
        )
