"""Service for the quiz game: roster, answers, scoring and the game flow."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from uuid import uuid4

from engage_app.constants.session_constants import (
    CORRECT_ANSWER_BASE_POINTS,
    POINTS_PER_SECOND_REMAINING,
    QUIZ_OPTION_COUNT,
)
from engage_app.core.errors import InvalidStateTransition, NotFoundError, ValidationError
from engage_app.core.models import GameState, Player, QuizQuestion, QuizState, SubmittedAnswer
from engage_app.core.services.audio_cues import AudioCue
from engage_app.core.services.countdown_timer import CountdownTimer


class QuizGame:
    """Runs the lobby -> question -> result -> leaderboard cycle over a fixed catalog."""

    def __init__(self, questions: Sequence[QuizQuestion], play_cue: Callable[[AudioCue], None]) -> None:
        if not questions:
            raise ValueError("Quiz must contain at least one question.")
        self._questions = tuple(questions)
        self._play_cue = play_cue
        self._state = QuizState()
        self._timer = CountdownTimer()
        # (player_id, question_index) -> answer; one entry per pair
        self._answers: dict[tuple[str, int], SubmittedAnswer] = {}

    def get_state(self) -> QuizState:
        return self._state

    def get_game_state(self) -> GameState:
        return self._state.game_state

    def get_players(self) -> list[Player]:
        return list(self._state.players)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_current_question(self) -> QuizQuestion:
        return self._questions[self._state.current_question_index]

    def get_seconds_remaining(self) -> int:
        return self._timer.seconds

    def get_answer(self, player_id: str, question_index: int | None = None) -> SubmittedAnswer | None:
        index = self._state.current_question_index if question_index is None else question_index
        return self._answers.get((player_id, index))

    def get_current_answers(self) -> list[SubmittedAnswer]:
        index = self._state.current_question_index
        return [answer for (_, question_index), answer in self._answers.items() if question_index == index]

    def get_answer_count(self) -> int:
        index = self._state.current_question_index
        return sum(1 for _, question_index in self._answers if question_index == index)

    def join(self, name: str) -> Player:
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("Player name must not be empty.")
        self._require_state(GameState.LOBBY, "Players can only join from the lobby.")
        player = Player(id=uuid4().hex, name=cleaned)
        self._state.players.append(player)
        return player

    def start(self) -> QuizQuestion:
        self._require_state(GameState.LOBBY, "The quiz can only be started from the lobby.")
        if not self._state.players:
            raise InvalidStateTransition("At least one player must join before the quiz starts.")
        self._play_cue(AudioCue.START)
        return self._open_question(0)

    def answer(self, player_id: str, option_index: int) -> SubmittedAnswer:
        self._require_state(GameState.QUESTION, "No question is open for answers.")
        player = self._find_player(player_id)
        if not 0 <= option_index < QUIZ_OPTION_COUNT:
            raise ValidationError("Choose one of the four answer options.")
        key = (player.id, self._state.current_question_index)
        if key in self._answers:
            raise InvalidStateTransition("This player has already answered the current question.")

        question = self.get_current_question()
        is_correct = option_index == question.correct_answer_index
        points = score_answer(is_correct, self._timer.seconds)
        player.score += points

        answer = SubmittedAnswer(
            player_id=player.id,
            question_index=self._state.current_question_index,
            option_index=option_index,
            is_correct=is_correct,
            points=points,
            submitted_at=datetime.now(timezone.utc),
        )
        self._answers[key] = answer
        self._state.last_answer_correct = is_correct
        self._play_cue(AudioCue.CORRECT if is_correct else AudioCue.INCORRECT)

        if self.get_answer_count() >= len(self._state.players):
            self._close_question()
        return answer

    def reveal(self) -> None:
        """Host ends the open question early."""
        self._require_state(GameState.QUESTION, "There is no open question to reveal.")
        self._close_question()

    def next(self) -> GameState:
        self._require_state(GameState.RESULT, "Results must be shown before moving on.")
        next_index = self._state.current_question_index + 1
        if next_index < len(self._questions):
            self._open_question(next_index)
        else:
            self._timer.reset(0)
            self._state.game_state = GameState.LEADERBOARD
        return self._state.game_state

    def play_again(self) -> None:
        self._require_state(GameState.LEADERBOARD, "The quiz has not finished yet.")
        for player in self._state.players:
            player.score = 0
        self._answers.clear()
        self._timer.reset(0)
        self._state.current_question_index = 0
        self._state.last_answer_correct = None
        self._state.game_state = GameState.LOBBY

    def tick(self) -> None:
        if self._state.game_state is not GameState.QUESTION:
            return
        if self._timer.tick():
            self._close_question()

    def leaderboard(self) -> list[Player]:
        return rank_players(self._state.players)

    def _open_question(self, index: int) -> QuizQuestion:
        question = self._questions[index]
        self._state.current_question_index = index
        self._state.last_answer_correct = None
        self._state.game_state = GameState.QUESTION
        self._timer.reset(question.time_limit)
        self._timer.start()
        return question

    def _close_question(self) -> None:
        self._timer.pause()
        self._state.game_state = GameState.RESULT

    def _find_player(self, player_id: str) -> Player:
        player = next((p for p in self._state.players if p.id == player_id), None)
        if player is None:
            raise NotFoundError(f"Player {player_id} has not joined this quiz.")
        return player

    def _require_state(self, expected: GameState, message: str) -> None:
        if self._state.game_state is not expected:
            raise InvalidStateTransition(message)


def score_answer(is_correct: bool, seconds_remaining: int) -> int:
    if not is_correct:
        return 0
    return CORRECT_ANSWER_BASE_POINTS + seconds_remaining * POINTS_PER_SECOND_REMAINING


def rank_players(players: list[Player]) -> list[Player]:
    """Highest score first; ties keep roster order."""
    return sorted(players, key=lambda p: -p.score)
