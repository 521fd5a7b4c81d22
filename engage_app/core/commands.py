"""Commands accepted by :meth:`engage_app.core.session.Session.apply`.

Every change to a session is expressed as one of these immutable records.
``host_only`` marks the commands a participant may not issue.
"""

from __future__ import annotations

from dataclasses import dataclass

from engage_app.core.models import Language, PollType


class Command:
    host_only: bool = False


# --- Agenda ---

@dataclass(frozen=True)
class AddAgendaItem(Command):
    title: str
    duration_minutes: int
    host_only = True


@dataclass(frozen=True)
class RemoveAgendaItem(Command):
    item_id: int
    host_only = True


@dataclass(frozen=True)
class StartTimer(Command):
    host_only = True


@dataclass(frozen=True)
class PauseTimer(Command):
    host_only = True


@dataclass(frozen=True)
class ResetTimer(Command):
    host_only = True


# --- Polling ---

@dataclass(frozen=True)
class StartPoll(Command):
    question: str
    poll_type: PollType
    options: tuple[str, ...] = ()
    host_only = True


@dataclass(frozen=True)
class SubmitVote(Command):
    option_index: int | None = None
    text: str | None = None


@dataclass(frozen=True)
class ShowPollResults(Command):
    host_only = True


@dataclass(frozen=True)
class ShowPollVote(Command):
    host_only = True


@dataclass(frozen=True)
class ClosePoll(Command):
    host_only = True


# --- Q&A ---

@dataclass(frozen=True)
class SubmitQuestion(Command):
    text: str
    author: str | None = None
    language: Language = Language.EN


@dataclass(frozen=True)
class UpvoteQuestion(Command):
    question_id: int


@dataclass(frozen=True)
class ToggleAnswered(Command):
    question_id: int
    host_only = True


# --- Word cloud ---

@dataclass(frozen=True)
class SubmitWord(Command):
    text: str


# --- Quiz ---

@dataclass(frozen=True)
class JoinQuiz(Command):
    name: str


@dataclass(frozen=True)
class StartQuiz(Command):
    host_only = True


@dataclass(frozen=True)
class AnswerQuiz(Command):
    player_id: str
    option_index: int


@dataclass(frozen=True)
class RevealQuizResult(Command):
    host_only = True


@dataclass(frozen=True)
class NextQuizQuestion(Command):
    host_only = True


@dataclass(frozen=True)
class PlayQuizAgain(Command):
    host_only = True
