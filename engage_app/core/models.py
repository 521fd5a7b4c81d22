"""Domain models for interactive sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class UserRole(Enum):
    """Role a client acts in when issuing commands."""

    HOST = "host"
    PARTICIPANT = "participant"


class Language(Enum):
    EN = "en"
    ZH = "zh"


class PollType(Enum):
    MULTIPLE_CHOICE = "Multiple Choice"
    OPEN_TEXT = "Open Text"


class PollView(Enum):
    """Poll screens. Only ``VOTE`` and ``RESULTS`` are ever shared with participants."""

    CREATE = "create"
    VOTE = "vote"
    RESULTS = "results"


class GameState(Enum):
    LOBBY = "lobby"
    QUESTION = "question"
    RESULT = "result"
    LEADERBOARD = "leaderboard"


@dataclass(slots=True)
class AgendaItem:
    """Timed agenda entry. Duration is stored in seconds."""

    id: int
    title: str
    duration: int


@dataclass(slots=True)
class PollOption:
    text: str
    votes: int = 0


@dataclass(slots=True)
class Poll:
    """The single active poll of a session."""

    question: str
    type: PollType
    options: list[PollOption] = field(default_factory=list)
    open_text_answers: list[str] = field(default_factory=list)


@dataclass(slots=True)
class QnAQuestion:
    """Question submitted to the Q&A board."""

    id: int
    text: str
    author: str
    upvotes: int = 0
    answered: bool = False


@dataclass(slots=True)
class WordCloudEntry:
    """Derived frequency entry; never stored."""

    text: str
    count: int


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Multiple-choice quiz question with exactly four options."""

    id: int
    question: str
    options: tuple[str, ...]
    correct_answer_index: int
    time_limit: int


@dataclass(slots=True)
class Player:
    id: str
    name: str
    score: int = 0


@dataclass(slots=True)
class SubmittedAnswer:
    """Answer given by one player to one quiz question."""

    player_id: str
    question_index: int
    option_index: int
    is_correct: bool
    points: int
    submitted_at: datetime


@dataclass(slots=True)
class QuizState:
    """Room-wide quiz progress.

    ``last_answer_correct`` reflects whichever player answered most recently;
    per-player results live in the submitted answers.
    """

    game_state: GameState = GameState.LOBBY
    players: list[Player] = field(default_factory=list)
    current_question_index: int = 0
    last_answer_correct: bool | None = None


@dataclass(slots=True)
class SessionSnapshot:
    """Read-only copy of a session handed to the presentation layer.

    The first block mirrors the stored session record; the second block holds
    values derived on read (timer state, poll tallies, word cloud, leaderboard,
    answers to the current quiz question).
    """

    room_code: str
    agenda: list[AgendaItem]
    current_item_index: int
    is_timer_active: bool
    active_poll: Poll | None
    poll_view: PollView
    qna_questions: list[QnAQuestion]
    word_cloud_words: list[str]
    quiz_state: QuizState

    timer_seconds: int = 0
    agenda_complete: bool = False
    quiz_seconds_remaining: int = 0
    word_cloud: list[WordCloudEntry] = field(default_factory=list)
    leaderboard: list[Player] = field(default_factory=list)
    host_poll_view: PollView = PollView.CREATE
    poll_total_votes: int = 0
    poll_percentages: list[float] = field(default_factory=list)
    current_answers: list[SubmittedAnswer] = field(default_factory=list)
