"""FastAPI app exposing host and participant commands for the presentation layer.

The API is request/response only: clients read a room snapshot and post
commands. Routes under ``/rooms/{room_code}/host`` run with the host role;
every other command route runs with the participant role.
"""

from __future__ import annotations

from dataclasses import asdict
import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from pydantic import BaseModel
import uvicorn

from engage_app.constants.about import APP_NAME, APP_VERSION
from engage_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from engage_app.constants.session_constants import DEFAULT_AGENDA_ITEM_MINUTES, RESULT_PREVIEW_SIZE
from engage_app.core import commands as cmd
from engage_app.core.errors import (
    AuthorizationError,
    InvalidStateTransition,
    NotFoundError,
    ValidationError,
)
from engage_app.core.localizer import get_translation_table
from engage_app.core.models import Language, PollType, PollView, SessionSnapshot, UserRole
from engage_app.core.services.countdown_timer import format_clock
from engage_app.core.services.qna_board import sort_questions
from engage_app.core.services.word_cloud import font_scale
from engage_app.core.session_manager import SessionManager
from engage_app.core.text_renderer import renderer

logger = logging.getLogger(__name__)

_PLAYER_COOKIE = "engage_player_id"


class JoinRoomPayload(BaseModel):
    room_code: str


class AgendaItemPayload(BaseModel):
    title: str
    duration_minutes: int = DEFAULT_AGENDA_ITEM_MINUTES


class PollPayload(BaseModel):
    question: str
    poll_type: PollType = PollType.MULTIPLE_CHOICE
    options: list[str] = []


class PollViewPayload(BaseModel):
    view: PollView


class VotePayload(BaseModel):
    """Multiple-choice polls take ``option_index``; open-text polls take ``text``."""

    option_index: int | None = None
    text: str | None = None


class QuestionPayload(BaseModel):
    text: str
    author: str | None = None
    language: Language = Language.EN


class WordPayload(BaseModel):
    text: str


class QuizJoinPayload(BaseModel):
    name: str


class QuizAnswerPayload(BaseModel):
    option_index: int
    player_id: str | None = None


def _get_session_manager_dependency(session_manager: SessionManager):
    def dependency() -> SessionManager:
        return session_manager

    return dependency


def _run_command(manager: SessionManager, room_code: str, command: cmd.Command, role: UserRole) -> Any:
    try:
        return manager.apply(room_code, command, role)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except AuthorizationError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except InvalidStateTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


def _read_snapshot(manager: SessionManager, room_code: str) -> SessionSnapshot:
    try:
        return manager.snapshot(room_code)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _snapshot_payload(
    snapshot: SessionSnapshot,
    sort_by_upvotes: bool,
    player_id: str | None = None,
) -> dict[str, object]:
    payload = asdict(snapshot)

    payload["time_left_display"] = format_clock(snapshot.timer_seconds)
    poll = payload["active_poll"]
    if poll is not None:
        poll["question_html"] = renderer.render_fragment(poll["question"])
        poll["total_votes"] = snapshot.poll_total_votes
        for option, percentage in zip(poll["options"], snapshot.poll_percentages):
            option["percentage"] = percentage

    payload["qna_questions"] = [
        {**asdict(question), "text_html": renderer.render_fragment(question.text)}
        for question in sort_questions(snapshot.qna_questions, sort_by_upvotes)
    ]

    max_count = snapshot.word_cloud[0].count if snapshot.word_cloud else 0
    for entry in payload["word_cloud"]:
        entry["font_size_rem"] = font_scale(entry["count"], max_count)

    payload["leaderboard_preview"] = payload["leaderboard"][:RESULT_PREVIEW_SIZE]

    # Only the requesting player's own answer is shared.
    answers = payload.pop("current_answers")
    payload["answer_count"] = len(answers)
    payload["my_answer"] = next((a for a in answers if a["player_id"] == player_id), None)
    return payload


def create_api_app(session_manager: SessionManager) -> FastAPI:
    """Create a FastAPI application wired to the provided session manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    manager_dep = _get_session_manager_dependency(session_manager)

    # --- Rooms ---

    @app.post("/rooms", status_code=201)
    def create_room(manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        room_code = manager.create_room()
        return {"room_code": room_code, "role": UserRole.HOST.value}

    @app.post("/rooms/join")
    def join_room(
        payload: JoinRoomPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            room_code = manager.join_room(payload.room_code)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"room_code": room_code, "role": UserRole.PARTICIPANT.value}

    @app.get("/rooms/{room_code}")
    def get_room(
        room_code: str,
        request: Request,
        sort_by_upvotes: bool = True,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        snapshot = _read_snapshot(manager, room_code)
        return _snapshot_payload(snapshot, sort_by_upvotes, request.cookies.get(_PLAYER_COOKIE))

    @app.get("/i18n/{language}")
    def get_translations(language: Language) -> dict[str, str]:
        return get_translation_table(language)

    # --- Host: agenda ---

    @app.post("/rooms/{room_code}/host/agenda", status_code=201)
    def add_agenda_item(
        room_code: str,
        payload: AgendaItemPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        item = _run_command(
            manager, room_code, cmd.AddAgendaItem(payload.title, payload.duration_minutes), UserRole.HOST
        )
        return asdict(item)

    @app.delete("/rooms/{room_code}/host/agenda/{item_id}")
    def remove_agenda_item(
        room_code: str,
        item_id: int,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        item = _run_command(manager, room_code, cmd.RemoveAgendaItem(item_id), UserRole.HOST)
        return asdict(item)

    @app.post("/rooms/{room_code}/host/timer/start")
    def start_timer(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.StartTimer(), UserRole.HOST)
        return _snapshot_payload(_read_snapshot(manager, room_code), True)

    @app.post("/rooms/{room_code}/host/timer/pause")
    def pause_timer(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.PauseTimer(), UserRole.HOST)
        return _snapshot_payload(_read_snapshot(manager, room_code), True)

    @app.post("/rooms/{room_code}/host/timer/reset")
    def reset_timer(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.ResetTimer(), UserRole.HOST)
        return _snapshot_payload(_read_snapshot(manager, room_code), True)

    # --- Host: polling ---

    @app.post("/rooms/{room_code}/host/poll", status_code=201)
    def start_poll(
        room_code: str,
        payload: PollPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        poll = _run_command(
            manager,
            room_code,
            cmd.StartPoll(payload.question, payload.poll_type, tuple(payload.options)),
            UserRole.HOST,
        )
        return asdict(poll)

    @app.post("/rooms/{room_code}/host/poll/view")
    def set_poll_view(
        room_code: str,
        payload: PollViewPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        if payload.view is PollView.RESULTS:
            command: cmd.Command = cmd.ShowPollResults()
        elif payload.view is PollView.VOTE:
            command = cmd.ShowPollVote()
        else:
            raise HTTPException(status_code=422, detail="Close the poll to return to the create view.")
        _run_command(manager, room_code, command, UserRole.HOST)
        return {"poll_view": payload.view}

    @app.delete("/rooms/{room_code}/host/poll")
    def close_poll(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.ClosePoll(), UserRole.HOST)
        return {"host_poll_view": PollView.CREATE}

    # --- Host: Q&A ---

    @app.post("/rooms/{room_code}/host/qna/{question_id}/answered")
    def toggle_answered(
        room_code: str,
        question_id: int,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        question = _run_command(manager, room_code, cmd.ToggleAnswered(question_id), UserRole.HOST)
        return asdict(question)

    # --- Host: quiz ---

    @app.post("/rooms/{room_code}/host/quiz/start")
    def start_quiz(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        question = _run_command(manager, room_code, cmd.StartQuiz(), UserRole.HOST)
        return {"question": asdict(question)}

    @app.post("/rooms/{room_code}/host/quiz/reveal")
    def reveal_quiz_result(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.RevealQuizResult(), UserRole.HOST)
        return asdict(_read_snapshot(manager, room_code).quiz_state)

    @app.post("/rooms/{room_code}/host/quiz/next")
    def next_quiz_question(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.NextQuizQuestion(), UserRole.HOST)
        return asdict(_read_snapshot(manager, room_code).quiz_state)

    @app.post("/rooms/{room_code}/host/quiz/play-again")
    def play_quiz_again(room_code: str, manager: SessionManager = Depends(manager_dep)) -> dict[str, object]:
        _run_command(manager, room_code, cmd.PlayQuizAgain(), UserRole.HOST)
        return asdict(_read_snapshot(manager, room_code).quiz_state)

    # --- Participant ---

    @app.post("/rooms/{room_code}/poll/vote")
    def submit_vote(
        room_code: str,
        payload: VotePayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        poll = _run_command(
            manager, room_code, cmd.SubmitVote(payload.option_index, payload.text), UserRole.PARTICIPANT
        )
        # Voting with no open poll is accepted and ignored.
        return {"recorded": poll is not None}

    @app.post("/rooms/{room_code}/qna", status_code=201)
    def submit_question(
        room_code: str,
        payload: QuestionPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        question = _run_command(
            manager,
            room_code,
            cmd.SubmitQuestion(payload.text, payload.author, payload.language),
            UserRole.PARTICIPANT,
        )
        return asdict(question)

    @app.post("/rooms/{room_code}/qna/{question_id}/upvote")
    def upvote_question(
        room_code: str,
        question_id: int,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        question = _run_command(manager, room_code, cmd.UpvoteQuestion(question_id), UserRole.PARTICIPANT)
        return asdict(question)

    @app.post("/rooms/{room_code}/words", status_code=201)
    def submit_word(
        room_code: str,
        payload: WordPayload,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        word = _run_command(manager, room_code, cmd.SubmitWord(payload.text), UserRole.PARTICIPANT)
        return {"word": word}

    @app.post("/rooms/{room_code}/quiz/join", status_code=201)
    def join_quiz(
        room_code: str,
        payload: QuizJoinPayload,
        response: Response,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        player = _run_command(manager, room_code, cmd.JoinQuiz(payload.name), UserRole.PARTICIPANT)
        response.set_cookie(key=_PLAYER_COOKIE, value=player.id, samesite="lax", httponly=True)
        return asdict(player)

    @app.post("/rooms/{room_code}/quiz/answer", status_code=201)
    def answer_quiz(
        room_code: str,
        payload: QuizAnswerPayload,
        request: Request,
        manager: SessionManager = Depends(manager_dep),
    ) -> dict[str, object]:
        player_id = payload.player_id or request.cookies.get(_PLAYER_COOKIE)
        if not player_id:
            raise HTTPException(status_code=422, detail="Join the quiz before answering.")
        answer = _run_command(
            manager, room_code, cmd.AnswerQuiz(player_id, payload.option_index), UserRole.PARTICIPANT
        )
        return {
            "question_index": answer.question_index,
            "is_correct": answer.is_correct,
            "points": answer.points,
            "submitted_at": answer.submitted_at.isoformat(),
        }

    return app


def run_api_server(
    session_manager: SessionManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the API with uvicorn; blocks until the server shuts down."""
    app = create_api_app(session_manager)
    # Log through the handlers set up by configure_logging.
    config = uvicorn.Config(app=app, host=host, port=port, log_config=None)
    server = uvicorn.Server(config)
    logger.info("Serving %s API on http://%s:%d/", APP_NAME, host, port)
    server.run()
