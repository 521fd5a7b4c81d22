from http import HTTPStatus


def test_create_and_join_room(client):
    resp = client.post("/rooms")
    assert resp.status_code == HTTPStatus.CREATED
    code = resp.json()["room_code"]
    assert len(code) == 6

    resp = client.post("/rooms/join", json={"room_code": code.lower()})
    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == {"room_code": code, "role": "participant"}


def test_join_errors(client):
    resp = client.post("/rooms/join", json={"room_code": "nope"})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    resp = client.post("/rooms/join", json={"room_code": "ZZZZZZ"})
    assert resp.status_code == HTTPStatus.NOT_FOUND


def test_snapshot_of_new_room(client, room_code):
    resp = client.get(f"/rooms/{room_code}")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["room_code"] == room_code
    assert data["agenda"] == []
    assert data["is_timer_active"] is False
    assert data["active_poll"] is None
    assert data["poll_view"] == "vote"
    assert data["host_poll_view"] == "create"
    assert data["quiz_state"]["game_state"] == "lobby"
    assert data["time_left_display"] == "00:00"


def test_agenda_and_timer_routes(client, room_code, manager):
    resp = client.post(f"/rooms/{room_code}/host/agenda", json={"title": "Intro", "duration_minutes": 5})
    assert resp.status_code == HTTPStatus.CREATED
    item = resp.json()
    assert item["duration"] == 300

    resp = client.post(f"/rooms/{room_code}/host/timer/start")
    assert resp.json()["is_timer_active"] is True
    manager.tick_all()
    resp = client.post(f"/rooms/{room_code}/host/timer/pause")
    data = resp.json()
    assert data["is_timer_active"] is False
    assert data["time_left_display"] == "04:59"

    resp = client.post(f"/rooms/{room_code}/host/timer/reset")
    assert resp.json()["timer_seconds"] == 300

    resp = client.delete(f"/rooms/{room_code}/host/agenda/{item['id']}")
    assert resp.status_code == HTTPStatus.OK
    resp = client.delete(f"/rooms/{room_code}/host/agenda/{item['id']}")
    assert resp.status_code == HTTPStatus.NOT_FOUND


def test_invalid_agenda_item_and_early_start(client, room_code):
    resp = client.post(f"/rooms/{room_code}/host/agenda", json={"title": "  ", "duration_minutes": 5})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    resp = client.post(f"/rooms/{room_code}/host/timer/start")
    assert resp.status_code == HTTPStatus.CONFLICT


def test_poll_flow(client, room_code):
    resp = client.post(
        f"/rooms/{room_code}/host/poll",
        json={"question": "Best *snack*?", "poll_type": "Multiple Choice", "options": ["Chips", "", "Fruit"]},
    )
    assert resp.status_code == HTTPStatus.CREATED
    assert [o["text"] for o in resp.json()["options"]] == ["Chips", "Fruit"]

    for index in (0, 1, 1, 1):
        resp = client.post(f"/rooms/{room_code}/poll/vote", json={"option_index": index})
        assert resp.json() == {"recorded": True}

    resp = client.post(f"/rooms/{room_code}/host/poll/view", json={"view": "results"})
    assert resp.status_code == HTTPStatus.OK

    data = client.get(f"/rooms/{room_code}").json()
    poll = data["active_poll"]
    assert data["poll_view"] == "results"
    assert poll["total_votes"] == 4
    assert [o["percentage"] for o in poll["options"]] == [25.0, 75.0]
    assert "<em>snack</em>" in poll["question_html"]

    resp = client.post(f"/rooms/{room_code}/host/poll/view", json={"view": "create"})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    client.delete(f"/rooms/{room_code}/host/poll")
    data = client.get(f"/rooms/{room_code}").json()
    assert data["active_poll"] is None
    assert data["host_poll_view"] == "create"

    resp = client.post(f"/rooms/{room_code}/poll/vote", json={"option_index": 0})
    assert resp.json() == {"recorded": False}


def test_qna_routes(client, room_code):
    resp = client.post(f"/rooms/{room_code}/qna", json={"text": "<b>Hi</b> there?"})
    assert resp.status_code == HTTPStatus.CREATED
    first = resp.json()
    assert first["author"] == "Anonymous"

    second = client.post(f"/rooms/{room_code}/qna", json={"text": "Second?", "author": "Ada"}).json()
    client.post(f"/rooms/{room_code}/qna/{second['id']}/upvote")

    texts = [q["text"] for q in client.get(f"/rooms/{room_code}").json()["qna_questions"]]
    assert texts == ["Second?", "<b>Hi</b> there?"]
    texts = [
        q["text"] for q in client.get(f"/rooms/{room_code}", params={"sort_by_upvotes": False}).json()["qna_questions"]
    ]
    assert texts == ["<b>Hi</b> there?", "Second?"]

    resp = client.post(f"/rooms/{room_code}/host/qna/{second['id']}/answered")
    assert resp.json()["answered"] is True
    questions = client.get(f"/rooms/{room_code}").json()["qna_questions"]
    assert [q["text"] for q in questions] == ["<b>Hi</b> there?", "Second?"]
    assert "<b>" not in questions[0]["text_html"]
    assert "&lt;b&gt;" in questions[0]["text_html"]

    resp = client.post(f"/rooms/{room_code}/qna", json={"text": "   "})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    resp = client.post(f"/rooms/{room_code}/qna/12345/upvote")
    assert resp.status_code == HTTPStatus.NOT_FOUND


def test_word_cloud_route(client, room_code):
    for word in ("a", "A", "b"):
        assert client.post(f"/rooms/{room_code}/words", json={"text": word}).status_code == HTTPStatus.CREATED
    cloud = client.get(f"/rooms/{room_code}").json()["word_cloud"]
    assert cloud == [
        {"text": "a", "count": 2, "font_size_rem": 5.0},
        {"text": "b", "count": 1, "font_size_rem": 3.0},
    ]


def test_quiz_flow_with_cookie(client, room_code):
    resp = client.post(f"/rooms/{room_code}/host/quiz/start")
    assert resp.status_code == HTTPStatus.CONFLICT

    resp = client.post(f"/rooms/{room_code}/quiz/join", json={"name": "Ada"})
    assert resp.status_code == HTTPStatus.CREATED
    player_id = resp.json()["id"]

    resp = client.post(f"/rooms/{room_code}/host/quiz/start")
    assert resp.json()["question"]["correct_answer_index"] == 2

    resp = client.post(f"/rooms/{room_code}/quiz/answer", json={"option_index": 2})
    assert resp.status_code == HTTPStatus.CREATED
    assert resp.json()["points"] == 1150

    resp = client.post(f"/rooms/{room_code}/quiz/answer", json={"option_index": 2, "player_id": player_id})
    assert resp.status_code == HTTPStatus.CONFLICT

    state = client.post(f"/rooms/{room_code}/host/quiz/next").json()
    assert state["game_state"] == "question"
    assert state["current_question_index"] == 1

    state = client.post(f"/rooms/{room_code}/host/quiz/reveal").json()
    assert state["game_state"] == "result"
    for _ in range(2):
        state = client.post(f"/rooms/{room_code}/host/quiz/next").json()
        client.post(f"/rooms/{room_code}/host/quiz/reveal")
    state = client.post(f"/rooms/{room_code}/host/quiz/next").json()
    assert state["game_state"] == "leaderboard"

    leaderboard = client.get(f"/rooms/{room_code}").json()["leaderboard"]
    assert [(p["name"], p["score"]) for p in leaderboard] == [("Ada", 1150)]
    assert client.get(f"/rooms/{room_code}").json()["leaderboard_preview"] == leaderboard

    state = client.post(f"/rooms/{room_code}/host/quiz/play-again").json()
    assert state["game_state"] == "lobby"
    assert state["players"][0]["score"] == 0


def test_answer_without_player_identity(room_code, manager):
    from fastapi.testclient import TestClient

    from engage_app.server.api_server import create_api_app

    fresh_client = TestClient(create_api_app(manager))
    resp = fresh_client.post(f"/rooms/{room_code}/quiz/answer", json={"option_index": 0})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_unknown_room_returns_404(client):
    assert client.get("/rooms/QQQQQQ").status_code == HTTPStatus.NOT_FOUND
    resp = client.post("/rooms/QQQQQQ/words", json={"text": "hi"})
    assert resp.status_code == HTTPStatus.NOT_FOUND


def test_translations_route(client):
    assert client.get("/i18n/en").json()["anonymous"] == "Anonymous"
    assert client.get("/i18n/zh").json()["anonymous"] == "匿名"
    assert client.get("/i18n/fr").status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_snapshot_shows_each_player_only_their_answer(client, room_code, manager):
    from fastapi.testclient import TestClient

    from engage_app.server.api_server import create_api_app

    other_client = TestClient(create_api_app(manager))
    ada = client.post(f"/rooms/{room_code}/quiz/join", json={"name": "Ada"}).json()
    other_client.post(f"/rooms/{room_code}/quiz/join", json={"name": "Bob"})
    client.post(f"/rooms/{room_code}/host/quiz/start")

    client.post(f"/rooms/{room_code}/quiz/answer", json={"option_index": 2})
    bob_view = other_client.get(f"/rooms/{room_code}").json()
    assert bob_view["my_answer"] is None
    assert bob_view["answer_count"] == 1
    assert "current_answers" not in bob_view

    other_client.post(f"/rooms/{room_code}/quiz/answer", json={"option_index": 0})
    ada_view = client.get(f"/rooms/{room_code}").json()
    bob_view = other_client.get(f"/rooms/{room_code}").json()
    assert ada_view["my_answer"]["player_id"] == ada["id"]
    assert ada_view["my_answer"]["is_correct"] is True
    assert bob_view["my_answer"]["is_correct"] is False
    assert ada_view["quiz_state"]["last_answer_correct"] is False
