"""
HTTP surface tests: request/response shapes, status codes and auth.
"""

import base64
from datetime import date

import pytest
from fastapi.testclient import TestClient

from levellore.core.config import Settings
from levellore.main import create_app
from levellore.services.quiz_service import QuizService

from .conftest import auth_headers


# ---- registration and login ----

def test_register_and_login(client):
    response = client.post("/api/register", json={"username": "sandy", "password": "karate-chop"})
    assert response.status_code == 200
    assert response.json() == {"message": "Account created successfully."}

    response = client.post("/api/login", json={"username": "sandy", "password": "karate-chop"})
    assert response.status_code == 200
    assert set(response.json()) == {"token"}


def test_register_duplicate_is_conflict(client):
    client.post("/api/register", json={"username": "sandy", "password": "karate-chop"})

    response = client.post("/api/register", json={"username": "sandy", "password": "other"})

    assert response.status_code == 409
    assert response.json()["message"] == "Username already exists."


@pytest.mark.parametrize("body", [
    {},
    {"username": "sandy"},
    {"password": "karate-chop"},
    {"username": "", "password": "karate-chop"},
    {"username": 123, "password": "karate-chop"},
])
def test_register_invalid_input(client, body):
    response = client.post("/api/register", json=body)

    assert response.status_code == 400
    assert "message" in response.json()


def test_register_without_body(client):
    response = client.post("/api/register")

    assert response.status_code == 400


def test_login_failures_do_not_reveal_usernames(client):
    client.post("/api/register", json={"username": "sandy", "password": "karate-chop"})

    wrong_password = client.post("/api/login", json={"username": "sandy", "password": "nope"})
    unknown_user = client.post("/api/login", json={"username": "larry", "password": "nope"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json()["message"] == unknown_user.json()["message"]


# ---- authentication ----

@pytest.mark.parametrize("path,method", [
    ("/api/user", "get"),
    ("/api/xp/daily-login", "post"),
    ("/api/xp/quiz", "post"),
    ("/api/quiz", "get"),
    ("/api/chat", "get"),
    ("/api/chat", "post"),
    ("/api/avatar", "post"),
    ("/api/leaderboard", "get"),
])
@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer bogus"}, {"Authorization": "bogus"}])
def test_protected_endpoints_require_token(client, path, method, headers):
    response = getattr(client, method)(path, headers=headers)

    assert response.status_code == 401
    assert response.json()["message"]
    assert response.headers["www-authenticate"] == "Bearer"


def test_logout_invalidates_token(client, login):
    headers = login()

    assert client.post("/api/logout", headers=headers).status_code == 200
    assert client.get("/api/user", headers=headers).status_code == 401


# ---- profile and XP ----

def test_fresh_profile(client, login):
    headers = login("sandy", "karate-chop")

    body = client.get("/api/user", headers=headers).json()

    assert body["username"] == "sandy"
    assert body["xp"] == 0
    assert body["level"] == 1
    assert body["lastLoginDate"] is None
    assert body["lastQuizDate"] is None
    assert body["profilePic"].startswith("data:image/png;base64,")
    assert body["xpIntoLevel"] == 0
    assert body["xpToNextLevel"] == 100
    assert body["progressPercent"] == 0
    assert "password" not in body


def test_daily_login_awarded_once(client, login):
    headers = login()

    first = client.post("/api/xp/daily-login", headers=headers).json()
    second = client.post("/api/xp/daily-login", headers=headers).json()

    assert first == {"xp": 10, "level": 1, "awarded": True}
    assert second == {"xp": 10, "level": 1, "awarded": False}
    profile = client.get("/api/user", headers=headers).json()
    assert profile["lastLoginDate"] == date.today().isoformat()


def test_quiz_award_without_answer(client, login):
    headers = login()

    first = client.post("/api/xp/quiz", headers=headers).json()
    second = client.post("/api/xp/quiz", headers=headers).json()

    assert first == {"xp": 50, "level": 1, "awarded": True, "correct": None}
    assert second == {"xp": 50, "level": 1, "awarded": False, "correct": None}


def test_quiz_wrong_answer_still_awards(client, login):
    headers = login()
    question = QuizService().question_for(date.today())
    wrong = (question.answer + 1) % len(question.options)

    body = client.post("/api/xp/quiz", headers=headers, json={"choice": wrong}).json()

    assert body["awarded"] is True
    assert body["correct"] is False


def test_quiz_right_answer(client, login):
    headers = login()
    question = QuizService().question_for(date.today())

    body = client.post("/api/xp/quiz", headers=headers, json={"choice": question.answer}).json()

    assert body["correct"] is True


def test_quiz_invalid_choice_does_not_award(client, login):
    headers = login()

    response = client.post("/api/xp/quiz", headers=headers, json={"choice": 99})

    assert response.status_code == 400
    assert client.get("/api/user", headers=headers).json()["xp"] == 0


def test_quiz_question_hides_answer(client, login):
    headers = login()

    body = client.get("/api/quiz", headers=headers).json()

    assert body["date"] == date.today().isoformat()
    assert body["question"]
    assert len(body["options"]) == 4
    assert "answer" not in body


def test_login_and_quiz_reach_level_two(client, login):
    headers = login()
    client.post("/api/xp/daily-login", headers=headers)
    client.post("/api/xp/quiz", headers=headers)

    profile = client.get("/api/user", headers=headers).json()

    assert profile["xp"] == 60
    assert profile["level"] == 1
    assert profile["xpToNextLevel"] == 100
    assert profile["progressPercent"] == 60.0


# ---- chat ----

def test_chat_post_and_list(client, login):
    headers = login("gary", "meow-meow")
    client.post("/api/chat", headers=headers, json={"text": "first"})

    response = client.post("/api/chat", headers=headers, json={"text": "  meow  "})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Sent"
    assert body["data"]["username"] == "gary"
    assert body["data"]["text"] == "meow"
    assert isinstance(body["data"]["timestamp"], int)

    messages = client.get("/api/chat", headers=headers).json()
    assert [m["text"] for m in messages] == ["first", "meow"]
    assert messages[-1]["id"] == body["data"]["id"]


@pytest.mark.parametrize("body", [{"text": ""}, {"text": "   "}, {}])
def test_chat_rejects_empty(client, login, body):
    headers = login()

    response = client.post("/api/chat", headers=headers, json=body)

    assert response.status_code == 400
    assert client.get("/api/chat", headers=headers).json() == []


# ---- avatar ----

def test_avatar_upload(client, login):
    headers = login()
    image = "data:image/png;base64," + base64.b64encode(b"\x89PNG fake").decode()

    response = client.post("/api/avatar", headers=headers, json={"image": image})

    assert response.status_code == 200
    assert response.json() == {"profilePic": image}
    assert client.get("/api/user", headers=headers).json()["profilePic"] == image


@pytest.mark.parametrize("body", [{}, {"image": ""}, {"image": "not an image"}])
def test_avatar_rejects_bad_payload(client, login, body):
    headers = login()

    response = client.post("/api/avatar", headers=headers, json=body)

    assert response.status_code == 400


# ---- leaderboard ----

def test_leaderboard_order(client, login):
    patrick = login("patrick", "rock-life")
    login("bob", "krabby-patty")
    client.post("/api/xp/quiz", headers=patrick)

    body = client.get("/api/leaderboard", headers=patrick).json()

    assert [entry["username"] for entry in body] == ["patrick", "bob"]
    assert body[0] == {
        "username": "patrick",
        "level": 1,
        "xp": 50,
        "profilePic": body[0]["profilePic"],
    }


# ---- errors, health, persistence ----

def test_store_failure_is_a_server_error(client, login, monkeypatch):
    headers = login()

    def failing_write(snapshot):
        raise OSError("disk full")

    monkeypatch.setattr(client.app.state.services.store, "_write", failing_write)

    response = client.post("/api/chat", headers=headers, json={"text": "hello"})

    assert response.status_code == 500
    assert response.json()["message"]


def test_unknown_api_route_is_json_404(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json()["message"] == "Not Found"


def test_health(client):
    body = client.get("/api/health").json()

    assert body["status"] == "healthy"
    assert body["store"] == "connected"


def test_state_survives_restart(settings):
    with TestClient(create_app(settings)) as first:
        first.post("/api/register", json={"username": "sandy", "password": "karate-chop"})
        token = first.post("/api/login", json={"username": "sandy", "password": "karate-chop"}).json()["token"]
        first.post("/api/xp/daily-login", headers=auth_headers(token))

    with TestClient(create_app(settings)) as second:
        # sessions do not survive a restart, accounts do
        assert second.get("/api/user", headers=auth_headers(token)).status_code == 401
        token = second.post("/api/login", json={"username": "sandy", "password": "karate-chop"}).json()["token"]
        assert second.get("/api/user", headers=auth_headers(token)).json()["xp"] == 10


def test_sqlite_backend_end_to_end(tmp_path):
    settings = Settings(
        STORE_BACKEND="sqlite",
        SQLITE_PATH=str(tmp_path / "levellore.db"),
        DATA_FILE=str(tmp_path / "unused.json"),
        BCRYPT_ROUNDS=4,
    )
    with TestClient(create_app(settings)) as client:
        client.post("/api/register", json={"username": "sandy", "password": "karate-chop"})
        token = client.post("/api/login", json={"username": "sandy", "password": "karate-chop"}).json()["token"]
        headers = auth_headers(token)

        assert client.post("/api/xp/daily-login", headers=headers).json()["awarded"] is True
        assert client.post("/api/xp/daily-login", headers=headers).json()["awarded"] is False
        client.post("/api/chat", headers=headers, json={"text": "Hi-yah!"})
        assert client.get("/api/chat", headers=headers).json()[0]["text"] == "Hi-yah!"


def test_client_shell_fallback(tmp_path):
    static_dir = tmp_path / "client"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>LevelLore</html>")
    settings = Settings(
        DATA_FILE=str(tmp_path / "data.json"),
        STATIC_DIR=str(static_dir),
        BCRYPT_ROUNDS=4,
    )

    with TestClient(create_app(settings)) as client:
        assert "LevelLore" in client.get("/").text
        assert "LevelLore" in client.get("/leaderboard/anything").text
        assert client.get("/api/missing").status_code == 404
        assert client.post("/api/register", json={"username": "a", "password": "b"}).status_code == 200
