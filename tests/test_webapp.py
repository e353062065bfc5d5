"""Tests for the calculator web API."""

import pytest

from web_calculator.webapp import app, sessions


@pytest.fixture
def client():
    app.config["TESTING"] = True
    sessions.reset_sessions()
    with app.test_client() as client:
        yield client
    sessions.reset_sessions()


def _new_session(client):
    res = client.post("/api/sessions")
    assert res.status_code == 201
    return res.get_json()["session_id"]


def _act(client, session_id, action, value=None):
    return client.post(
        f"/api/sessions/{session_id}/actions",
        json={"action": action, "value": value},
    )


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"current-line" in res.data


def test_new_session_starts_empty(client):
    data = client.post("/api/sessions").get_json()
    assert data["current_line"] == "0"
    assert data["previous_line"] == ""
    assert data["error"] is False


def test_actions_compute_result(client):
    sid = _new_session(client)
    _act(client, sid, "digit", "1")
    _act(client, sid, "digit", "2")
    data = _act(client, sid, "operator", "×").get_json()
    assert data["previous_line"] == "12 ×"
    _act(client, sid, "digit", "3")
    data = _act(client, sid, "equals").get_json()
    assert data["current_line"] == "36"
    assert data["pending_operator"] is None

    data = client.get(f"/api/sessions/{sid}").get_json()
    assert data["current_operand"] == "36"


def test_key_actions(client):
    sid = _new_session(client)
    for key in ["5", "/", "0", "Enter"]:
        res = _act(client, sid, "key", key)
        assert res.status_code == 200
    data = res.get_json()
    assert data["current_line"] == "Cannot divide by zero"
    assert data["error"] is True


def test_dot_percentage_backspace_clear(client):
    sid = _new_session(client)
    _act(client, sid, "dot")
    _act(client, sid, "digit", "5")
    assert _act(client, sid, "percentage").get_json()["current_operand"] == "0.005"
    assert _act(client, sid, "backspace").get_json()["current_line"] == "0"
    _act(client, sid, "digit", "9")
    assert _act(client, sid, "clear").get_json()["current_line"] == "0"


def test_sessions_are_independent(client):
    first = _new_session(client)
    second = _new_session(client)
    _act(client, first, "digit", "7")
    assert client.get(f"/api/sessions/{first}").get_json()["current_line"] == "7"
    assert client.get(f"/api/sessions/{second}").get_json()["current_line"] == "0"


def test_bad_requests(client):
    sid = _new_session(client)
    res = client.post(f"/api/sessions/{sid}/actions", data="nope", content_type="text/plain")
    assert res.status_code == 400

    res = client.post(f"/api/sessions/{sid}/actions", json=[1, 2])
    assert res.status_code == 400
    assert "error" in res.get_json()

    res = client.post(f"/api/sessions/{sid}/actions", json={"action": ["digit"]})
    assert res.status_code == 400
    assert "Unknown action" in res.get_json()["error"]

    res = _act(client, sid, "explode")
    assert res.status_code == 400
    assert "Unknown action" in res.get_json()["error"]

    assert _act(client, sid, "digit", "x").status_code == 400
    assert _act(client, sid, "digit", 4).status_code == 400
    assert _act(client, sid, "operator", "^").status_code == 400
    assert _act(client, sid, "key", "Tab").status_code == 400


def test_unknown_session(client):
    assert client.get("/api/sessions/missing").status_code == 404
    assert _act(client, "missing", "digit", "1").status_code == 404
    assert client.delete("/api/sessions/missing").status_code == 404


def test_delete_session(client):
    sid = _new_session(client)
    assert client.delete(f"/api/sessions/{sid}").status_code == 200
    assert client.get(f"/api/sessions/{sid}").status_code == 404


def test_session_eviction(client, monkeypatch):
    monkeypatch.setattr(sessions, "MAX_SESSIONS", 2)
    oldest = _new_session(client)
    kept = _new_session(client)
    newest = _new_session(client)
    assert sessions.list_sessions() == [kept, newest]
    assert client.get(f"/api/sessions/{oldest}").status_code == 404
