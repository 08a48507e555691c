"""Tests for the Flask web surface."""

import pytest

from pocket_calc.webapp import server


@pytest.fixture
def client():
    server.session.reset()
    server.app.config["TESTING"] = True
    with server.app.test_client() as c:
        yield c
    server.session.reset()


def post_actions(client, *payloads):
    resp = None
    for payload in payloads:
        resp = client.post("/api/actions", json=payload)
        assert resp.status_code == 200
    return resp.get_json()


def test_index_renders_buttons(client):
    """The page lists every calculator button."""
    resp = client.get("/")
    assert resp.status_code == 200
    assert b'id="equals"' in resp.data
    assert b'id="zero"' in resp.data
    assert b"CHOOSE_OPERATOR" in resp.data


def test_initial_state(client):
    """GET /api/state returns the initial snapshot."""
    data = client.get("/api/state").get_json()
    assert data["display_value"] == "0"
    assert data["clear_label"] == "AC"
    assert data["calculation_history"] == []


def test_actions_round_trip(client):
    """5 + 3 = through the JSON API."""
    data = post_actions(
        client,
        {"type": "INPUT_DIGIT", "payload": 5},
        {"type": "CHOOSE_OPERATOR", "payload": "+"},
        {"type": "INPUT_DIGIT", "payload": "3"},
        {"type": "CALCULATE"},
    )
    assert data["display_value"] == "8"
    assert data["calculation_history"] == ["5 + 3 = 8"]

    data = post_actions(
        client,
        {"type": "ALL_CLEAR"},
        {"type": "TOGGLE_HISTORY"},
        {"type": "USE_HISTORY_VALUE", "payload": "5 + 3 = 8"},
    )
    assert data["display_value"] == "8"
    assert data["show_history"] is False


def test_bad_action_payloads(client):
    """Invalid payloads are rejected with 400."""
    resp = client.post("/api/actions", json={"type": "SQUARE_ROOT"})
    assert resp.status_code == 400
    assert "Unknown action" in resp.get_json()["error"]

    resp = client.post("/api/actions")
    assert resp.status_code == 400

    # state unchanged
    assert client.get("/api/state").get_json()["display_value"] == "0"


def test_keys(client):
    """Key presses are translated server-side."""
    for key in ("9", "/", "0", "Enter"):
        data = client.post("/api/keys", json={"key": key}).get_json()
    assert data["display_value"] == "Error"
    assert data["ignored"] is False

    data = client.post("/api/keys", json={"key": "F5"}).get_json()
    assert data["ignored"] is True
    assert data["display_value"] == "Error"

    resp = client.post("/api/keys", json={})
    assert resp.status_code == 400


def test_reset(client):
    """POST /api/reset returns a fresh state."""
    post_actions(client, {"type": "INPUT_DIGIT", "payload": 7}, {"type": "TOGGLE_THEME"})
    data = client.post("/api/reset").get_json()
    assert data["display_value"] == "0"
    assert data["theme"] == "dark"


@pytest.mark.parametrize("body", [[1], "7", 5, [{"type": "CALCULATE"}]])
def test_non_object_json_is_rejected(client, body):
    """JSON that is not an object gets a 400, not a server error."""
    resp = client.post("/api/actions", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()

    resp = client.post("/api/keys", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()

    assert client.get("/api/state").get_json()["display_value"] == "0"
