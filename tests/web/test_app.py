"""Tests for the FastAPI view: events in, snapshots out."""

# pylint: disable=missing-class-docstring,missing-function-docstring,redefined-outer-name

import pytest
from fastapi.testclient import TestClient

from mdtable.web import app as web_app


@pytest.fixture
def client():
    web_app._sessions.clear()  # pylint: disable=protected-access
    return TestClient(web_app.app)


def new_session(client) -> str:
    return client.get("/api/state").json()["session_id"]


def send(client, session_id: str, **event) -> dict:
    resp = client.post("/api/event", json={"session_id": session_id, "event": event})
    assert resp.status_code == 200
    return resp.json()


class TestState:

    def test_index_served(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Markdown Table Editor" in resp.text

    def test_index_posts_events_in_order(self, client):
        page = client.get("/").text
        assert "eventQueue.then(() => sendNow(event, rerender))" in page

    def test_new_session_has_default_table(self, client):
        data = client.get("/api/state").json()
        snapshot = data["snapshot"]
        assert data["session_id"]
        assert snapshot["mode"] == "normal"
        assert snapshot["cursor"] is None
        assert len(snapshot["headers"]) == 3
        assert len(snapshot["rows"]) == 2

    def test_sessions_are_isolated(self, client):
        first, second = new_session(client), new_session(client)
        send(client, first, kind="add_row")
        assert len(client.get(f"/api/state?session_id={first}").json()["snapshot"]["rows"]) == 3
        assert len(client.get(f"/api/state?session_id={second}").json()["snapshot"]["rows"]) == 2


class TestEvents:

    def test_edit_flow(self, client):
        sid = new_session(client)
        send(client, sid, kind="click", row=-1, col=0)
        data = send(client, sid, kind="key", key="Enter")
        assert data["snapshot"]["editing"] == [-1, 0]
        data = send(client, sid, kind="input", row=-1, col=0, text="Name|Alias")
        assert data["result"]["changed"] is True
        assert data["snapshot"]["markdown"].startswith("| Name\\|Alias |")
        data = send(client, sid, kind="key", key="Escape")
        assert data["snapshot"]["mode"] == "normal"

    def test_successive_inputs_keep_latest_text(self, client):
        sid = new_session(client)
        send(client, sid, kind="click", row=0, col=0)
        send(client, sid, kind="key", key="i")
        for text in ["a", "ab", "abc"]:
            data = send(client, sid, kind="input", row=0, col=0, text=text)
        assert data["snapshot"]["rows"][0][0] == "abc"

    def test_warning_returned(self, client):
        sid = new_session(client)
        send(client, sid, kind="remove_row")
        data = send(client, sid, kind="remove_row")
        assert data["result"]["warning"] == "At least one row is required"
        assert len(data["snapshot"]["rows"]) == 1

    def test_copy_requests_client_copy(self, client):
        sid = new_session(client)
        data = send(client, sid, kind="copy")
        assert data["result"]["copy_requested"] is True
        data = send(client, sid, kind="copy_result", ok=True)
        assert data["result"]["notification"]["message"] == "Copied to clipboard"

    def test_invalid_event_kind(self, client):
        resp = client.post("/api/event", json={"event": {"kind": "explode"}})
        assert resp.status_code == 422


class TestLoadAndReset:

    def test_load_markdown(self, client):
        sid = new_session(client)
        resp = client.post("/api/load", json={"session_id": sid, "markdown": "| A | B |\n| --- | ---: |\n| 1 | 2 |\n"})
        snapshot = resp.json()["snapshot"]
        assert snapshot["headers"] == ["A", "B"]
        assert snapshot["alignments"] == ["left", "right"]
        assert snapshot["markdown"] == "| A | B |\n| --- | ---: |\n| 1 | 2 |\n"

    def test_load_invalid(self, client):
        resp = client.post("/api/load", json={"markdown": "nothing"})
        assert resp.status_code == 400

    def test_reset(self, client):
        sid = new_session(client)
        send(client, sid, kind="add_column")
        snapshot = client.post("/api/reset", json={"session_id": sid}).json()["snapshot"]
        assert len(snapshot["headers"]) == 3
