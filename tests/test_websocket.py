"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from egg_snake.config import GameConfig
from egg_snake.server.app import create_app
from egg_snake.server.session_manager import SessionManager


@pytest.fixture()
def tc():
    """Starlette sync TestClient sharing one event loop for REST and
    WebSocket traffic."""
    application = create_app()
    application.state.session_manager = SessionManager(
        GameConfig(tick_interval_ms=20, seed=0),
    )
    return TestClient(application)


def _create(tc) -> str:
    resp = tc.post("/sessions", json={})
    assert resp.status_code == 201
    return resp.json()["session_id"]


def _receive_until(ws, predicate, limit=200):
    for _ in range(limit):
        state = json.loads(ws.receive_text())
        if predicate(state):
            return state
    raise AssertionError("Expected state never arrived.")


class TestPlayWebSocket:
    def test_initial_snapshot(self, tc):
        sid = _create(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["status"] == "idle"
            assert state["snake"] == [[0, 1], [0, 0]]

    def test_start_and_play_to_loss(self, tc):
        sid = _create(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"action": "start"}))
            state = _receive_until(ws, lambda s: s["status"] == "running")
            assert state["tick"] == 0
            ws.send_text(json.dumps({"input": "ArrowUp"}))
            state = _receive_until(ws, lambda s: s["status"] != "running")
            assert state["status"] == "lost"
            assert state["message"] == "You lose, try again"

    def test_malformed_frames_ignored(self, tc):
        sid = _create(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            ws.receive_text()
            ws.send_text("not json")
            ws.send_text(json.dumps([1, 2, 3]))
            ws.send_text(json.dumps({"input": 5}))
            ws.send_text(json.dumps({"action": "start"}))
            state = _receive_until(ws, lambda s: s["status"] == "running")
            assert state["score"] == 0

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ):
            pass
