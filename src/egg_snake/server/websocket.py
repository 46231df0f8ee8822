"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from egg_snake.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Send steering input and start commands, receive state each tick.

    Accepted frames are ``{"input": "<key or word>"}`` and
    ``{"action": "start"}``; anything else is ignored.
    """
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.sockets.append(websocket)
    logger.info("Client connected to session %s.", session_id)

    # Send an initial snapshot so the client can draw immediately.
    await websocket.send_text(
        json.dumps(session.engine.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("action") == "start":
                await manager.start_session(session_id)
                continue

            key = msg.get("input")
            if isinstance(key, str):
                await manager.request_direction(session_id, key)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    except KeyError:
        logger.info("Session %s was deleted while a client was connected.", session_id)
    finally:
        if websocket in session.sockets:
            session.sockets.remove(websocket)
