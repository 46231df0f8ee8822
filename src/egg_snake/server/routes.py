"""REST API route handlers for game sessions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from egg_snake.server.models import (
    CreateSessionRequest,
    DirectionRequest,
    DirectionResponse,
    ErrorResponse,
    SessionSummary,
)
from egg_snake.server.session_manager import SessionManager

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponse}},
)


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new idle game session."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(seed=body.seed)
    except ValueError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List all sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Return the full snapshot of a session's game."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return {"session_id": session.session_id, **session.engine.get_state()}


@router.post("/{session_id}/start")
async def start_session(session_id: str, request: Request) -> dict:
    """Start a run; a session that is already running is left alone."""
    manager = _get_manager(request)
    try:
        started = await manager.start_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"session_id": session_id, "started": started}


@router.post("/{session_id}/direction")
async def request_direction(
    session_id: str, body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Steer the snake for the next tick."""
    manager = _get_manager(request)
    try:
        accepted = await manager.request_direction(session_id, body.input)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return DirectionResponse(accepted=accepted)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> None:
    """Stop a session and discard it."""
    manager = _get_manager(request)
    try:
        await manager.delete_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
