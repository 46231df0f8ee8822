"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from egg_snake.engine import GameStatus


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    seed: int | None = Field(default=None, ge=0)


class DirectionRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/direction."""

    input: str = Field(min_length=1, max_length=32)


class DirectionResponse(BaseModel):
    """Whether a steering input changed the pending direction."""

    accepted: bool


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: GameStatus
    score: int
    best_score: int
    tick_interval_ms: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
