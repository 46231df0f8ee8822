"""In-memory session registry and per-session async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

import numpy as np
from starlette.websockets import WebSocket, WebSocketState

from egg_snake.config import GameConfig
from egg_snake.engine import GameEngine
from egg_snake.server.models import SessionSummary

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 1000


@dataclass
class Session:
    """One player's game plus the sockets watching it."""

    session_id: str
    engine: GameEngine
    sockets: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            status=self.engine.status,
            score=self.engine.score,
            best_score=self.engine.best_score,
            tick_interval_ms=self.engine.config.tick_interval_ms,
        )


class SessionManager:
    """Central registry managing all game sessions.

    Each running session has exactly one tick task. The task sleeps one
    interval, applies a tick under the session lock, broadcasts the new
    state and only then sleeps again, so ticks never overlap.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self.config = config if config is not None else GameConfig()
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    def create_session(self, seed: int | None = None) -> Session:
        """Register a new idle session and return it."""
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many sessions. Try again later.")

        if seed is None:
            seed = self.config.seed
        engine = GameEngine(self.config, rng=np.random.default_rng(seed))
        session_id = uuid.uuid4().hex[:12]
        session = Session(session_id=session_id, engine=engine)
        self._sessions[session_id] = session
        logger.info("Session %s created.", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def require_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    async def start_session(self, session_id: str) -> bool:
        """Start a run and arm its tick loop.

        Returns ``False`` if the session was already running.
        """
        session = self.require_session(session_id)
        async with session.lock:
            if session.engine.is_running:
                return False
            await self._cancel_task(session)
            session.engine.start()
            state = session.engine.get_state()
            session._task = asyncio.create_task(self._tick_loop(session))
        logger.info("Session %s started.", session_id)
        await self._broadcast(session, state)
        return True

    async def request_direction(self, session_id: str, raw: str) -> bool:
        """Forward a steering input to the session's engine."""
        session = self.require_session(session_id)
        async with session.lock:
            return session.engine.request_direction(raw)

    async def delete_session(self, session_id: str) -> None:
        """Stop the tick loop, close sockets and forget the session."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await self._cancel_task(session)
        await self._close_connections(session)
        logger.info("Session %s deleted.", session_id)

    async def _tick_loop(self, session: Session) -> None:
        """Tick the engine until the game leaves the running state."""
        interval = session.engine.config.tick_interval
        try:
            while session.engine.is_running:
                await asyncio.sleep(interval)
                async with session.lock:
                    if not session.engine.is_running:
                        break
                    session.engine.on_tick()
                    state = session.engine.get_state()
                await self._broadcast(session, state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for session %s.", session.session_id)
        except Exception:
            logger.exception("Tick loop error in session %s.", session.session_id)
            async with session.lock:
                session.engine.abort()
                state = session.engine.get_state()
            await self._broadcast(session, state)

    async def _cancel_task(self, session: Session) -> None:
        task = session._task
        session._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def _broadcast(self, session: Session, state: dict) -> None:
        """Send game state to every connected socket."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                logger.warning(
                    "Dropping socket in session %s after a failed send.",
                    session.session_id,
                )
                dead.append(ws)

        for ws in dead:
            if ws in session.sockets:
                session.sockets.remove(ws)

    async def _close_connections(self, session: Session) -> None:
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session closed.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.sockets.clear()

    async def cleanup(self) -> None:
        """Cancel all running tick loops."""
        for session in list(self._sessions.values()):
            await self._cancel_task(session)
        logger.info("SessionManager cleanup complete.")
