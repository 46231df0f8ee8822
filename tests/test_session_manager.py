"""Tests for the in-memory session registry and tick loops."""

from __future__ import annotations

import asyncio

import pytest

from egg_snake.config import GameConfig
from egg_snake.engine import GameStatus
from egg_snake.server.session_manager import SessionManager


@pytest.fixture()
def manager():
    return SessionManager(GameConfig(tick_interval_ms=10, seed=0))


async def _wait_until_finished(manager, session_id, timeout=5.0):
    session = manager.get_session(session_id)
    for _ in range(int(timeout / 0.02)):
        if not session.engine.is_running:
            return session
        await asyncio.sleep(0.02)
    raise AssertionError("Session never finished.")


class TestSessionRegistry:
    def test_create_and_get(self, manager):
        session = manager.create_session()
        assert manager.get_session(session.session_id) is session
        assert session.engine.status == GameStatus.IDLE

    def test_list(self, manager):
        manager.create_session()
        manager.create_session()
        summaries = manager.list_sessions()
        assert len(summaries) == 2
        assert all(s.tick_interval_ms == 10 for s in summaries)

    def test_max_sessions(self):
        manager = SessionManager(max_sessions=1)
        manager.create_session()
        with pytest.raises(ValueError, match="Too many"):
            manager.create_session()

    def test_invalid_max_sessions(self):
        with pytest.raises(ValueError):
            SessionManager(max_sessions=0)

    def test_require_missing(self, manager):
        with pytest.raises(KeyError):
            manager.require_session("nope")

    def test_seeded_sessions_match(self, manager):
        a = manager.create_session(seed=5)
        b = manager.create_session(seed=5)
        a.engine.start()
        b.engine.start()
        assert a.engine.egg == b.engine.egg


class TestTickLoop:
    async def test_runs_until_wall(self, manager):
        session = manager.create_session()
        assert await manager.start_session(session.session_id)
        await _wait_until_finished(manager, session.session_id)
        assert session.engine.status == GameStatus.LOST
        assert session._task is not None
        await asyncio.sleep(0.05)
        assert session._task.done()
        await manager.cleanup()

    async def test_start_while_running_is_noop(self, manager):
        session = manager.create_session()
        assert await manager.start_session(session.session_id)
        task = session._task
        assert not await manager.start_session(session.session_id)
        assert session._task is task
        await manager.cleanup()

    async def test_no_ticks_after_terminal(self, manager):
        session = manager.create_session()
        await manager.start_session(session.session_id)
        await manager.request_direction(session.session_id, "up")
        await _wait_until_finished(manager, session.session_id)
        ticks = session.engine.ticks
        await asyncio.sleep(0.1)
        assert session.engine.ticks == ticks
        await manager.cleanup()

    async def test_restart_after_loss(self, manager):
        session = manager.create_session()
        await manager.start_session(session.session_id)
        await manager.request_direction(session.session_id, "w")
        await _wait_until_finished(manager, session.session_id)
        assert await manager.start_session(session.session_id)
        assert session.engine.status == GameStatus.RUNNING
        await manager.cleanup()

    async def test_delete_cancels_loop(self, manager):
        session = manager.create_session()
        await manager.start_session(session.session_id)
        task = session._task
        await manager.delete_session(session.session_id)
        assert task.done()
        assert manager.get_session(session.session_id) is None
        ticks = session.engine.ticks
        await asyncio.sleep(0.05)
        assert session.engine.ticks == ticks

    async def test_delete_missing(self, manager):
        with pytest.raises(KeyError):
            await manager.delete_session("missing")

    async def test_many_sessions_finish(self, manager):
        ids = [manager.create_session().session_id for _ in range(20)]
        for sid in ids:
            await manager.start_session(sid)
        for sid in ids:
            await _wait_until_finished(manager, sid)
        assert all(
            manager.get_session(sid).engine.status != GameStatus.RUNNING
            for sid in ids
        )
        await manager.cleanup()

    async def test_tick_error_ends_session(self, manager):
        session = manager.create_session()
        await manager.start_session(session.session_id)

        def _explode():
            raise RuntimeError("boom")

        session.engine.on_tick = _explode
        for _ in range(50):
            if session._task.done():
                break
            await asyncio.sleep(0.02)
        assert session._task.done()
        assert session.engine.status == GameStatus.LOST
        assert session.engine.message == "You lose, try again"

        del session.engine.on_tick
        assert await manager.start_session(session.session_id)
        assert session.engine.status == GameStatus.RUNNING
        await manager.cleanup()
