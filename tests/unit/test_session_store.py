# =============================================================================
# TESTES - Session Store
# =============================================================================
# Testes unitários para ciclo de vida, lock por sessão e expiração
# =============================================================================

import asyncio

import pytest


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestSessionStoreCreate:
    """Testes para criação de sessão."""

    @pytest.mark.asyncio
    async def test_create_initial_state(self, sample_questions):
        from cpp_quiz.models.enums import QuizDifficulty
        from cpp_quiz.storage.session_store import SessionStore

        clock = FakeClock(5_000.0)
        store = SessionStore(clock=clock)

        session = await store.create(QuizDifficulty.MODERATE, sample_questions)

        assert session.session_id
        assert session.difficulty == QuizDifficulty.MODERATE
        assert session.total_questions == 10
        assert session.start_time == 5_000.0
        assert session.answers == {}
        assert session.completed is False

    @pytest.mark.asyncio
    async def test_create_unique_ids(self, session_store, sample_questions):
        ids = {(await session_store.create("basic", sample_questions)).session_id for _ in range(50)}

        assert len(ids) == 50

    @pytest.mark.asyncio
    async def test_questions_are_immutable_sequence(self, session_store, sample_questions):
        session = await session_store.create("basic", sample_questions)
        sample_questions.pop()

        assert isinstance(session.questions, tuple)
        assert session.total_questions == 10


class TestSessionStoreGet:
    """Testes para busca de sessão."""

    @pytest.mark.asyncio
    async def test_get_existing(self, session_store, sample_questions):
        session = await session_store.create("basic", sample_questions)

        assert await session_store.get(session.session_id) is session

    @pytest.mark.asyncio
    async def test_get_not_found(self, session_store):
        from cpp_quiz.exceptions import SessionNotFound

        with pytest.raises(SessionNotFound) as exc_info:
            await session_store.get("nonexistent")

        assert exc_info.value.session_id == "nonexistent"


class TestSessionStoreLocked:
    """Testes para o acesso exclusivo por sessão."""

    @pytest.mark.asyncio
    async def test_locked_not_found(self, session_store):
        from cpp_quiz.exceptions import SessionNotFound

        with pytest.raises(SessionNotFound):
            async with session_store.locked("nonexistent"):
                pass

    @pytest.mark.asyncio
    async def test_same_session_serializes(self, session_store, sample_questions):
        """Duas escritas na mesma sessão não se intercalam."""
        session = await session_store.create("basic", sample_questions)
        events = []

        async def writer(name: str):
            async with session_store.locked(session.session_id) as s:
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                s.answers[0] = len(events)
                events.append(f"{name}-end")

        await asyncio.gather(writer("a"), writer("b"))

        assert events in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )

    @pytest.mark.asyncio
    async def test_different_sessions_do_not_block(self, session_store, sample_questions):
        """Lock de uma sessão não bloqueia outra."""
        first = await session_store.create("basic", sample_questions)
        second = await session_store.create("basic", sample_questions)

        async with session_store.locked(first.session_id):
            async with session_store.locked(second.session_id) as s:
                s.answers[1] = 2

        assert second.answers == {1: 2}
        assert first.answers == {}


class TestSessionStoreEviction:
    """Testes para a política de expiração."""

    @pytest.mark.asyncio
    async def test_evict_expired(self, sample_questions):
        from cpp_quiz.exceptions import SessionNotFound
        from cpp_quiz.storage.session_store import SessionStore

        clock = FakeClock(0.0)
        store = SessionStore(ttl_seconds=60, clock=clock)
        old = await store.create("basic", sample_questions)
        clock.now = 50.0
        recent = await store.create("basic", sample_questions)

        clock.now = 100.0
        removed = await store.evict_expired()

        assert removed == 1
        assert recent.session_id in store
        with pytest.raises(SessionNotFound):
            await store.get(old.session_id)

    @pytest.mark.asyncio
    async def test_max_sessions_evicts_oldest(self, sample_questions):
        from cpp_quiz.storage.session_store import SessionStore

        store = SessionStore(max_sessions=2)
        first = await store.create("basic", sample_questions)
        second = await store.create("basic", sample_questions)
        third = await store.create("basic", sample_questions)

        assert len(store) == 2
        assert first.session_id not in store
        assert second.session_id in store
        assert third.session_id in store

    @pytest.mark.asyncio
    async def test_run_eviction_loop(self, sample_questions):
        from cpp_quiz.storage.session_store import SessionStore

        clock = FakeClock(0.0)
        store = SessionStore(ttl_seconds=1, clock=clock)
        await store.create("basic", sample_questions)
        clock.now = 10.0

        task = asyncio.create_task(store.run_eviction(0.01))
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_stats(self, session_store, sample_questions):
        session = await session_store.create("basic", sample_questions)
        await session_store.create("basic", sample_questions)
        session.mark_complete()

        stats = session_store.stats()

        assert stats["sessions"] == 2
        assert stats["completed"] == 1
        assert stats["active"] == 1
