"""Session Store - Armazenamento em memória das sessões de quiz."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, Callable

from ..exceptions import SessionNotFound
from ..models.enums import QuizDifficulty
from ..models.schemas import QuestionRecord
from ..models.state import QuizSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Dono exclusivo das sessões de quiz durante o ciclo de vida.

    Cada sessão tem seu próprio `asyncio.Lock`: escritas na mesma sessão
    são serializadas e sessões diferentes nunca bloqueiam umas às outras.
    A única forma de alterar uma sessão é `locked()`.

    Política de expiração:
        - por idade: `evict_expired()` remove sessões mais velhas que `ttl_seconds`
        - por quantidade: `create()` remove as mais antigas ao atingir `max_sessions`

    Example:
        >>> store = SessionStore(ttl_seconds=3600, max_sessions=500)
        >>> session = await store.create(QuizDifficulty.BASIC, questions)
        >>> async with store.locked(session.session_id) as s:
        ...     s.answers[0] = 2
    """

    def __init__(
        self,
        ttl_seconds: float = 7200.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max(1, max_sessions)
        self._clock = clock
        # Ordem de inserção = ordem de criação (mais antiga primeiro)
        self._sessions: dict[str, QuizSession] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def _new_id(self) -> str:
        session_id = uuid.uuid4().hex
        while session_id in self._sessions:
            session_id = uuid.uuid4().hex
        return session_id

    def _remove(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
        self._locks.pop(session_id, None)

    async def create(
        self, difficulty: QuizDifficulty, questions: Sequence[QuestionRecord]
    ) -> QuizSession:
        """Cria e guarda uma nova sessão.

        Args:
            difficulty: Nível da sessão
            questions: Perguntas já validadas

        Returns:
            QuizSession recem-criada
        """
        while len(self._sessions) >= self.max_sessions:
            oldest_id = next(iter(self._sessions))
            self._remove(oldest_id)
            logger.info(f"[Quiz {oldest_id}] Removida (limite de {self.max_sessions} sessões)")

        session = QuizSession(
            session_id=self._new_id(),
            difficulty=QuizDifficulty(difficulty),
            questions=tuple(questions),
            start_time=self._clock(),
        )
        self._sessions[session.session_id] = session
        self._locks[session.session_id] = asyncio.Lock()

        logger.info(
            f"[Quiz {session.session_id}] Sessão criada "
            f"({session.difficulty.value}, {session.total_questions} perguntas)"
        )
        return session

    async def get(self, session_id: str) -> QuizSession:
        """Busca sessão.

        Raises:
            SessionNotFound: Se o id é desconhecido ou já expirou
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    @asynccontextmanager
    async def locked(self, session_id: str) -> AsyncIterator[QuizSession]:
        """Segura o lock da sessão e entrega a sessão para alteração.

        Raises:
            SessionNotFound: Se o id é desconhecido ou expirou enquanto aguardava
        """
        lock = self._locks.get(session_id)
        if lock is None:
            raise SessionNotFound(session_id)

        async with lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            yield session

    async def evict_expired(self, now: float | None = None) -> int:
        """Remove sessões mais velhas que o TTL.

        Returns:
            Número de sessões removidas
        """
        now = self._clock() if now is None else now
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if now - session.start_time > self.ttl_seconds
        ]
        for session_id in expired:
            self._remove(session_id)

        if expired:
            logger.info(f"{len(expired)} sessões expiradas removidas")
        return len(expired)

    async def run_eviction(self, interval: float) -> None:
        """Loop de expiração para rodar como task no lifespan do app."""
        while True:
            await asyncio.sleep(interval)
            await self.evict_expired()

    def stats(self) -> dict[str, Any]:
        """Resumo para o health check."""
        completed = sum(1 for s in self._sessions.values() if s.completed)
        return {
            "sessions": len(self._sessions),
            "completed": completed,
            "active": len(self._sessions) - completed,
            "max_sessions": self.max_sessions,
            "ttl_seconds": self.ttl_seconds,
        }
