"""Question Acquisition - Modelo primeiro, banco de fallback depois."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable

from ..exceptions import GenerationFailed
from ..models.enums import QuizDifficulty
from ..models.schemas import QuestionRecord
from .generator import QuestionGenerator
from .pool_provider import QuestionPoolProvider

logger = logging.getLogger(__name__)


class QuestionAcquisitionService:
    """Garante um conjunto de questões utilizável para cada nova sessão.

    Tenta o gerador via modelo; em qualquer falha embaralha o banco de
    fallback, pega as primeiras `count` e marca o enunciado com o horário
    da geração para reduzir a sensação de repetição entre sessões.
    O cliente não consegue distinguir as duas origens.
    """

    def __init__(
        self,
        generator: QuestionGenerator | None,
        pool_provider: QuestionPoolProvider | None = None,
        fallback_marker: bool = True,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.generator = generator
        self.pool_provider = pool_provider or QuestionPoolProvider()
        self.fallback_marker = fallback_marker
        self._rng = rng or random.SystemRandom()
        self._clock = clock

    async def acquire(self, difficulty: QuizDifficulty, count: int) -> list[QuestionRecord]:
        """Obtém até `count` questões. Nunca levanta exceção."""
        level = getattr(difficulty, "value", difficulty)
        if self.generator is not None:
            try:
                return await self.generator.generate(difficulty, count)
            except GenerationFailed as e:
                logger.info(f"[Acquisition {level}] Fallback após falha ({e.reason})")
            except Exception:
                logger.exception(f"[Acquisition {level}] Erro inesperado no gerador, usando fallback")

        return self.fallback(difficulty, count)

    def fallback(self, difficulty: QuizDifficulty | str, count: int) -> list[QuestionRecord]:
        """Embaralha o banco e devolve cópias das primeiras `count` questões.

        Sem repetição cíclica: se o banco tiver menos que `count`,
        retorna o que houver.
        """
        level = getattr(difficulty, "value", difficulty)
        pool = self.pool_provider.get_pool(difficulty)
        picked = self._rng.sample(pool, k=min(max(count, 0), len(pool)))

        marker = time.strftime("%H:%M:%S", time.localtime(self._clock()))
        questions = []
        for record in picked:
            copy = record.model_copy(deep=True)
            if self.fallback_marker:
                copy = copy.model_copy(update={"question": f"{copy.question} [{marker}]"})
            questions.append(copy)

        logger.info(f"[Acquisition {level}] {len(questions)} questões do banco de fallback")
        return questions
