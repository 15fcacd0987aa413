"""Question Pool Provider - Banco fixo de questões por dificuldade."""

import logging

from ..models.enums import QuizDifficulty
from ..models.schemas import QuestionRecord
from ..prompts import FALLBACK_QUESTIONS

logger = logging.getLogger(__name__)


def _build_pool(raw: dict[str, list[dict]]) -> dict[QuizDifficulty, tuple[QuestionRecord, ...]]:
    # Validado na importação: um registro inválido no banco quebra o boot, não a sessão
    return {
        QuizDifficulty(level): tuple(QuestionRecord(**item) for item in items)
        for level, items in raw.items()
    }


class QuestionPoolProvider:
    """Banco de questões revisadas usado quando o modelo falha.

    Stateless: sempre devolve a mesma tupla imutável para a dificuldade.
    Quem embute os registros em uma sessão deve copiá-los.

    Example:
        >>> provider = QuestionPoolProvider()
        >>> pool = provider.get_pool(QuizDifficulty.HARDER)
        >>> len(pool) >= 10
        True
    """

    POOL = _build_pool(FALLBACK_QUESTIONS)

    def get_pool(self, difficulty: QuizDifficulty | str) -> tuple[QuestionRecord, ...]:
        """Retorna o banco da dificuldade.

        Tags desconhecidas caem no banco `basic` em vez de falhar.

        Args:
            difficulty: Nível (enum ou string)

        Returns:
            Tupla não vazia de QuestionRecord
        """
        try:
            level = QuizDifficulty(difficulty)
        except ValueError:
            logger.warning(f"Dificuldade desconhecida no fallback: {difficulty!r}, usando basic")
            level = QuizDifficulty.BASIC

        return self.POOL[level]
