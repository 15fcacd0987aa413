"""Quiz Enums - Dificuldade e Rankings."""

from enum import Enum

from ..exceptions import InvalidDifficulty


class QuizDifficulty(str, Enum):
    """Níveis de dificuldade das questões."""

    BASIC = "basic"  # Variáveis, tipos, sintaxe, loops, I/O
    MODERATE = "moderate"  # Funções, classes, ponteiros, STL, herança
    HARDER = "harder"  # Templates, smart pointers, move semantics, lambdas

    @classmethod
    def parse(cls, value: object) -> "QuizDifficulty":
        """Converte valor recebido do cliente, sem coerção silenciosa.

        Raises:
            InvalidDifficulty: Se o valor não é um dos níveis conhecidos
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidDifficulty(value)


class QuizRank(str, Enum):
    """Faixas de desempenho exibidas na tela de resultado."""

    EXCELLENT = "excellent"  # >= 80%
    GOOD = "good"  # 60-79%
    KEEP_GOING = "keep_going"  # < 60%
