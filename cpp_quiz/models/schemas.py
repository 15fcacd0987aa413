"""Quiz Schemas - Modelos Pydantic para questões e request/response."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from .enums import QuizDifficulty, QuizRank

# Valor reservado para "sem resposta" (timer expirou no cliente)
NO_ANSWER = -1

OPTIONS_PER_QUESTION = 4


class QuestionRecord(BaseModel):
    """Questão de múltipla escolha validada.

    Qualquer registro que chega a uma sessão passou por este modelo:
    enunciado não vazio, exatamente 4 alternativas distintas e
    índice correto entre 0 e 3.
    """

    question: StrictStr = Field(..., description="Enunciado da questão")
    options: list[StrictStr] = Field(
        ...,
        min_length=OPTIONS_PER_QUESTION,
        max_length=OPTIONS_PER_QUESTION,
        description="4 alternativas distintas",
    )
    correct_index: StrictInt = Field(..., ge=0, le=3, description="Índice da resposta correta (0-3)")
    explanation: StrictStr = Field(default="", description="Explicação da resposta correta")

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be empty")
        return value

    @field_validator("options")
    @classmethod
    def _options_distinct(cls, value: list[str]) -> list[str]:
        normalized = [option.strip() for option in value]
        if any(not option for option in normalized):
            raise ValueError("options must not be empty")
        if len(set(normalized)) != len(normalized):
            raise ValueError("options must be distinct")
        return value


# =============================================================================
# HTTP - camelCase no JSON, snake_case no Python
# =============================================================================


class CamelModel(BaseModel):
    """Base para os modelos expostos no HTTP."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PublicQuestion(CamelModel):
    """Questão enviada ao cliente antes da conclusão (sem gabarito)."""

    question: str
    options: list[str]


class NewQuizRequest(CamelModel):
    """Request para criar sessão. Dificuldade validada no endpoint (400)."""

    difficulty: Any = Field(default=QuizDifficulty.BASIC.value, description="basic, moderate ou harder")


class NewQuizResponse(CamelModel):
    session_id: str = Field(..., description="ID opaco da sessão")
    difficulty: QuizDifficulty
    questions: list[PublicQuestion]


class AnswerRequest(CamelModel):
    """Resposta de uma questão. `answer = -1` significa sem resposta."""

    # Intervalos checados pelo QuizScoringEngine (400), depois de sessão e conclusão
    question_index: int = Field(..., description="Índice da questão (0 a N-1)")
    answer: int = Field(..., description="Alternativa escolhida (0-3) ou -1")


class AnswerResponse(CamelModel):
    success: bool = True


class ReviewEntry(CamelModel):
    """Revisão de uma questão no resultado final."""

    question: str
    user_answer: int = Field(..., description="Alternativa enviada ou -1 se sem resposta")
    answered: bool = Field(..., description="False quando a questão ficou sem resposta")
    correct_answer: int
    is_correct: bool
    explanation: str


class QuizResultsResponse(CamelModel):
    score: int = Field(..., description="Percentual arredondado (0-100)")
    correct: int
    total: int
    results: list[ReviewEntry]
    time_spent: int = Field(..., description="Tempo decorrido em milissegundos")
    difficulty: QuizDifficulty
    rank: QuizRank
    rank_title: str
    rank_message: str


class SessionInfoResponse(CamelModel):
    id: str
    difficulty: QuizDifficulty
    current_question: int
    total_questions: int
    completed: bool
