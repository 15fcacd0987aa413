"""Quiz Models - Enums, Schemas e State."""

from .enums import QuizDifficulty, QuizRank
from .schemas import (
    NO_ANSWER,
    AnswerRequest,
    AnswerResponse,
    NewQuizRequest,
    NewQuizResponse,
    PublicQuestion,
    QuestionRecord,
    QuizResultsResponse,
    ReviewEntry,
    SessionInfoResponse,
)
from .state import QuizSession

__all__ = [
    # Enums
    "QuizDifficulty",
    "QuizRank",
    # Schemas
    "NO_ANSWER",
    "QuestionRecord",
    "PublicQuestion",
    "NewQuizRequest",
    "NewQuizResponse",
    "AnswerRequest",
    "AnswerResponse",
    "ReviewEntry",
    "QuizResultsResponse",
    "SessionInfoResponse",
    # State
    "QuizSession",
]
