"""Quiz Engines - Lógica de negócios."""

from .acquisition import QuestionAcquisitionService
from .generator import (
    GenerationOutcome,
    GenerationStatus,
    QuestionGenerator,
    extract_json_array,
    parse_questions,
)
from .pool_provider import QuestionPoolProvider
from .scoring_engine import QuizScoringEngine

__all__ = [
    "QuestionPoolProvider",
    "QuestionGenerator",
    "GenerationOutcome",
    "GenerationStatus",
    "extract_json_array",
    "parse_questions",
    "QuestionAcquisitionService",
    "QuizScoringEngine",
]
