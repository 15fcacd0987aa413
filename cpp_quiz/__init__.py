"""C++ Quiz - Motor de sessões de quiz com questões geradas por LLM.

Arquitetura:
- models/: Enums, Schemas Pydantic, QuizSession
- prompts/: Templates de prompt e banco de fallback
- llm/: Cliente de texto (Claude Agent SDK)
- engine/: QuestionPoolProvider, QuestionGenerator, QuestionAcquisitionService, QuizScoringEngine
- storage/: SessionStore (memória, lock por sessão, expiração)
- router.py: FastAPI endpoints
"""

from .config import QuizSettings
from .engine import (
    QuestionAcquisitionService,
    QuestionGenerator,
    QuestionPoolProvider,
    QuizScoringEngine,
)
from .exceptions import (
    AlreadyCompleted,
    GenerationFailed,
    InvalidAnswer,
    InvalidDifficulty,
    QuizError,
    SessionNotFound,
)
from .llm import ClaudeTextClient, LLMClientFactory
from .models import NO_ANSWER, QuestionRecord, QuizDifficulty, QuizRank, QuizSession
from .storage import SessionStore

__all__ = [
    # Config
    "QuizSettings",
    # Models
    "NO_ANSWER",
    "QuizDifficulty",
    "QuizRank",
    "QuestionRecord",
    "QuizSession",
    # Engines
    "QuestionPoolProvider",
    "QuestionGenerator",
    "QuestionAcquisitionService",
    "QuizScoringEngine",
    # LLM
    "ClaudeTextClient",
    "LLMClientFactory",
    # Storage
    "SessionStore",
    # Errors
    "QuizError",
    "InvalidDifficulty",
    "SessionNotFound",
    "AlreadyCompleted",
    "InvalidAnswer",
    "GenerationFailed",
]
