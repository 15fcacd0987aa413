"""Quiz Prompts - Templates e banco de fallback."""

from .fallback_questions import FALLBACK_QUESTIONS
from .templates import (
    DIFFICULTY_FOCUS,
    QUIZ_GENERATION_PROMPT,
    QUIZ_SYSTEM_PROMPT,
    build_generation_prompt,
    make_nonce,
)

__all__ = [
    "QUIZ_SYSTEM_PROMPT",
    "QUIZ_GENERATION_PROMPT",
    "DIFFICULTY_FOCUS",
    "FALLBACK_QUESTIONS",
    "build_generation_prompt",
    "make_nonce",
]
