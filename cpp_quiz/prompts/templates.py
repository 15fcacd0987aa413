"""Quiz Templates - Prompts para geração de questões de C++."""

import random
import time

from ..models.enums import QuizDifficulty

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

QUIZ_SYSTEM_PROMPT = """You are a C++ quiz question generator. Reply ONLY with a valid JSON array, no additional text."""

# =============================================================================
# DIFFICULTY FOCUS
# =============================================================================

DIFFICULTY_FOCUS: dict[QuizDifficulty, str] = {
    QuizDifficulty.BASIC: "variables, data types, basic syntax, simple loops, basic I/O, operators",
    QuizDifficulty.MODERATE: (
        "functions, classes, pointers, memory management, STL basics, inheritance, polymorphism"
    ),
    QuizDifficulty.HARDER: (
        "templates, smart pointers, advanced OOP, design patterns, move semantics, lambda expressions"
    ),
}

# =============================================================================
# PROMPT TEMPLATE
# =============================================================================

QUIZ_GENERATION_PROMPT = """Generate exactly {count} unique C++ programming quiz questions for {difficulty} level difficulty.

Focus for {difficulty} level: {focus}.

Each question must be an object in this exact JSON format:
{{
  "question": "The question text",
  "options": ["Option A", "Option B", "Option C", "Option D"],
  "correct_index": 0,
  "explanation": "Brief explanation of the correct answer"
}}

REQUIREMENTS:
1. Exactly 4 distinct options per question
2. "correct_index" is the 0-3 index of the right option
3. Every question tests a different C++ concept
4. Explanations are short, clear and educational
5. Vary the position of the correct option

Uniqueness seed: {nonce} (use it to pick different concepts than previous quizzes)

Return ONLY the JSON array of {count} objects, no markdown, no commentary.

Generate the JSON array now:"""


def make_nonce() -> str:
    """Gera nonce de unicidade (timestamp + seed aleatória)."""
    return f"{int(time.time() * 1000)}-{random.randint(0, 999_999):06d}"


def build_generation_prompt(difficulty: QuizDifficulty, count: int, nonce: str) -> str:
    """Monta o prompt de geração.

    Função pura de (difficulty, count, nonce), sem chamada de rede.

    Args:
        difficulty: Nível das questões
        count: Número de questões pedidas
        nonce: Valor de unicidade (ver make_nonce)

    Returns:
        Prompt pronto para o modelo
    """
    difficulty = QuizDifficulty(difficulty)
    return QUIZ_GENERATION_PROMPT.format(
        count=count,
        difficulty=difficulty.value,
        focus=DIFFICULTY_FOCUS[difficulty],
        nonce=nonce,
    )
