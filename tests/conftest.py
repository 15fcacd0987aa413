# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks do modelo, questões de exemplo e engines
# =============================================================================

import json
from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# FIXTURES DE CONFIGURAÇÃO
# =============================================================================


@pytest.fixture
def quiz_settings():
    """Settings com credencial de teste e timeout curto."""
    from cpp_quiz.config import QuizSettings

    return QuizSettings(
        anthropic_api_key="test-key-123",
        generation_timeout=1.0,
        questions_per_session=10,
        session_ttl_seconds=3600.0,
        max_sessions=100,
        fallback_marker=True,
    )


# =============================================================================
# FIXTURES DE QUESTOES
# =============================================================================


@pytest.fixture
def make_question():
    """Factory de QuestionRecord válido."""

    def _make(index: int = 0, correct_index: int = 0, explanation: str = "Because."):
        from cpp_quiz.models.schemas import QuestionRecord

        return QuestionRecord(
            question=f"Question {index}?",
            options=[f"Q{index} option {i}" for i in range(4)],
            correct_index=correct_index,
            explanation=explanation,
        )

    return _make


@pytest.fixture
def sample_questions(make_question):
    """10 questões onde a correta é `i % 4`."""
    return [make_question(i, i % 4) for i in range(10)]


@pytest.fixture
def question_payload():
    """Factory de dicts no formato que o modelo deve devolver."""

    def _payload(count: int = 10, correct_index: int = 0):
        return [
            {
                "question": f"What does snippet {i} print?",
                "options": [f"{i}-a", f"{i}-b", f"{i}-c", f"{i}-d"],
                "correct_index": correct_index,
                "explanation": f"Explanation {i}",
            }
            for i in range(count)
        ]

    return _payload


@pytest.fixture
def json_quiz_response(question_payload):
    """Resposta típica do modelo: texto + bloco markdown com o array."""
    body = json.dumps(question_payload(10), indent=2)
    return f"Here are your questions:\n\n```json\n{body}\n```\n\nGood luck!"


# =============================================================================
# FIXTURES DO MODELO
# =============================================================================


@pytest.fixture
def mock_text_client(json_quiz_response):
    """Mock do cliente de texto retornando JSON válido."""
    mock = MagicMock()
    mock.generate_text = AsyncMock(return_value=json_quiz_response)
    return mock


@pytest.fixture
def failing_text_client():
    """Mock do cliente de texto que sempre falha."""
    mock = MagicMock()
    mock.generate_text = AsyncMock(side_effect=RuntimeError("provider unavailable"))
    return mock


# =============================================================================
# FIXTURES DE ENGINES
# =============================================================================


@pytest.fixture
def session_store():
    from cpp_quiz.storage.session_store import SessionStore

    return SessionStore(ttl_seconds=3600.0, max_sessions=100)


@pytest.fixture
def scoring_engine(session_store):
    from cpp_quiz.engine.scoring_engine import QuizScoringEngine

    return QuizScoringEngine(session_store)


@pytest.fixture
def failing_generator():
    """Gerador que sempre levanta GenerationFailed."""
    from cpp_quiz.exceptions import GenerationFailed

    mock = MagicMock()
    mock.generate = AsyncMock(side_effect=GenerationFailed("provider"))
    return mock


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def make_client(quiz_settings):
    """Factory de TestClient com cliente de texto injetado."""
    from fastapi.testclient import TestClient

    def _make(text_client, settings=None):
        from server import create_app

        app = create_app(settings or quiz_settings, text_client=text_client)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, mock_text_client):
    """Cliente de teste com modelo mockado (questões com correta = 0)."""
    return make_client(mock_text_client)


@pytest.fixture
def fallback_client(make_client, failing_text_client):
    """Cliente de teste com modelo indisponível."""
    return make_client(failing_text_client)
