"""Quiz Router - Endpoints FastAPI das sessões de quiz."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from .config import QuizSettings
from .engine.acquisition import QuestionAcquisitionService
from .engine.scoring_engine import QuizScoringEngine
from .exceptions import AlreadyCompleted, InvalidAnswer, InvalidDifficulty, SessionNotFound
from .models.enums import QuizDifficulty
from .models.schemas import (
    AnswerRequest,
    AnswerResponse,
    NewQuizRequest,
    NewQuizResponse,
    PublicQuestion,
    QuizResultsResponse,
    ReviewEntry,
    SessionInfoResponse,
)
from .storage.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_settings(request: Request) -> QuizSettings:
    """Dependency para obter as configurações do app."""
    return request.app.state.settings


def get_session_store(request: Request) -> SessionStore:
    """Dependency para obter o SessionStore do app."""
    return request.app.state.session_store


def get_acquisition_service(request: Request) -> QuestionAcquisitionService:
    """Dependency para obter o serviço de aquisição de questões."""
    return request.app.state.acquisition


def get_scoring_engine(request: Request) -> QuizScoringEngine:
    """Dependency para obter o ScoringEngine."""
    return request.app.state.scoring


# =============================================================================
# SESSION ENDPOINTS
# =============================================================================


@router.post("/new", response_model=NewQuizResponse)
async def new_quiz(
    request: NewQuizRequest | None = None,
    settings: QuizSettings = Depends(get_settings),
    acquisition: QuestionAcquisitionService = Depends(get_acquisition_service),
    store: SessionStore = Depends(get_session_store),
):
    """Cria uma nova sessão de quiz.

    - Valida a dificuldade (basic, moderate, harder)
    - Gera as perguntas via modelo, com fallback para o banco fixo
    - Retorna as perguntas SEM gabarito e sem explicação
    """
    request = request or NewQuizRequest()

    try:
        difficulty = QuizDifficulty.parse(request.difficulty)
    except InvalidDifficulty as e:
        logger.warning(f"Dificuldade inválida recebida: {request.difficulty!r}")
        raise HTTPException(status_code=400, detail=e.message) from e

    try:
        questions = await acquisition.acquire(difficulty, settings.questions_per_session)
        session = await store.create(difficulty, questions)
    except Exception as e:
        logger.exception(f"Erro ao criar quiz ({difficulty.value})")
        raise HTTPException(status_code=500, detail="Failed to create quiz") from e

    return NewQuizResponse(
        session_id=session.session_id,
        difficulty=session.difficulty,
        questions=[PublicQuestion(question=q.question, options=list(q.options)) for q in session.questions],
    )


@router.post("/{session_id}/answer", response_model=AnswerResponse)
async def submit_answer(
    session_id: str,
    request: AnswerRequest,
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Registra a resposta de uma pergunta.

    - Reenvio antes da conclusão sobrescreve a resposta anterior
    - `answer = -1` registra a pergunta como sem resposta
    """
    try:
        await scoring.record_answer(session_id, request.question_index, request.answer)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    except (AlreadyCompleted, InvalidAnswer) as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except Exception as e:
        logger.exception(f"[Quiz {session_id}] Erro ao registrar resposta")
        raise HTTPException(status_code=500, detail="Failed to submit answer") from e

    return AnswerResponse(success=True)


@router.get("/{session_id}/results", response_model=QuizResultsResponse)
async def get_results(
    session_id: str,
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Calcula o resultado final e finaliza a sessão.

    - Pode ser chamado de novo (mesmo resultado)
    - Revisão por pergunta com gabarito e explicação
    """
    try:
        result = await scoring.compute_results(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    except Exception as e:
        logger.exception(f"[Quiz {session_id}] Erro ao calcular resultado")
        raise HTTPException(status_code=500, detail="Failed to get results") from e

    return QuizResultsResponse(
        score=result["score"],
        correct=result["correct"],
        total=result["total"],
        results=[ReviewEntry(**entry) for entry in result["results"]],
        time_spent=result["time_spent"],
        difficulty=result["difficulty"],
        rank=result["rank"],
        rank_title=result["rank_title"],
        rank_message=result["rank_message"],
    )


@router.get("/{session_id}", response_model=SessionInfoResponse)
async def get_session(
    session_id: str,
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Retorna status da sessão (pergunta atual, total, concluída)."""
    try:
        info = await scoring.session_info(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=e.message) from e

    return SessionInfoResponse(**info)
