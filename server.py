"""
C++ Quiz Server - Powered by Claude Agent SDK

FastAPI server with:
- Quiz sessions in memory (lock per session, TTL eviction)
- Questions generated by Claude with fallback question bank
- CORS and static UI serving
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cpp_quiz.config import QuizSettings
from cpp_quiz.engine import (
    QuestionAcquisitionService,
    QuestionGenerator,
    QuestionPoolProvider,
    QuizScoringEngine,
)
from cpp_quiz.llm import LLMClientFactory, TextGenerator
from cpp_quiz.router import router as quiz_router
from cpp_quiz.storage import SessionStore

logger = logging.getLogger("server")

PUBLIC_DIR = Path(__file__).parent / "public"


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle (session eviction task)."""
    settings: QuizSettings = app.state.settings
    store: SessionStore = app.state.session_store

    eviction_task = asyncio.create_task(store.run_eviction(settings.eviction_interval))
    logger.info(
        f"C++ Quiz Server iniciado (modelo {'configurado' if settings.llm_configured else 'ausente, usando fallback'})"
    )
    yield
    # Cleanup
    eviction_task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await eviction_task
    logger.info("C++ Quiz Server finalizado")


def create_app(
    settings: QuizSettings | None = None,
    text_client: TextGenerator | None = None,
) -> FastAPI:
    """Monta o app com store e engines injetados em `app.state`.

    Args:
        settings: Configuração (default: variáveis de ambiente)
        text_client: Cliente do modelo (default: ClaudeTextClient)

    Returns:
        FastAPI configurado
    """
    settings = settings or QuizSettings.from_env()
    text_client = text_client or LLMClientFactory.create_text_client(settings)

    app = FastAPI(
        title="C++ Quiz",
        description="Timed C++ multiple-choice quizzes generated by Claude",
        version="1.0.0",
        lifespan=lifespan,
    )

    store = SessionStore(
        ttl_seconds=settings.session_ttl_seconds,
        max_sessions=settings.max_sessions,
    )
    app.state.settings = settings
    app.state.session_store = store
    app.state.acquisition = QuestionAcquisitionService(
        generator=QuestionGenerator(text_client, settings),
        pool_provider=QuestionPoolProvider(),
        fallback_marker=settings.fallback_marker,
    )
    app.state.scoring = QuizScoringEngine(store)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(quiz_router)

    @app.get("/health")
    async def health_check():
        """Detailed health check."""
        return {
            "status": "healthy",
            "llm_configured": settings.llm_configured,
            "llm_model": settings.llm_model,
            "store": store.stats(),
        }

    # UI estática por último: rotas da API têm precedência
    if PUBLIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")

    return app


def configure_logging(level: str) -> None:
    """Configura o logging raiz a partir de LOG_LEVEL (inválido vira INFO)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


_settings = QuizSettings.from_env()
configure_logging(_settings.log_level)
app = create_app(_settings)


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3000)
