# =============================================================================
# CONFIGURAÇÃO DO QUIZ - Variáveis de ambiente
# =============================================================================
# Carrega .env (python-dotenv) e expõe QuizSettings para server e engines
# =============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Valores que indicam chave não configurada (copiados de .env.example)
PLACEHOLDER_KEYS = frozenset(
    {
        "",
        "your_api_key_here",
        "your-api-key",
        "your_anthropic_api_key",
        "changeme",
        "sk-...",
    }
)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Valor inválido para {name}: {raw!r}, usando {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Valor inválido para {name}: {raw!r}, usando {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class QuizSettings:
    """Configuração do servidor de quiz.

    Attributes:
        anthropic_api_key: Credencial do modelo (vazia/placeholder desativa o modelo)
        llm_model: Alias do modelo Claude usado pelo Agent SDK
        generation_timeout: Limite em segundos para a chamada ao modelo
        questions_per_session: Número de perguntas por sessão (N)
        session_ttl_seconds: Idade máxima de uma sessão antes da remoção
        max_sessions: Limite de sessões em memória
        eviction_interval: Intervalo entre varreduras de expiração
        fallback_marker: Se anexa marcador de horário nas perguntas do fallback
        cors_origins: Origens liberadas no CORS
        log_level: Nível do logging
    """

    anthropic_api_key: str = ""
    llm_model: str = "haiku"
    generation_timeout: float = 20.0
    questions_per_session: int = 10
    session_ttl_seconds: float = 7200.0
    max_sessions: int = 1000
    eviction_interval: float = 300.0
    fallback_marker: bool = True
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def llm_configured(self) -> bool:
        """True se existe credencial real para o modelo."""
        return self.anthropic_api_key.strip().lower() not in PLACEHOLDER_KEYS

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> QuizSettings:
        """Cria settings a partir das variáveis de ambiente."""
        if load_env_file:
            load_dotenv()

        origins = os.getenv("QUIZ_CORS_ORIGINS", "*")

        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
            llm_model=os.getenv("QUIZ_LLM_MODEL", "haiku"),
            generation_timeout=_env_float("QUIZ_GENERATION_TIMEOUT", 20.0),
            questions_per_session=max(1, _env_int("QUIZ_QUESTIONS_PER_SESSION", 10)),
            session_ttl_seconds=_env_float("QUIZ_SESSION_TTL", 7200.0),
            max_sessions=max(1, _env_int("QUIZ_MAX_SESSIONS", 1000)),
            eviction_interval=_env_float("QUIZ_EVICTION_INTERVAL", 300.0),
            fallback_marker=_env_bool("QUIZ_FALLBACK_MARKER", True),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
