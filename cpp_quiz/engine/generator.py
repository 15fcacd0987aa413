"""Question Generator - Geração de questões via modelo com validação."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from pydantic import ValidationError

from ..config import QuizSettings
from ..exceptions import GenerationFailed
from ..llm.client import TextGenerator
from ..models.enums import QuizDifficulty
from ..models.schemas import QuestionRecord
from ..prompts import build_generation_prompt, make_nonce

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


class GenerationStatus(str, Enum):
    """Resultado do parse da resposta do modelo."""

    OK = "ok"
    PARSE_ERROR = "parse_error"
    SHAPE_ERROR = "shape_error"


@dataclass
class GenerationOutcome:
    """Resultado tagueado: OK(questions) | PARSE_ERROR | SHAPE_ERROR."""

    status: GenerationStatus
    questions: list[QuestionRecord] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status == GenerationStatus.OK


def extract_json_array(raw_text: str) -> str:
    """Remove cercas de código e recorta do primeiro '[' ao último ']'.

    Tolera texto explicativo antes/depois do array.
    """
    text = _CODE_FENCE.sub("", raw_text or "").strip()

    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        text = text[start : end + 1]

    return text


def parse_questions(raw_text: str) -> GenerationOutcome:
    """Converte o texto do modelo em questões validadas.

    Não há aceitação parcial: qualquer elemento inválido rejeita tudo.

    Args:
        raw_text: Texto bruto retornado pelo modelo

    Returns:
        GenerationOutcome com status e questões (se OK)
    """
    candidate = extract_json_array(raw_text)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        return GenerationOutcome(GenerationStatus.PARSE_ERROR, error=str(e))

    if not isinstance(data, list):
        return GenerationOutcome(
            GenerationStatus.SHAPE_ERROR, error=f"expected array, got {type(data).__name__}"
        )
    if not data:
        return GenerationOutcome(GenerationStatus.SHAPE_ERROR, error="empty array")

    questions: list[QuestionRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            return GenerationOutcome(
                GenerationStatus.SHAPE_ERROR, error=f"item {index} is not an object"
            )
        try:
            questions.append(QuestionRecord.model_validate(item))
        except ValidationError as e:
            return GenerationOutcome(
                GenerationStatus.SHAPE_ERROR,
                error=f"item {index}: {e.error_count()} validation error(s)",
            )

    return GenerationOutcome(GenerationStatus.OK, questions=questions)


class QuestionGenerator:
    """Gerador de questões via modelo externo.

    Monta o prompt, chama o modelo com timeout, extrai e valida o array.
    Toda falha (credencial, provider, timeout, parse, formato) vira
    `GenerationFailed`; a causa vai para o log.

    Example:
        >>> generator = QuestionGenerator(client, settings)
        >>> questions = await generator.generate(QuizDifficulty.BASIC, 10)
    """

    def __init__(self, client: TextGenerator, settings: QuizSettings):
        self.client = client
        self.settings = settings

    async def generate(self, difficulty: QuizDifficulty, count: int) -> list[QuestionRecord]:
        """Gera `count` questões (ou menos, se o modelo devolver menos).

        Raises:
            GenerationFailed: Em qualquer falha de geração
        """
        difficulty = QuizDifficulty(difficulty)
        stage = f"[Generator {difficulty.value}]"

        if not self.settings.llm_configured:
            logger.warning(f"{stage} Credencial do modelo ausente ou placeholder")
            raise GenerationFailed("credential")

        prompt = build_generation_prompt(difficulty, count, make_nonce())

        try:
            raw_text = await asyncio.wait_for(
                self.client.generate_text(prompt),
                timeout=self.settings.generation_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning(f"{stage} Timeout após {self.settings.generation_timeout}s")
            raise GenerationFailed("timeout") from e
        except Exception as e:
            logger.warning(f"{stage} Erro do provider: {e}")
            raise GenerationFailed("provider", str(e)) from e

        logger.debug(f"{stage} Resposta: {(raw_text or '')[:200]}...")

        outcome = parse_questions(raw_text)
        if not outcome.ok:
            logger.warning(f"{stage} Resposta rejeitada ({outcome.status.value}): {outcome.error}")
            raise GenerationFailed(outcome.status.value, outcome.error)

        questions = outcome.questions[:count]
        logger.info(f"{stage} {len(questions)} questões geradas pelo modelo")
        return questions
