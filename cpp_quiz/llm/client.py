"""LLM Client - Cliente de texto sobre o Claude Agent SDK."""

from __future__ import annotations

import logging
from typing import Protocol

from claude_agent_sdk import ClaudeAgentOptions
from claude_agent_sdk import query as sdk_query

from ..config import QuizSettings
from ..prompts import QUIZ_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Capacidade mínima consumida pelo gerador: prompt -> texto bruto."""

    async def generate_text(self, prompt: str) -> str: ...


class ClaudeTextClient:
    """Completion de texto via `claude_agent_sdk.query`.

    Uma única volta, sem ferramentas: o modelo só precisa devolver texto.

    Example:
        >>> client = ClaudeTextClient(model="haiku")
        >>> raw = await client.generate_text("Generate 10 questions...")
    """

    def __init__(self, model: str = "haiku", system_prompt: str | None = None):
        self.model = model
        self.system_prompt = system_prompt or QUIZ_SYSTEM_PROMPT

    def _options(self) -> ClaudeAgentOptions:
        return ClaudeAgentOptions(
            model=self.model,
            system_prompt=self.system_prompt,
            max_turns=1,
            allowed_tools=[],
        )

    async def generate_text(self, prompt: str) -> str:
        """Envia o prompt e concatena os blocos de texto da resposta."""
        chunks: list[str] = []

        async for message in sdk_query(prompt=prompt, options=self._options()):
            if hasattr(message, "content") and isinstance(message.content, list):
                for block in message.content:
                    if hasattr(block, "text"):
                        chunks.append(block.text)

        text = "".join(chunks)
        logger.debug(f"Resposta do modelo recebida ({len(text)} chars)")
        return text


class LLMClientFactory:
    """Factory para o cliente de texto usado pelo gerador de questões."""

    @staticmethod
    def create_text_client(settings: QuizSettings) -> ClaudeTextClient:
        """Cria ClaudeTextClient a partir das configurações.

        Args:
            settings: Configuração carregada do ambiente

        Returns:
            ClaudeTextClient configurado
        """
        return ClaudeTextClient(model=settings.llm_model, system_prompt=QUIZ_SYSTEM_PROMPT)
