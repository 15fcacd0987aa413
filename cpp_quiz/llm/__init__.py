"""Quiz LLM - Cliente de texto do modelo."""

from .client import ClaudeTextClient, LLMClientFactory, TextGenerator

__all__ = ["ClaudeTextClient", "LLMClientFactory", "TextGenerator"]
