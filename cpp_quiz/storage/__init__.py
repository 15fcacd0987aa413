"""Quiz Storage - Sessões em memória."""

from .session_store import SessionStore

__all__ = ["SessionStore"]
