"""Quiz Exceptions - Taxonomia de erros do motor de sessões."""


class QuizError(Exception):
    """Erro base do quiz. `message` é seguro para expor ao cliente."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDifficulty(QuizError):
    """Dificuldade fora de basic/moderate/harder."""

    def __init__(self, value: object):
        super().__init__("Invalid difficulty level")
        self.value = value


class SessionNotFound(QuizError):
    """Sessão desconhecida ou já removida pela política de expiração."""

    def __init__(self, session_id: str):
        super().__init__("Quiz session not found")
        self.session_id = session_id


class AlreadyCompleted(QuizError):
    """Tentativa de alterar uma sessão finalizada."""

    def __init__(self, session_id: str):
        super().__init__("Quiz already completed")
        self.session_id = session_id


class InvalidAnswer(QuizError):
    """Índice de pergunta ou de alternativa fora do intervalo da sessão."""


class GenerationFailed(QuizError):
    """Falha do gerador via modelo.

    Uso interno: sempre absorvida pelo fallback, nunca chega ao cliente.
    `reason` identifica a etapa (credential, provider, timeout, parse, shape).
    """

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"Question generation failed ({reason})")
        self.reason = reason
        self.detail = detail
