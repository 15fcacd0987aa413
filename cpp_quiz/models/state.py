"""Quiz State - Estado de uma sessão de quiz."""

from dataclasses import dataclass, field

from .enums import QuizDifficulty
from .schemas import NO_ANSWER, QuestionRecord


@dataclass
class QuizSession:
    """Estado completo de uma tentativa de quiz.

    Criada pelo SessionStore e alterada somente através dele (lock por
    sessão). `questions`, `difficulty` e `start_time` não mudam depois
    da criação; `completed` só vai de False para True.

    Attributes:
        session_id: ID opaco da sessão
        difficulty: Nível escolhido na criação
        questions: Perguntas da sessão (tamanho fixo N)
        start_time: Timestamp (segundos) da criação
        answers: Índice da questão -> alternativa enviada (ou NO_ANSWER)
        completed: Se o resultado já foi calculado
    """

    session_id: str
    difficulty: QuizDifficulty
    questions: tuple[QuestionRecord, ...]
    start_time: float
    answers: dict[int, int] = field(default_factory=dict)
    completed: bool = False

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> int:
        """Índice seguinte à maior questão respondida (0 se nenhuma)."""
        if not self.answers:
            return 0
        return min(max(self.answers) + 1, self.total_questions)

    def answer_for(self, index: int) -> int:
        """Resposta registrada para a questão, ou NO_ANSWER."""
        return self.answers.get(index, NO_ANSWER)

    def mark_complete(self) -> None:
        self.completed = True
