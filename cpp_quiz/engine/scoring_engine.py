"""Quiz Scoring Engine - Registro de respostas, pontuação e ranking."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from ..exceptions import AlreadyCompleted, InvalidAnswer
from ..models.enums import QuizRank
from ..models.schemas import NO_ANSWER, OPTIONS_PER_QUESTION
from ..storage.session_store import SessionStore

logger = logging.getLogger(__name__)


class QuizScoringEngine:
    """Motor de respostas e pontuação das sessões.

    Toda alteração de sessão passa pelo lock do SessionStore, então
    respostas concorrentes na mesma sessão são serializadas
    (última escrita vence por índice).

    Pontuação:
        score = round_half_up(corretas / total * 100)
        Ex: 7/10 -> 70, 2/3 -> 67, 1/3 -> 33

    Faixas de ranking (mesmas da tela de resultado do cliente):
        - 80-100%: Excellent Work!
        - 60-79%: Good Job!
        - <60%: Keep Going!

    Example:
        >>> engine = QuizScoringEngine(store)
        >>> await engine.record_answer(session_id, 0, 2)
        >>> results = await engine.compute_results(session_id)
        >>> results["score"]
        100
    """

    # Faixas de ranking (threshold, rank, title, message)
    RANK_THRESHOLDS = [
        (
            80,
            QuizRank.EXCELLENT,
            "Excellent Work!",
            "Outstanding performance! You really know your C++!",
        ),
        (
            60,
            QuizRank.GOOD,
            "Good Job!",
            "Well done! Keep practicing to improve even more.",
        ),
        (
            0,
            QuizRank.KEEP_GOING,
            "Keep Going!",
            "Practice makes perfect! Don't give up, you're learning!",
        ),
    ]

    def __init__(self, store: SessionStore, clock: Callable[[], float] = time.time):
        self.store = store
        self._clock = clock

    @staticmethod
    def calculate_score(correct: int, total: int) -> int:
        """Percentual com arredondamento half-up, em aritmética inteira.

        Args:
            correct: Respostas corretas
            total: Total de questões

        Returns:
            Score 0-100 (0 se total == 0)
        """
        if total <= 0:
            return 0
        return (correct * 200 + total) // (total * 2)

    def calculate_rank(self, score: int) -> tuple[QuizRank, str, str]:
        """Calcula o ranking baseado no score.

        Returns:
            Tuple de (rank, title, message)
        """
        for threshold, rank, title, message in self.RANK_THRESHOLDS:
            if score >= threshold:
                return rank, title, message

        return self.RANK_THRESHOLDS[-1][1:4]

    async def record_answer(self, session_id: str, question_index: int, answer_index: int) -> None:
        """Registra (ou sobrescreve) a resposta de uma questão.

        Args:
            session_id: ID da sessão
            question_index: Índice da questão (0 a N-1)
            answer_index: Alternativa escolhida (0-3) ou NO_ANSWER (-1)

        Raises:
            SessionNotFound: Sessão desconhecida
            AlreadyCompleted: Sessão já finalizada
            InvalidAnswer: Índices fora do intervalo
        """
        async with self.store.locked(session_id) as session:
            if session.completed:
                logger.warning(f"[Quiz {session_id}] Resposta rejeitada: sessão já finalizada")
                raise AlreadyCompleted(session_id)

            if not 0 <= question_index < session.total_questions:
                raise InvalidAnswer(
                    f"questionIndex must be between 0 and {session.total_questions - 1}"
                )
            if answer_index != NO_ANSWER and not 0 <= answer_index < OPTIONS_PER_QUESTION:
                raise InvalidAnswer(f"answer must be between 0 and {OPTIONS_PER_QUESTION - 1}, or -1")

            session.answers[question_index] = answer_index

        logger.debug(f"[Quiz {session_id}] Resposta {question_index} -> {answer_index}")

    async def compute_results(self, session_id: str) -> dict[str, Any]:
        """Calcula o resultado final e finaliza a sessão.

        Idempotente: chamadas repetidas recalculam a partir dos mesmos
        dados (apenas `time_spent` avança).

        Raises:
            SessionNotFound: Sessão desconhecida
        """
        async with self.store.locked(session_id) as session:
            results = []
            correct_count = 0

            for index, question in enumerate(session.questions):
                user_answer = session.answer_for(index)
                answered = user_answer != NO_ANSWER
                is_correct = answered and user_answer == question.correct_index
                if is_correct:
                    correct_count += 1

                results.append(
                    {
                        "question": question.question,
                        "user_answer": user_answer,
                        "answered": answered,
                        "correct_answer": question.correct_index,
                        "is_correct": is_correct,
                        "explanation": question.explanation,
                    }
                )

            total = session.total_questions
            score = self.calculate_score(correct_count, total)
            rank, rank_title, rank_message = self.calculate_rank(score)
            time_spent = max(0, int((self._clock() - session.start_time) * 1000))

            if not session.completed:
                logger.info(f"[Quiz {session_id}] Finalizado: {correct_count}/{total} ({score}%)")
            session.mark_complete()

        return {
            "score": score,
            "correct": correct_count,
            "total": total,
            "results": results,
            "time_spent": time_spent,
            "difficulty": session.difficulty,
            "rank": rank,
            "rank_title": rank_title,
            "rank_message": rank_message,
        }

    async def session_info(self, session_id: str) -> dict[str, Any]:
        """Status resumido da sessão.

        Raises:
            SessionNotFound: Sessão desconhecida
        """
        session = await self.store.get(session_id)
        return {
            "id": session.session_id,
            "difficulty": session.difficulty,
            "current_question": session.current_question,
            "total_questions": session.total_questions,
            "completed": session.completed,
        }
