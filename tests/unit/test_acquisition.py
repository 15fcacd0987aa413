# =============================================================================
# TESTES - Question Acquisition Service
# =============================================================================
# Modelo primeiro, fallback depois: acquire nunca falha
# =============================================================================

import random
import re
from unittest.mock import AsyncMock, MagicMock

import pytest

MARKER = re.compile(r" \[\d{2}:\d{2}:\d{2}\]$")


def _strip_marker(text: str) -> str:
    return MARKER.sub("", text)


class TestAcquireWithModel:
    """Testes com gerador funcionando."""

    @pytest.mark.asyncio
    async def test_returns_generated_questions(self, mock_text_client, quiz_settings):
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.generator import QuestionGenerator

        service = QuestionAcquisitionService(QuestionGenerator(mock_text_client, quiz_settings))

        questions = await service.acquire("basic", 10)

        assert len(questions) == 10
        # Questões do modelo não recebem marcador
        assert questions[0].question == "What does snippet 0 print?"


class TestAcquireFallback:
    """Testes com gerador falhando."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("difficulty", ["basic", "moderate", "harder"])
    @pytest.mark.parametrize("count", [1, 5, 10, 50])
    async def test_never_fails_and_respects_count(self, failing_generator, difficulty, count):
        """Para toda dificuldade e count >= 1: len <= count, formato válido."""
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.pool_provider import QuestionPoolProvider

        service = QuestionAcquisitionService(failing_generator)
        pool_size = len(QuestionPoolProvider().get_pool(difficulty))

        questions = await service.acquire(difficulty, count)

        assert len(questions) == min(count, pool_size)
        for q in questions:
            assert len(set(q.options)) == 4
            assert 0 <= q.correct_index <= 3

    @pytest.mark.asyncio
    async def test_returns_pool_records(self, failing_generator):
        """Fallback devolve exatamente registros do banco (sem repetição)."""
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.pool_provider import QuestionPoolProvider

        service = QuestionAcquisitionService(failing_generator)
        pool = {
            (q.question, tuple(q.options), q.correct_index)
            for q in QuestionPoolProvider().get_pool("moderate")
        }

        questions = await service.acquire("moderate", 10)
        picked = [(_strip_marker(q.question), tuple(q.options), q.correct_index) for q in questions]

        assert len(set(picked)) == len(picked)
        assert set(picked) <= pool

    @pytest.mark.asyncio
    async def test_marker_appended(self, failing_generator):
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService

        service = QuestionAcquisitionService(failing_generator, fallback_marker=True)

        questions = await service.acquire("basic", 3)

        assert all(MARKER.search(q.question) for q in questions)

    @pytest.mark.asyncio
    async def test_marker_disabled(self, failing_generator):
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.pool_provider import QuestionPoolProvider

        service = QuestionAcquisitionService(failing_generator, fallback_marker=False)
        pool_texts = {q.question for q in QuestionPoolProvider().get_pool("basic")}

        questions = await service.acquire("basic", 3)

        assert all(q.question in pool_texts for q in questions)

    @pytest.mark.asyncio
    async def test_pool_not_corrupted(self, failing_generator):
        """Cópias: alterar a sessão não altera o banco canônico."""
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.pool_provider import QuestionPoolProvider

        pool = QuestionPoolProvider().get_pool("harder")
        before = [q.model_dump() for q in pool]

        service = QuestionAcquisitionService(failing_generator)
        questions = await service.acquire("harder", 10)
        for q in questions:
            q.options.reverse()

        assert [q.model_dump() for q in pool] == before

    @pytest.mark.asyncio
    async def test_shuffle_varies(self, failing_generator):
        """Ordem muda entre chamadas (RNG sem seed fixa)."""
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService

        service = QuestionAcquisitionService(failing_generator, fallback_marker=False)

        orders = set()
        for _ in range(10):
            questions = await service.acquire("basic", 10)
            orders.add(tuple(q.question for q in questions))

        assert len(orders) > 1

    @pytest.mark.asyncio
    async def test_seeded_rng_is_injectable(self, failing_generator):
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService

        first = QuestionAcquisitionService(failing_generator, fallback_marker=False, rng=random.Random(7))
        second = QuestionAcquisitionService(failing_generator, fallback_marker=False, rng=random.Random(7))

        a = await first.acquire("basic", 5)
        b = await second.acquire("basic", 5)

        assert [q.question for q in a] == [q.question for q in b]

    @pytest.mark.asyncio
    async def test_unexpected_generator_error(self):
        """Erro inesperado do gerador também cai no fallback."""
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService

        generator = MagicMock()
        generator.generate = AsyncMock(side_effect=KeyError("boom"))
        service = QuestionAcquisitionService(generator)

        questions = await service.acquire("basic", 10)

        assert len(questions) == 10

    @pytest.mark.asyncio
    async def test_without_generator(self):
        from cpp_quiz.engine.acquisition import QuestionAcquisitionService

        service = QuestionAcquisitionService(None)

        assert len(await service.acquire("harder", 4)) == 4

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, quiz_settings):
        """Provider travado: fallback imediato após o timeout."""
        import asyncio

        from cpp_quiz.engine.acquisition import QuestionAcquisitionService
        from cpp_quiz.engine.generator import QuestionGenerator

        async def hang(prompt):
            await asyncio.sleep(10)

        client = MagicMock()
        client.generate_text = hang
        quiz_settings.generation_timeout = 0.05
        service = QuestionAcquisitionService(QuestionGenerator(client, quiz_settings))

        questions = await asyncio.wait_for(service.acquire("moderate", 10), timeout=2)

        assert len(questions) == 10
