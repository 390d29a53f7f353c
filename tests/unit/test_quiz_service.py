"""
Unit tests for quizforge/services/quiz_service.py
Tests: provider selection from settings, request validation before any
provider call, outbound re-validation, error propagation.
"""

from unittest.mock import AsyncMock

import pytest

from quizforge.core.config import Settings
from quizforge.core.errors import (
    InternalInvariantViolation,
    ProviderMalformedOutput,
    ProviderError,
    RequestInvalid,
    SchemaViolation,
)
from quizforge.schemas.quiz import Difficulty, QuizRequest
from quizforge.services.providers.base import QuizProvider
from quizforge.services.providers.groq_provider import GroqQuizProvider
from quizforge.services.providers.local_provider import LocalQuizProvider
from quizforge.services.quiz_service import QuizService, get_quiz_provider, get_quiz_service


class _StubProvider:
    name = "stub"

    def __init__(self, result=None, error=None):
        self.generate_quiz = AsyncMock(return_value=result, side_effect=error)


def _request(num_questions: int = 3) -> QuizRequest:
    return QuizRequest.model_validate({"topic": "Zoology", "numQuestions": num_questions})


class TestProviderSelection:

    def test_local_without_key(self):
        assert isinstance(get_quiz_provider(Settings(GROQ_API_KEY=None)), LocalQuizProvider)

    def test_local_with_empty_key(self):
        assert isinstance(get_quiz_provider(Settings(GROQ_API_KEY="")), LocalQuizProvider)

    def test_groq_with_key(self):
        assert isinstance(get_quiz_provider(Settings(GROQ_API_KEY="gsk_test")), GroqQuizProvider)

    def test_providers_satisfy_protocol(self):
        assert isinstance(LocalQuizProvider(), QuizProvider)
        assert isinstance(get_quiz_provider(Settings(GROQ_API_KEY="gsk_test")), QuizProvider)

    def test_service_is_resolved_once(self):
        assert get_quiz_service() is get_quiz_service()
        assert get_quiz_service().provider_name == "local"


class TestGenerateQuiz:

    @pytest.mark.asyncio
    async def test_end_to_end_with_local_provider(self):
        service = QuizService(LocalQuizProvider())
        quiz = await service.generate_quiz(
            QuizRequest.model_validate({"topic": "frontend", "numQuestions": 5, "difficulty": "easy"})
        )
        assert quiz.topic == "frontend"
        assert quiz.difficulty == "easy"
        assert len(quiz.questions) == 5
        assert all(len(q.options) == 4 and 0 <= q.correct_index <= 3 for q in quiz.questions)

    @pytest.mark.asyncio
    async def test_passes_through_valid_quiz(self, make_quiz):
        provider = _StubProvider(result=make_quiz(3))
        quiz = await QuizService(provider).generate_quiz(_request(3))
        assert len(quiz.questions) == 3
        provider.generate_quiz.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_request_never_reaches_provider(self):
        provider = _StubProvider()
        bad = QuizRequest.model_construct(topic="a", num_questions=3, difficulty=Difficulty.mixed)
        with pytest.raises(RequestInvalid):
            await QuizService(provider).generate_quiz(bad)
        provider.generate_quiz.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_too_many_questions_is_internal_violation(self, make_quiz):
        provider = _StubProvider(result=make_quiz(4))
        with pytest.raises(InternalInvariantViolation) as exc_info:
            await QuizService(provider).generate_quiz(_request(3))
        assert exc_info.value.fields == ["questions"]

    @pytest.mark.asyncio
    async def test_malformed_provider_quiz_is_internal_violation(self, make_quiz):
        payload = make_quiz(2)
        payload["questions"][1]["correctIndex"] = 7
        provider = _StubProvider(result=payload)
        with pytest.raises(InternalInvariantViolation) as exc_info:
            await QuizService(provider).generate_quiz(_request(2))
        assert isinstance(exc_info.value, SchemaViolation)
        assert exc_info.value.fields == ["questions.1.correctIndex"]

    @pytest.mark.asyncio
    async def test_provider_errors_propagate_unchanged(self):
        provider = _StubProvider(error=ProviderMalformedOutput())
        with pytest.raises(ProviderMalformedOutput) as exc_info:
            await QuizService(provider).generate_quiz(_request())
        assert isinstance(exc_info.value, ProviderError)
        assert not isinstance(exc_info.value, SchemaViolation)
        provider.generate_quiz.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_schema_violation_inside_provider_is_internal_violation(self):
        provider = _StubProvider(error=SchemaViolation(fields=["questions.0.options"]))
        with pytest.raises(InternalInvariantViolation) as exc_info:
            await QuizService(provider).generate_quiz(_request())
        assert exc_info.value.fields == ["questions.0.options"]
        assert exc_info.value.status_code == 500
        assert exc_info.value.code == "INTERNAL_ERROR"

    @pytest.mark.asyncio
    async def test_request_invalid_from_provider_propagates_unchanged(self):
        error = RequestInvalid(fields=["topic"])
        provider = _StubProvider(error=error)
        with pytest.raises(RequestInvalid) as exc_info:
            await QuizService(provider).generate_quiz(_request())
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_internal_violation_from_provider_is_not_rewrapped(self):
        error = InternalInvariantViolation(fields=["questions"])
        provider = _StubProvider(error=error)
        with pytest.raises(InternalInvariantViolation) as exc_info:
            await QuizService(provider).generate_quiz(_request())
        assert exc_info.value is error
