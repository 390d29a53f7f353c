import logging
from functools import lru_cache

from quizforge.core.config import Settings, settings as default_settings
from quizforge.core.errors import InternalInvariantViolation, RequestInvalid, SchemaViolation
from quizforge.schemas.quiz import QuizRequest, QuizResponse
from quizforge.services.providers.base import QuizProvider
from quizforge.services.providers.groq_provider import GroqQuizProvider
from quizforge.services.providers.local_provider import LocalQuizProvider
from quizforge.services.validator import validate_quiz, validate_request

logger = logging.getLogger(__name__)


def get_quiz_provider(config: Settings) -> QuizProvider:
    """Groq when a key is configured, otherwise the offline generator."""
    if config.GROQ_API_KEY:
        return GroqQuizProvider.from_settings(config)
    logger.warning("[INIT] ✗ Groq API key missing, using the local quiz provider")
    return LocalQuizProvider()


class QuizService:
    """Single entry point for quiz generation; owns exactly one provider."""

    def __init__(self, provider: QuizProvider):
        self.provider = provider

    @property
    def provider_name(self) -> str:
        return self.provider.name

    async def generate_quiz(self, request: QuizRequest) -> QuizResponse:
        request = validate_request(request)
        logger.info(
            f"[QUIZ] Starting: topic='{request.topic}', {request.num_questions} questions, "
            f"difficulty={request.difficulty.value}, provider={self.provider_name}"
        )
        try:
            quiz = await self.provider.generate_quiz(request)
        except (RequestInvalid, InternalInvariantViolation):
            raise
        except SchemaViolation as e:
            logger.error(f"[QUIZ] ✗ {self.provider_name} failed its own quiz check: {e}")
            raise InternalInvariantViolation(fields=e.fields) from e

        # Outbound contract check, independent of what the provider validated.
        try:
            quiz = validate_quiz(quiz, max_questions=request.num_questions)
        except SchemaViolation as e:
            logger.error(f"[QUIZ] ✗ {self.provider_name} produced an invalid quiz: {e}")
            raise InternalInvariantViolation(fields=e.fields) from e

        logger.info(f"[QUIZ] ✓ Generated {len(quiz.questions)} questions")
        return quiz


@lru_cache
def get_quiz_service() -> QuizService:
    """Process-wide service, resolved once from settings."""
    return QuizService(get_quiz_provider(default_settings))
