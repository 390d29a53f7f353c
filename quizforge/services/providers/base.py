from typing import Protocol, runtime_checkable

from quizforge.schemas.quiz import QuizRequest, QuizResponse


@runtime_checkable
class QuizProvider(Protocol):
    """A quiz generation strategy. Implementations must return validated quizzes."""

    name: str

    async def generate_quiz(self, request: QuizRequest) -> QuizResponse:
        ...
