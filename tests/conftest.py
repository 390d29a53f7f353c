"""
Shared pytest fixtures for the whole suite (unit/ and api/).
No network access: the remote provider is always driven through mocks.
"""

import os

import pytest

# Force the offline provider and test mode before settings are imported.
os.environ["GROQ_API_KEY"] = ""
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("RATE_LIMIT_ENABLED", "true")


def _question(i: int, correct_index: int = 0) -> dict:
    return {
        "id": f"q{i}",
        "question": f"Sample question number {i}?",
        "options": [f"Option A{i}", f"Option B{i}", f"Option C{i}", f"Option D{i}"],
        "correctIndex": correct_index,
        "explanation": f"Option {'ABCD'[correct_index]}{i} is correct for question {i}.",
    }


@pytest.fixture
def make_quiz():
    """Factory for a valid quiz payload (wire format, camelCase)."""

    def _make(num_questions: int = 3, topic: str = "Zoology", difficulty: str = "mixed") -> dict:
        return {
            "topic": topic,
            "difficulty": difficulty,
            "questions": [_question(i, (i - 1) % 4) for i in range(1, num_questions + 1)],
        }

    return _make


@pytest.fixture
def clear_rate_limiter():
    """Clear rate-limiter history before and after a test."""
    import quizforge.services.rate_limiter as _rl
    _rl._request_history.clear()
    yield
    _rl._request_history.clear()
