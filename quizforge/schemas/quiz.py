from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing import List
from enum import Enum


MIN_TOPIC_LENGTH = 2
MAX_TOPIC_LENGTH = 80
MIN_QUESTIONS = 1
MAX_QUESTIONS = 20
DEFAULT_QUESTIONS = 10
OPTIONS_PER_QUESTION = 4
MAX_EXPLANATION_LENGTH = 240


class Difficulty(str, Enum):
    easy = "easy"
    mixed = "mixed"
    hard = "hard"


# ── Request ──────────────────────────────────────────────────────────────────

class QuizRequest(BaseModel):
    """Request body for quiz generation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    topic: str = Field(
        ...,
        min_length=MIN_TOPIC_LENGTH,
        max_length=MAX_TOPIC_LENGTH,
        description="Subject of the quiz",
    )
    num_questions: StrictInt = Field(
        default=DEFAULT_QUESTIONS,
        ge=MIN_QUESTIONS,
        le=MAX_QUESTIONS,
        alias="numQuestions",
        description="Number of questions to generate",
    )
    difficulty: Difficulty = Field(default=Difficulty.mixed, description="Desired difficulty level")

    @field_validator("topic", mode="before")
    @classmethod
    def strip_topic(cls, v):
        # Length bounds apply to the trimmed topic.
        return v.strip() if isinstance(v, str) else v


# ── Response ─────────────────────────────────────────────────────────────────

class QuizQuestion(BaseModel):
    """A single-answer question with exactly four options."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION)
    correct_index: StrictInt = Field(..., ge=0, le=OPTIONS_PER_QUESTION - 1, alias="correctIndex")
    explanation: str = Field(..., min_length=1, max_length=MAX_EXPLANATION_LENGTH)

    @field_validator("question", "explanation")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("options")
    @classmethod
    def distinct_options(cls, v: List[str]) -> List[str]:
        if any(not option.strip() for option in v):
            raise ValueError("options must be non-empty strings")
        normalized = {option.strip().casefold() for option in v}
        if len(normalized) != len(v):
            raise ValueError("options must be distinct")
        return v


class QuizResponse(BaseModel):
    """Full quiz returned to the client."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    topic: str = Field(..., min_length=1)
    difficulty: Difficulty
    questions: List[QuizQuestion] = Field(..., min_length=1)

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("questions")
    @classmethod
    def sequential_ids(cls, v: List[QuizQuestion]) -> List[QuizQuestion]:
        expected = [f"q{i}" for i in range(1, len(v) + 1)]
        actual = [q.id for q in v]
        if actual != expected:
            raise ValueError(f"question ids must be sequential q1..q{len(expected)}")
        return v
