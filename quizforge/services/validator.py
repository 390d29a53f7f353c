"""
QuizForge — Schema Validator
=============================
The single gate every quiz passes through, whichever provider built it.

Checks run in contract order: topic → difficulty → questions (≥1) →
per question (4 distinct options, correctIndex in range, explanation
≤240 chars, sequential ids). Failures raise SchemaViolation listing the
dotted path of every offending field, e.g. ``questions.2.options``.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from quizforge.core.errors import RequestInvalid, SchemaViolation
from quizforge.schemas.quiz import QuizRequest, QuizResponse

logger = logging.getLogger(__name__)


def _field_paths(exc: ValidationError) -> List[str]:
    paths: List[str] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "$"
        if path not in paths:
            paths.append(path)
    return paths


def _as_plain(data: Any) -> Any:
    # Model instances are dumped so that they are re-checked, not trusted.
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    return data


def validate_quiz(data: Any, *, max_questions: Optional[int] = None) -> QuizResponse:
    """
    Validate an arbitrary value against the quiz contract.

    Returns a new, frozen QuizResponse. The input is never mutated, so
    validating an already-valid quiz again yields an equal quiz.
    Raises SchemaViolation when any invariant is broken, including a
    question count above ``max_questions``.
    """
    try:
        quiz = QuizResponse.model_validate(_as_plain(data))
    except ValidationError as e:
        fields = _field_paths(e)
        logger.debug(f"[SCHEMA] ✗ Quiz rejected: {e}")
        raise SchemaViolation(fields=fields) from e

    if max_questions is not None and len(quiz.questions) > max_questions:
        raise SchemaViolation(
            f"Quiz has {len(quiz.questions)} questions, at most {max_questions} allowed.",
            fields=["questions"],
        )
    return quiz


def validate_request(data: Any) -> QuizRequest:
    """Normalize and bound-check a generation request (trimmed topic, defaults applied)."""
    try:
        return QuizRequest.model_validate(_as_plain(data))
    except ValidationError as e:
        raise RequestInvalid(fields=_field_paths(e)) from e
