"""
QuizForge — Error Taxonomy
===========================
Every failure the generation pipeline can surface. The HTTP layer maps
these to a status code and a `{code, message}` body; `message` is always
safe to show to a user (raw model output only ever goes to the log).

    QuizForgeError
    ├── SchemaViolation            (a value failed the quiz/request contract)
    │   ├── RequestInvalid         (caller's fault, never retried)
    │   └── InternalInvariantViolation  (a provider slipped past its checks)
    └── ProviderError              (the generation backend failed)
        ├── ProviderTransportError
        └── ProviderMalformedOutput
"""

from typing import List, Optional


class QuizForgeError(Exception):
    """Base class for all pipeline errors."""

    code: str = "INTERNAL_ERROR"
    status_code: int = 500
    default_message: str = "Quiz generation failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class SchemaViolation(QuizForgeError):
    """A value does not satisfy the canonical quiz (or request) shape."""

    code = "SCHEMA_VIOLATION"
    status_code = 500
    default_message = "Quiz does not match the required schema."

    def __init__(self, message: Optional[str] = None, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields: List[str] = list(fields or [])

    def __str__(self) -> str:
        if self.fields:
            return f"{self.message} (fields: {', '.join(self.fields)})"
        return self.message


class RequestInvalid(SchemaViolation):
    code = "BAD_REQUEST"
    status_code = 400
    default_message = "Invalid request payload"


class InternalInvariantViolation(SchemaViolation):
    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Provider returned invalid question formatting"


class ProviderError(QuizForgeError):
    code = "PROVIDER_ERROR"
    status_code = 502
    default_message = "The quiz provider failed to generate a quiz."


class ProviderTransportError(ProviderError):
    code = "PROVIDER_UNAVAILABLE"
    default_message = "The quiz provider could not be reached."


class ProviderMalformedOutput(ProviderError):
    code = "PROVIDER_MALFORMED_OUTPUT"
    default_message = "The quiz provider returned an invalid quiz."
