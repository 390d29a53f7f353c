"""
QuizForge — Remote Provider (Groq)
===================================
Generates quizzes through Groq's OpenAI-compatible chat completions API.

Two independent, single-shot retry policies wrap the network call:
  - model fallback:   the endpoint rejects the model / JSON mode
                      → repeat once with the fallback model
  - corrective retry: the reply is not a valid quiz
                      → resend with a "JSON only" correction, once
At most three calls per quiz: primary, model fallback, corrective retry.
"""

import json
import logging
from typing import Dict, List, Optional, Sequence, Tuple

import groq
from groq import AsyncGroq

from quizforge.core.errors import ProviderMalformedOutput, ProviderTransportError, SchemaViolation
from quizforge.schemas.quiz import QuizRequest, QuizResponse
from quizforge.services.json_repair import parse_model_output
from quizforge.services.prompt_builder import build_correction_message, build_quiz_prompt, temperature_for
from quizforge.services.validator import validate_quiz

logger = logging.getLogger(__name__)

Message = Dict[str, str]

MAX_TOKENS = 6000
_MALFORMED = (json.JSONDecodeError, SchemaViolation)
_UNSUPPORTED_HINTS = ("model", "response_format", "json_object", "json mode")
_UNSUPPORTED_CODES = {"model_not_found", "model_decommissioned", "model_not_supported"}


def _is_unsupported_model_error(error: groq.APIStatusError) -> bool:
    """True when the endpoint refused the requested model or response mode."""
    if error.status_code not in (400, 404):
        return False
    body = error.body if isinstance(error.body, dict) else {}
    # The SDK hands over either the whole payload or its "error" member.
    detail = body["error"] if isinstance(body.get("error"), dict) else body
    if detail.get("code") in _UNSUPPORTED_CODES:
        return True
    message = f"{error.message} {detail.get('message', '')}".lower()
    return any(hint in message for hint in _UNSUPPORTED_HINTS)


def _parse_quiz(raw: str) -> QuizResponse:
    return validate_quiz(parse_model_output(raw))


class GroqQuizProvider:
    name = "groq"

    def __init__(self, client: AsyncGroq, model: str, fallback_model: Optional[str] = None):
        self.client = client
        self.model = model
        self.fallback_model = fallback_model if fallback_model and fallback_model != model else None

    @classmethod
    def from_settings(cls, settings) -> "GroqQuizProvider":
        client = AsyncGroq(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            timeout=settings.GROQ_REQUEST_TIMEOUT_SECONDS,
            max_retries=0,  # retries are owned by this provider, not the SDK
        )
        logger.info(f"[INIT] ✓ Groq client initialized ({settings.GROQ_MODEL})")
        return cls(client, settings.GROQ_MODEL, settings.GROQ_FALLBACK_MODEL)

    # ── Transport ────────────────────────────────────────────────────────────

    async def _call(self, model: str, messages: List[Message], temperature: float) -> str:
        logger.info(f"[GROQ] Calling {model}...")
        completion = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            response_format={"type": "json_object"},
            max_tokens=MAX_TOKENS,
        )
        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""

    async def _complete(
        self,
        messages: List[Message],
        temperature: float,
        models: Sequence[str],
    ) -> Tuple[str, str]:
        """
        Model-fallback policy. Tries ``models`` in order, moving on only when
        the endpoint rejects the model or JSON mode. Returns (text, model used).
        """
        last_error: Optional[Exception] = None
        for position, model in enumerate(models):
            try:
                text = await self._call(model, messages, temperature)
                logger.info(f"[GROQ] ✓ {model} responded ({len(text)} chars)")
                return text, model
            except groq.APIStatusError as e:
                last_error = e
                has_next = position + 1 < len(models)
                if has_next and _is_unsupported_model_error(e):
                    logger.warning(
                        f"[GROQ] {model} rejected (HTTP {e.status_code}): {str(e.message)[:200]}. "
                        f"Retrying with {models[position + 1]}..."
                    )
                    continue
                logger.error(f"[GROQ] ✗ HTTP {e.status_code} from {model}: {str(e.message)[:200]}")
                break
            except groq.APIError as e:
                last_error = e
                logger.error(f"[GROQ] ✗ Transport failure calling {model}: {e}")
                break
        raise ProviderTransportError() from last_error

    # ── Generation ───────────────────────────────────────────────────────────

    async def _generate_validated(self, messages: List[Message], temperature: float) -> QuizResponse:
        """Corrective-retry policy: one extra attempt when the reply is not a valid quiz."""
        models = [self.model] + ([self.fallback_model] if self.fallback_model else [])
        raw, model_used = await self._complete(messages, temperature, models)
        try:
            return _parse_quiz(raw)
        except _MALFORMED as e:
            logger.warning(f"[GROQ] Invalid quiz output ({type(e).__name__}: {str(e)[:200]}). Sending correction...")

        corrective = messages + [
            {"role": "assistant", "content": raw[:4000]},
            {"role": "user", "content": build_correction_message()},
        ]
        raw, _ = await self._complete(corrective, temperature, [model_used])
        try:
            return _parse_quiz(raw)
        except _MALFORMED as e:
            logger.error(f"[GROQ] ✗ Output still invalid after correction. Raw (first 500 chars): {raw[:500]}")
            raise ProviderMalformedOutput() from e

    async def generate_quiz(self, request: QuizRequest) -> QuizResponse:
        prompt = build_quiz_prompt(request)
        messages = [
            {"role": "system", "content": prompt.system},
            {"role": "user", "content": prompt.user},
        ]
        quiz = await self._generate_validated(messages, temperature_for(request.difficulty))

        if quiz.topic != request.topic or quiz.difficulty != request.difficulty:
            logger.info(
                f"[GROQ] Model echoed topic='{quiz.topic}', difficulty={quiz.difficulty.value}; "
                f"using the requested values"
            )
        quiz = quiz.model_copy(update={"topic": request.topic, "difficulty": request.difficulty})

        if len(quiz.questions) > request.num_questions:
            logger.info(f"[GROQ] Truncating {len(quiz.questions)} questions to {request.num_questions}")
            quiz = quiz.model_copy(update={"questions": quiz.questions[:request.num_questions]})
        elif len(quiz.questions) < request.num_questions:
            logger.warning(f"[GROQ] Model returned {len(quiz.questions)}/{request.num_questions} questions")
        return quiz
