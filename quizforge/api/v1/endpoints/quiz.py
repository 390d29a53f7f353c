import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quizforge.core.config import settings
from quizforge.schemas.errors import ErrorResponse
from quizforge.schemas.quiz import QuizRequest, QuizResponse
from quizforge.services.quiz_service import QuizService, get_quiz_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-quiz",
    response_model=QuizResponse,
    tags=["Quiz"],
    summary="Generate a multiple-choice quiz for a topic",
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def create_quiz(request: QuizRequest, service: QuizService = Depends(get_quiz_service)):
    """
    Generate a quiz for ``topic``.
    Pipeline errors propagate to the app-level handlers, which render
    the `{"error": {"code", "message"}}` envelope.
    """
    try:
        return await asyncio.wait_for(
            service.generate_quiz(request),
            timeout=settings.AI_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        logger.error(f"[QUIZ] ✗ Timed out after {settings.AI_TIMEOUT_SECONDS}s for '{request.topic}'")
        body = ErrorResponse(
            error={
                "code": "PROVIDER_TIMEOUT",
                "message": f"Quiz generation timed out after {settings.AI_TIMEOUT_SECONDS}s.",
            }
        )
        return JSONResponse(status_code=504, content=body.model_dump())
