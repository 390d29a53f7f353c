"""
QuizForge — Quiz Generation API
================================
FastAPI entry point.
  • POST /api/v1/generate-quiz — topic → validated multiple-choice quiz
  • Global exception handlers — every error is a `{code, message}` envelope
  • Per-client rate limiting on generation
  • Caller-level timeout (configurable, default 2 min)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizforge.core.config import settings
from quizforge.core.errors import QuizForgeError
from quizforge.api.v1.endpoints.quiz import router as quiz_router
from quizforge.services.quiz_service import get_quiz_service
from quizforge.services.rate_limiter import rate_limit_middleware

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)

# ── App ──────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="QuizForge — Quiz Generation API",
    description=(
        "Generates single-answer multiple-choice quizzes for a topic.\n"
        "Backed by Groq when GROQ_API_KEY is set, otherwise by a deterministic local generator."
    ),
    version="1.0.0",
)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"code": code, "message": message}})


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected payload on {request.url.path}: {exc.errors()}")
    return _error(400, "BAD_REQUEST", "Invalid request payload")


@app.exception_handler(QuizForgeError)
async def quiz_error_handler(request: Request, exc: QuizForgeError):
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return _error(exc.status_code, exc.code, exc.message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all: every unhandled exception returns a clean JSON envelope."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return _error(500, "INTERNAL_ERROR", "Something went wrong")


# ── Middleware ───────────────────────────────────────────────────────────────
app.middleware("http")(rate_limit_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == "development" else settings.CORS_ORIGINS,
    allow_credentials=settings.ENVIRONMENT != "development",
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routes ───────────────────────────────────────────────────────────────────
app.include_router(quiz_router, prefix="/api/v1")


@app.get("/health", tags=["System"])
async def health_check():
    return {"ok": True, "provider": get_quiz_service().provider_name}
