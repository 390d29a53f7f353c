from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    ENVIRONMENT: str = "development"

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "test", "production"}
        if v.lower() not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of {allowed}, got '{v}'")
        return v.lower()

    # ── Remote provider (Groq, OpenAI-compatible chat completions) ───────────
    # No key means the deterministic local provider is used.
    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    GROQ_FALLBACK_MODEL: str = "llama-3.1-8b-instant"
    GROQ_BASE_URL: Optional[str] = None
    GROQ_REQUEST_TIMEOUT_SECONDS: float = 60.0

    # ── Limits ────────────────────────────────────────────────────────────────
    AI_TIMEOUT_SECONDS: int = 120  # caller-level timeout for one quiz
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_MAX_REQUESTS: int = 60
    RATE_LIMIT_WINDOW_SECONDS: int = 600  # 10 minutes
    # Set when a single reverse proxy sits in front of the API; its appended
    # X-Forwarded-For hop then identifies the client.
    TRUSTED_PROXY: bool = False

    # ── Core ──────────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}, got '{v}'")
        return v.upper()

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:3000",
    ]

    @model_validator(mode="after")
    def require_key_in_production(self) -> "Settings":
        if self.ENVIRONMENT == "production" and not self.GROQ_API_KEY:
            raise ValueError("GROQ_API_KEY is required in production")
        return self

    @property
    def provider_name(self) -> str:
        return "groq" if self.GROQ_API_KEY else "local"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
