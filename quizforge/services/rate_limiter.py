"""Rate limiting middleware for the generation endpoint.

Per-client sliding window kept in memory: at most RATE_LIMIT_MAX_REQUESTS
quiz generations per RATE_LIMIT_WINDOW_SECONDS for each client IP.
"""

from __future__ import annotations

import asyncio
import time
import logging
from collections import defaultdict
from typing import Dict, List

from fastapi import Request
from fastapi.responses import JSONResponse

from quizforge.core.config import settings

logger = logging.getLogger(__name__)

RATE_LIMITED_PATHS = ("/generate-quiz",)

# Format: {client_key: [timestamp, ...]}
_request_history: Dict[str, List[float]] = defaultdict(list)
_lock = asyncio.Lock()


class RateLimitExceeded(Exception):
    """Raised when a client has used up its window."""

    def __init__(self, limit: int, window: int, retry_after: int):
        super().__init__(f"Rate limit of {limit} requests per {window}s exceeded")
        self.limit = limit
        self.window = window
        self.retry_after = retry_after


def _clean_old_requests(client_key: str, current_time: float, window: int) -> None:
    cutoff_time = current_time - window
    _request_history[client_key] = [ts for ts in _request_history[client_key] if ts > cutoff_time]
    # Evict empty entries to prevent unbounded memory growth
    if not _request_history[client_key]:
        del _request_history[client_key]


async def check_rate_limit(client_key: str, limit: int, window: int) -> None:
    """Record one request for ``client_key`` or raise RateLimitExceeded.

    Rejected requests are not recorded.
    """
    async with _lock:
        current_time = time.time()
        _clean_old_requests(client_key, current_time, window)

        history = _request_history[client_key]
        if len(history) >= limit:
            retry_after = int(window - (current_time - min(history))) + 1
            logger.warning(f"[RATE] Limit exceeded for {client_key}: {len(history)}/{limit} in {window}s")
            raise RateLimitExceeded(limit, window, retry_after)

        history.append(current_time)


def client_key_for(request: Request, trusted_proxy: bool = False) -> str:
    """Socket peer, or the hop appended by our own proxy when one is trusted.

    Only the rightmost X-Forwarded-For value is written by the trusted proxy;
    everything to its left comes from the client and can be forged.
    """
    if trusted_proxy:
        hops = [hop.strip() for hop in request.headers.get("x-forwarded-for", "").split(",")]
        if hops[-1]:
            return hops[-1]
    return request.client.host if request.client else "unknown"


async def rate_limit_middleware(request: Request, call_next):
    """FastAPI middleware applying the window to generation requests only."""
    if settings.RATE_LIMIT_ENABLED and request.url.path.endswith(RATE_LIMITED_PATHS):
        try:
            await check_rate_limit(
                client_key_for(request, settings.TRUSTED_PROXY),
                settings.RATE_LIMIT_MAX_REQUESTS,
                settings.RATE_LIMIT_WINDOW_SECONDS,
            )
        except RateLimitExceeded as e:
            return JSONResponse(
                status_code=429,
                content={"error": {"code": "RATE_LIMITED", "message": "Too many requests"}},
                headers={"Retry-After": str(e.retry_after)},
            )
    return await call_next(request)
