"""Fixed-window request limiting per client IP."""
from __future__ import annotations

import logging
import threading
import time
from typing import Dict, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from contacts_api.core.envelope import fail_body

logger = logging.getLogger(__name__)


class _RateLimiter:
    def __init__(self) -> None:
        self._hits: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()
        self._next_sweep = 0.0

    def allow(self, key: str, limit: int, window_seconds: int) -> bool:
        now = time.time()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
                self._next_sweep = now + window_seconds
            count, reset = self._hits.get(key, (0, now + window_seconds))
            if now > reset:
                count = 0
                reset = now + window_seconds
            count += 1
            self._hits[key] = (count, reset)
            return count <= limit

    def _sweep(self, now: float) -> None:
        # caller holds the lock
        expired = [key for key, (_, reset) in self._hits.items() if now > reset]
        for key in expired:
            del self._hits[key]

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
            self._next_sweep = 0.0


_limiter = _RateLimiter()


def get_limiter() -> _RateLimiter:
    return _limiter


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "anonymous"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over ``limit`` per ``window_seconds`` for each client IP."""

    def __init__(self, app, *, limit: int, window_seconds: int) -> None:
        super().__init__(app)
        self._limit = limit
        self._window_seconds = window_seconds

    async def dispatch(self, request, call_next):
        if self._limit > 0:
            ip = _client_ip(request)
            if not _limiter.allow(f"api:{ip}", self._limit, self._window_seconds):
                logger.warning("Rate limit exceeded for %s", ip)
                return JSONResponse(
                    fail_body("Too many requests", ["API rate limit exceeded. Please try again later."]),
                    status_code=429,
                )
        return await call_next(request)
