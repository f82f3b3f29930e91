"""Per-user request budget for the fridge API.

Every authenticated request spends one unit from the caller's bucket
(``user:<id>``). With ``REDIS_URL`` set the buckets live in Redis so that
several uvicorn workers share them; otherwise they are kept in process.
"""
from __future__ import annotations

import logging
import time
import threading
from collections import deque
from dataclasses import dataclass
from typing import Protocol

from fridge.settings import settings

try:
    import redis  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    redis = None


logger = logging.getLogger("fridge_api")

REDIS_KEY_PREFIX = "fridge:rl"


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    retry_after: int


class RateLimiter(Protocol):
    def allow(self, key: str, limit: int, window_sec: int) -> RateLimitResult: ...


def user_bucket(user_id: int) -> str:
    return f"user:{user_id}"


class InMemoryRateLimiter:
    """Sliding window: one deque of request timestamps per bucket."""

    def __init__(self) -> None:
        self._buckets: dict[str, deque[float]] = {}
        self._lock = threading.Lock()

    def allow(self, key: str, limit: int, window_sec: int) -> RateLimitResult:
        now = time.monotonic()
        with self._lock:
            stamps = self._buckets.setdefault(key, deque())
            while stamps and now - stamps[0] > window_sec:
                stamps.popleft()
            if len(stamps) >= limit:
                wait = max(1, int(window_sec - (now - stamps[0])))
                return RateLimitResult(False, wait)
            stamps.append(now)
        return RateLimitResult(True, 0)


class RedisRateLimiter:
    """Fixed window counter, shared by every worker pointed at the same Redis."""

    def __init__(self, url: str) -> None:
        if redis is None:
            raise RuntimeError("redis is not available")
        self._client = redis.Redis.from_url(url, decode_responses=True)

    def allow(self, key: str, limit: int, window_sec: int) -> RateLimitResult:
        now = int(time.time())
        counter = f"{REDIS_KEY_PREFIX}:{key}:{now // window_sec}"
        used = int(self._client.incr(counter))
        if used == 1:
            self._client.expire(counter, window_sec + 1)
        if used > limit:
            return RateLimitResult(False, max(1, window_sec - (now % window_sec)))
        return RateLimitResult(True, 0)


_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = _build_rate_limiter()
    return _rate_limiter


def _build_rate_limiter() -> RateLimiter:
    if settings.REDIS_URL:
        try:
            return RedisRateLimiter(settings.REDIS_URL)
        except RuntimeError as exc:
            logger.warning("Falling back to in-memory rate limiter: %s", exc)
    return InMemoryRateLimiter()


def check_user_budget(user_id: int) -> RateLimitResult:
    """Spend one request from the user's budget (API_RATE_LIMIT_PER_MIN per API_RATE_WINDOW_SEC)."""
    result = get_rate_limiter().allow(
        user_bucket(user_id),
        settings.API_RATE_LIMIT_PER_MIN,
        settings.API_RATE_WINDOW_SEC,
    )
    if not result.allowed:
        logger.info("Rate limit reached for user %s, retry in %ss", user_id, result.retry_after)
    return result


def reset_rate_limiter() -> None:
    global _rate_limiter
    _rate_limiter = None
