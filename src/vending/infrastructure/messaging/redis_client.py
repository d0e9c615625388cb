from __future__ import annotations

import os
from functools import lru_cache

import redis

DEFAULT_TIMEOUT_SECONDS = 0.5


def _redis_url() -> str:
    url = os.getenv("REDIS_URL")
    if not url:
        raise RuntimeError("REDIS_URL is not set")
    return url


def redis_timeout_seconds() -> float:
    raw_value = os.getenv("REDIS_TIMEOUT_SECONDS")
    if not raw_value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"REDIS_TIMEOUT_SECONDS must be a number, got {raw_value!r}") from exc
    if value <= 0:
        raise RuntimeError(f"REDIS_TIMEOUT_SECONDS must be positive, got {raw_value!r}")
    return value


@lru_cache(maxsize=8)
def _build_client(redis_url: str, timeout_seconds: float) -> redis.Redis:
    return redis.Redis.from_url(
        redis_url,
        socket_connect_timeout=timeout_seconds,
        socket_timeout=timeout_seconds,
    )


def get_redis_client(timeout_seconds: float | None = None) -> redis.Redis:
    if timeout_seconds is None:
        timeout_seconds = redis_timeout_seconds()
    return _build_client(_redis_url(), timeout_seconds)
