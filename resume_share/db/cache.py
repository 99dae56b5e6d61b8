"""
resume_share/db/cache.py

Redis-backed cache: JSON-encoded key/value entries and named hash counters.
The client is built from REDIS_URL on each call.
"""

import json
from typing import Any, Iterable, Optional

import redis

from resume_share.config import get_redis_url


def _redis_client() -> redis.Redis:
    return redis.Redis.from_url(get_redis_url(), decode_responses=True)


def get_value(key: str) -> Optional[Any]:
    raw = _redis_client().get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def set_value(key: str, value: Any) -> None:
    _redis_client().set(key, json.dumps(value))


def delete_keys(keys: Iterable[str]) -> int:
    """Delete cache entries. Returns the number of keys removed."""
    keys = list(keys)
    if not keys:
        return 0
    return int(_redis_client().delete(*keys))


def hincrby(name: str, field: str, amount: int = 1) -> int:
    """Increment a field of the `name` hash and return its new value."""
    return int(_redis_client().hincrby(name, field, amount))


def hget(name: str, field: str) -> int:
    value = _redis_client().hget(name, field)
    return int(value) if value is not None else 0
