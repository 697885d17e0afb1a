"""Redis-backed cache store.

Shared across processes and service instances.  Values are pickled;
expiry is delegated to Redis (``SET key value EX ttl``).  Connection and
protocol errors (redis.exceptions.RedisError) propagate to the caller.
"""

from __future__ import annotations

import logging
import pickle
from typing import Any

from redis import Redis

from .base import CacheStore

logger = logging.getLogger(__name__)


class RedisCacheStore(CacheStore):
    def __init__(self, client: Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, redis_url: str, socket_timeout: float = 5.0) -> RedisCacheStore:
        client = Redis.from_url(
            redis_url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=False,
        )
        logger.info("Configured Redis cache store for %s", redis_url)
        return cls(client)

    def has(self, key: str) -> bool:
        return bool(self._client.exists(key))

    def get(self, key: str) -> Any:
        raw = self._client.get(key)
        if raw is None:
            raise KeyError(key)
        return pickle.loads(raw)

    def put(self, key: str, value: Any, ttl: int) -> None:
        self._client.set(key, pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL), ex=ttl)

    def forget(self, key: str) -> None:
        self._client.delete(key)
