"""Cache store interface consumed by the caching repository.

Stores hold opaque values under string keys with a TTL in seconds.  Each
individual operation must be atomic per key; no check-and-set is assumed,
so "has, get" and "get, compute, put" sequences can interleave with other
callers.  Store failures (e.g. an unreachable server) propagate to callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CacheStore(ABC):
    @abstractmethod
    def has(self, key: str) -> bool:
        """Return True if an unexpired entry exists for key."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under key.  Raises KeyError if absent."""

    @abstractmethod
    def put(self, key: str, value: Any, ttl: int) -> None:
        """Store value under key for ttl seconds, replacing any previous entry."""

    @abstractmethod
    def forget(self, key: str) -> None:
        """Remove the entry for key; a missing key is not an error."""
