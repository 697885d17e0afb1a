"""In-process cache store.

An LRU-bounded map of (value, expires_at) entries.  Expired entries are
dropped lazily on access.  Values are deep-copied on the way in and on
the way out, so callers never share a cached object (matching the Redis
store, which pickles).  A lock makes each individual operation atomic,
which is all the CacheStore contract asks for.
"""

from __future__ import annotations

import copy
import logging
import threading
import time
from collections.abc import Callable
from typing import Any, NamedTuple

from cachetools import LRUCache

from .base import CacheStore

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    value: Any
    expires_at: float


class MemoryCacheStore(CacheStore):
    def __init__(self, max_size: int = 1000, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: LRUCache = LRUCache(maxsize=max_size)
        self._clock = clock
        self._lock = threading.Lock()
        self.max_size = max_size

    def _live(self, key: str) -> _Entry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            logger.debug("Cache entry expired: %s", key)
            return None
        return entry

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live(key) is not None

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._live(key)
        if entry is None:
            raise KeyError(key)
        return copy.deepcopy(entry.value)

    def put(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._entries[key] = _Entry(copy.deepcopy(value), self._clock() + ttl)

    def forget(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
