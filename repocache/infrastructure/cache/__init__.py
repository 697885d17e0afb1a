"""Cache stores and cache-key derivation used by the caching repository."""

from .base import CacheStore
from .keys import all_key, entity_key, operation_key, stable_hash
from .memory_cache import MemoryCacheStore
from .redis_cache import RedisCacheStore
from .settings import CacheSettings, build_cache_store

__all__ = [
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "CacheSettings",
    "build_cache_store",
    "stable_hash",
    "entity_key",
    "all_key",
    "operation_key",
]
