"""Cache configuration and store factory."""

from __future__ import annotations

from typing import Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base import CacheStore
from .memory_cache import MemoryCacheStore
from .redis_cache import RedisCacheStore


class CacheSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CACHE_", env_file=".env", extra="ignore")

    backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    default_ttl: PositiveInt = 10  # seconds
    max_size: PositiveInt = 1000  # memory backend only


def build_cache_store(settings: CacheSettings | None = None) -> CacheStore:
    settings = settings or CacheSettings()
    if settings.backend == "redis":
        return RedisCacheStore.from_url(settings.redis_url)
    return MemoryCacheStore(max_size=settings.max_size)
