"""Concrete repository implementations.

Exports the SQLAlchemy repositories, the caching decorator, and the
get_repositories() factory used to wire them at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from repocache.domain.models.assets import Asset
from repocache.domain.repositories.assets import AssetRepository
from repocache.infrastructure.cache.base import CacheStore

from .assets import SqlAssetRepository
from .base import SqlRepository
from .caching import READ_PREFIX, CachingRepository


@dataclass
class Repositories:
    """All repository instances bound to a single session factory."""

    assets: AssetRepository | CachingRepository[Asset]


def get_repositories(
    session_factory: sessionmaker[Session],
    cache: CacheStore | None = None,
    ttl: int = 10,
) -> Repositories:
    """Construct all repositories bound to the given session factory.

    When a cache store is supplied every repository is wrapped in a
    CachingRepository with its own key prefix:

        repos = get_repositories(SessionLocal, build_cache_store())
        asset = repos.assets.find_or_fail(asset_id)
        spy = repos.assets.get_by_ticker("SPY")
    """
    assets: AssetRepository | CachingRepository[Asset] = SqlAssetRepository(session_factory)
    if cache is not None:
        assets = CachingRepository(assets, cache, prefix="assets", ttl=ttl)
    return Repositories(assets=assets)


__all__ = [
    "SqlRepository",
    "SqlAssetRepository",
    "CachingRepository",
    "READ_PREFIX",
    "Repositories",
    "get_repositories",
]
