"""Tests for the get_repositories() DI factory."""

from unittest.mock import MagicMock

from repocache.domain.models import Asset
from repocache.infrastructure.cache import MemoryCacheStore
from repocache.infrastructure.persistence.repositories import (
    CachingRepository,
    Repositories,
    SqlAssetRepository,
    get_repositories,
)


def test_get_repositories_returns_repositories_instance():
    assert isinstance(get_repositories(MagicMock()), Repositories)


def test_repositories_assets_is_plain_without_cache():
    assert isinstance(get_repositories(MagicMock()).assets, SqlAssetRepository)


def test_repositories_assets_is_cached_with_cache():
    repos = get_repositories(MagicMock(), MemoryCacheStore(), ttl=30)
    assert isinstance(repos.assets, CachingRepository)
    assert isinstance(repos.assets.inner, SqlAssetRepository)
    assert repos.assets.prefix == "assets"
    assert repos.assets.ttl == 30


def test_cached_assets_expose_read_operations(session_factory):
    cache = MemoryCacheStore()
    repos = get_repositories(session_factory, cache)
    spy = repos.assets.save(Asset(ticker="SPY", name="SPDR S&P 500"))

    assert repos.assets.get_by_ticker("spy").asset_id == spy.asset_id
    # the lookup is now served from the cache
    repos.assets.inner.delete(spy)
    assert repos.assets.get_by_ticker("spy").asset_id == spy.asset_id
