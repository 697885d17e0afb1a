"""Tests for the Entity base contract."""

from uuid import UUID

import pytest
from pydantic import ValidationError

from repocache.domain.models import Asset
from repocache.domain.models.base import Entity


def test_fresh_entity_does_not_exist():
    assert Asset().exists is False


def test_as_persisted_returns_flagged_copy():
    asset = Asset(ticker="SPY")
    persisted = asset.as_persisted()
    assert persisted.exists is True
    assert asset.exists is False
    assert persisted.ticker == "SPY"


def test_exists_flag_is_not_serialized():
    dumped = Asset(ticker="SPY").as_persisted().model_dump()
    assert "exists" not in dumped
    assert "_exists" not in dumped


def test_key_reads_key_field():
    asset = Asset()
    assert isinstance(asset.key, UUID)
    assert asset.key == asset.asset_id


def test_default_key_field_is_id():
    class _Thing(Entity):
        id: int = 0

    assert _Thing(id=7).key == 7


def test_entities_are_frozen():
    with pytest.raises(ValidationError):
        Asset().ticker = "QQQ"


def test_field_names_lists_model_fields():
    assert Asset.field_names()[0] == "asset_id"
    assert "exists" not in Asset.field_names()


def test_asset_named_constructor():
    from repocache.domain.models import AssetClass, Geography

    asset = Asset.create(
        ticker="AGG",
        name="iShares Core US Aggregate Bond ETF",
        asset_class=AssetClass.FIXED_INCOME,
        sub_class="aggregate_bond",
        geography=Geography.US,
        currency="USD",
        is_etf=True,
    )
    assert asset.asset_class == AssetClass.FIXED_INCOME
    assert asset.sector is None
