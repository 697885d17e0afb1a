"""SQLAlchemy implementation of AssetRepository."""

from __future__ import annotations

from sqlalchemy import func, select

from repocache.domain.models.assets import Asset as DomainAsset
from repocache.domain.models.enums import AssetClass
from repocache.domain.repositories.assets import AssetRepository
from repocache.infrastructure.persistence.models.reference import Asset as OrmAsset

from .base import SqlRepository


class SqlAssetRepository(SqlRepository[DomainAsset], AssetRepository):
    entity_class = DomainAsset
    orm_class = OrmAsset
    searchable_field_names = ("ticker", "name", "asset_class", "geography")

    def get_by_ticker(self, ticker: str) -> DomainAsset | None:
        stmt = select(OrmAsset).where(func.lower(OrmAsset.ticker) == ticker.lower())
        with self._session_factory() as session:
            row = session.execute(stmt).scalar_one_or_none()
            return self._to_domain(row) if row else None

    def get_by_asset_class(self, asset_class: AssetClass, limit: int = 50) -> list[DomainAsset]:
        stmt = (
            select(OrmAsset)
            .where(OrmAsset.asset_class == AssetClass(asset_class).value)
            .order_by(OrmAsset.ticker)
            .limit(limit)
        )
        with self._session_factory() as session:
            return [self._to_domain(row) for row in session.execute(stmt).scalars()]
