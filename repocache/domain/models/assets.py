"""Asset entity.

A pure domain object, no ORM or persistence concerns.  It doubles as the
reference Entity implementation: every field has a default so repositories
can build fresh, unpersisted instances.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar
from uuid import UUID, uuid4

from pydantic import Field

from .base import Entity
from .enums import AssetClass, Geography


class Asset(Entity):
    """An investable asset (ETF or individual security).

    sector is the GICS sector string, None for non-equity assets.
    currency is an ISO 4217 code (e.g. "USD").
    """

    key_field: ClassVar[str] = "asset_id"
    visible_fields: ClassVar[tuple[str, ...] | None] = (
        "asset_id",
        "ticker",
        "name",
        "asset_class",
        "geography",
        "currency",
    )
    validation_rules: ClassVar[dict[str, Any] | None] = {
        "ticker": ["required", "max:16"],
        "name": ["required"],
        "currency": ["required", "size:3"],
    }

    asset_id: UUID = Field(default_factory=uuid4)
    ticker: str = ""
    name: str = ""
    asset_class: AssetClass = AssetClass.EQUITY
    sub_class: str = ""
    sector: str | None = None  # GICS sector; None for non-equity
    geography: Geography = Geography.US
    currency: str = "USD"  # ISO 4217
    is_etf: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        ticker: str,
        name: str,
        asset_class: AssetClass,
        sub_class: str,
        geography: Geography,
        currency: str,
        is_etf: bool,
        sector: str | None = None,
    ) -> Asset:
        """Named constructor, explicit about the caller's intent."""
        return cls(
            ticker=ticker,
            name=name,
            asset_class=asset_class,
            sub_class=sub_class,
            geography=geography,
            currency=currency,
            is_etf=is_etf,
            sector=sector,
        )
