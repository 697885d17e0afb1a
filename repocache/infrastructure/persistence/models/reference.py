"""Reference layer ORM models: assets."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from repocache.infrastructure.database import Base


class Asset(Base):
    """Investable asset, ETF or individual security.

    asset_class and geography are structured enumerations enforced at the
    application layer.  sector is null for non-equity assets.
    """

    __tablename__ = "assets"
    __table_args__ = (UniqueConstraint("ticker", name="uq_assets_ticker"),)

    asset_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    ticker: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # equity / fixed_income / …
    asset_class: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    sub_class: Mapped[str] = mapped_column(Text, nullable=False)
    sector: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # GICS; null non-equity
    geography: Mapped[str] = mapped_column(Text, nullable=False)  # us / developed_ex_us / …
    currency: Mapped[str] = mapped_column(Text, nullable=False)  # ISO 4217
    is_etf: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
