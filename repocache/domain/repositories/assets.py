"""Asset repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from repocache.domain.models.assets import Asset
from repocache.domain.models.enums import AssetClass

from .base import Repository


class AssetRepository(Repository[Asset]):
    """Read/write interface for Asset entities.

    get_by_ticker returns None when no match exists.  Both extra queries are
    declared in read_operations so the caching decorator proxies them.
    """

    read_operations: ClassVar[tuple[str, ...]] = ("get_by_ticker", "get_by_asset_class")

    @abstractmethod
    def get_by_ticker(self, ticker: str) -> Asset | None:
        """Return the asset with the given ticker (case-insensitive), or None."""

    @abstractmethod
    def get_by_asset_class(self, asset_class: AssetClass, limit: int = 50) -> list[Asset]:
        """Return assets of the given class, ordered by ticker."""
