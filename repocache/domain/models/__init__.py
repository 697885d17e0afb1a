"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .assets import Asset
from .base import Entity
from .criteria import Criteria, Scalar
from .enums import AssetClass, Geography
from .paging import (
    CursorRequest,
    CursorResult,
    Page,
    PagingInfo,
    SortDirection,
    SortSpec,
)

__all__ = [
    "Entity",
    "Criteria",
    "Scalar",
    "PagingInfo",
    "Page",
    "SortDirection",
    "SortSpec",
    "CursorRequest",
    "CursorResult",
    "AssetClass",
    "Geography",
    "Asset",
]
