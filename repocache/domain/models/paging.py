"""Pagination request and result models.

Two paging schemes are supported:

  - Offset paging: PagingInfo in, Page out (page window plus total count).
  - Cursor paging: CursorRequest in, CursorResult out.  The cursor is an
    opaque token encoding the position of the last record returned; records
    are ordered by the requested sort field and tie-broken by entity key so
    the order is total and every record is visited exactly once.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Ordering descriptor for cursor pagination.

    field=None orders by the entity key alone.
    """

    model_config = ConfigDict(frozen=True)

    field: str | None = None
    direction: SortDirection = SortDirection.ASC


class PagingInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: PositiveInt = 1
    page_size: PositiveInt = 15

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class CursorRequest(BaseModel):
    """Position-based page request; cursor=None starts from the beginning."""

    model_config = ConfigDict(frozen=True)

    cursor: str | None = None
    page_size: PositiveInt = 15
    sort: SortSpec = Field(default_factory=SortSpec)

    def next(self, result: CursorResult) -> CursorRequest:
        """Request for the page following ``result`` with the same size and sort."""
        return self.model_copy(update={"cursor": result.next_cursor})


class Page(BaseModel, Generic[T]):
    """Offset-paginated window with total-count metadata."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    total: int = Field(ge=0)
    page: PositiveInt
    page_size: PositiveInt

    @property
    def last_page(self) -> int:
        return max(1, -(-self.total // self.page_size))

    @property
    def has_more(self) -> bool:
        return self.page < self.last_page


class CursorResult(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    items: list[T]
    next_cursor: str | None = None
    has_more: bool = False

    @model_validator(mode="after")
    def _check_end_has_no_cursor(self) -> CursorResult:
        if not self.has_more and self.next_cursor is not None:
            raise ValueError("next_cursor must be None when has_more is False")
        if self.has_more and self.next_cursor is None:
            raise ValueError("next_cursor is required when has_more is True")
        return self
