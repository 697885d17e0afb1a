"""Exact-match filter criteria.

Criteria replaces an open field→value mapping with a closed, ordered
structure: every condition is an equality test, conditions are ANDed, and
values are restricted to scalars so equality and cache-key hashing are
well defined.  Condition order is preserved exactly as supplied.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

Scalar = Union[str, int, float, bool, None, UUID, Decimal, date, datetime, Enum]

_SCALAR_TYPES = (str, int, float, bool, UUID, Decimal, date, datetime, Enum)


class Criteria(BaseModel):
    """Ordered conjunction of ``field == value`` conditions."""

    model_config = ConfigDict(frozen=True)

    conditions: tuple[tuple[str, Any], ...] = ()

    @field_validator("conditions")
    @classmethod
    def _check_conditions(cls, v: tuple[tuple[str, Any], ...]) -> tuple[tuple[str, Any], ...]:
        seen: set[str] = set()
        for field, value in v:
            if field in seen:
                raise ValueError(f"Duplicate criteria field {field!r}")
            seen.add(field)
            if value is not None and not isinstance(value, _SCALAR_TYPES):
                raise ValueError(
                    f"Criteria value for {field!r} must be a scalar, got {type(value).__name__}"
                )
        return v

    @classmethod
    def of(cls, **field_values: Scalar) -> Criteria:
        return cls(conditions=tuple(field_values.items()))

    @classmethod
    def coerce(cls, value: Criteria | Mapping[str, Scalar] | None) -> Criteria:
        """Normalise repository filter arguments; None means no filter."""
        if value is None:
            return cls()
        if isinstance(value, Criteria):
            return value
        return cls(conditions=tuple(value.items()))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(field for field, _ in self.conditions)

    def as_dict(self) -> dict[str, Any]:
        return dict(self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def __bool__(self) -> bool:
        return bool(self.conditions)
