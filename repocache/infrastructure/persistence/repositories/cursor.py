"""Cursor token codec and keyset predicate for cursor pagination.

A cursor token is URL-safe base64 of a small JSON document recording the
sort it was issued for and the (sort value, key) position of the last row
returned.  Tokens are opaque to callers; decoding validates the position
back into the entity's field types.
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python
from sqlalchemy import ColumnElement, and_, or_

from repocache.domain.models.base import Entity
from repocache.domain.models.paging import SortDirection, SortSpec


@dataclass(frozen=True)
class CursorPosition:
    value: Any
    key: Any


def encode_cursor(sort: SortSpec, value: Any, key: Any) -> str:
    payload = {
        "f": sort.field,
        "d": sort.direction.value,
        "v": to_jsonable_python(value),
        "k": to_jsonable_python(key),
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_cursor(token: str, sort: SortSpec, entity_type: type[Entity]) -> CursorPosition:
    """Decode ``token`` issued for ``sort``.  Raises ValueError if malformed or mismatched."""
    try:
        padded = token + "=" * (-len(token) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded.encode()))
        field, direction = payload["f"], payload["d"]
        value, key = payload["v"], payload["k"]
    except (binascii.Error, ValueError, TypeError, KeyError) as exc:
        raise ValueError(f"Malformed cursor token {token!r}") from exc

    if field != sort.field or direction != sort.direction.value:
        raise ValueError(
            f"Cursor was issued for sort ({field}, {direction}), "
            f"not ({sort.field}, {sort.direction.value})"
        )

    fields = entity_type.model_fields
    try:
        key = TypeAdapter(fields[entity_type.key_field].annotation).validate_python(key)
        if sort.field is not None:
            value = TypeAdapter(fields[sort.field].annotation).validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"Cursor token {token!r} does not match {entity_type.__name__}") from exc
    return CursorPosition(value=value, key=key)


def column_value(value: Any) -> Any:
    """Bind-ready form of a domain value (enums are stored by value)."""
    return value.value if isinstance(value, Enum) else value


def cursor_ordering(
    sort_column: ColumnElement | None,
    key_column: ColumnElement,
    direction: SortDirection,
) -> list[ColumnElement]:
    """ORDER BY clauses for (sort, key) order.

    NULL sort values come first ascending and last descending, so the
    descending order is the exact reverse of the ascending one.
    """
    if direction is SortDirection.DESC:
        ordering = [key_column.desc()]
        if sort_column is not None:
            ordering.insert(0, sort_column.desc().nulls_last())
    else:
        ordering = [key_column.asc()]
        if sort_column is not None:
            ordering.insert(0, sort_column.asc().nulls_first())
    return ordering


def after_position(
    sort_column: ColumnElement | None,
    key_column: ColumnElement,
    direction: SortDirection,
    position: CursorPosition,
) -> ColumnElement[bool]:
    """Keyset predicate selecting rows strictly after ``position`` in cursor_ordering()."""
    descending = direction is SortDirection.DESC
    key = column_value(position.key)
    key_after = key_column < key if descending else key_column > key
    if sort_column is None:
        return key_after
    if position.value is None:
        same_group = and_(sort_column.is_(None), key_after)
        # NULLs lead ascending and trail descending.
        return same_group if descending else or_(same_group, sort_column.is_not(None))
    value = column_value(position.value)
    value_after = sort_column < value if descending else sort_column > value
    after = or_(value_after, and_(sort_column == value, key_after))
    return or_(after, sort_column.is_(None)) if descending else after
