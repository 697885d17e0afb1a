"""Cache-key derivation.

Keys are namespaced by a repository prefix so repositories sharing one
store never collide:

    <prefix>:<id>                     entity lookup by identifier
    <prefix>:all                      get()
    <prefix>:<tag>:<stable_hash>      every other read

stable_hash is an MD5 digest of the canonical JSON serialization of the
argument list.  Positional order is significant and never permuted; keyword
arguments are unordered by nature and serialized sorted by name.
"""

from __future__ import annotations

import hashlib
from typing import Any

from pydantic_core import to_json

ALL_TAG = "all"


def serialize_arguments(args: tuple[Any, ...], kwargs: dict[str, Any] | None = None) -> bytes:
    payload: list[Any] = list(args)
    if kwargs:
        payload.append(sorted(kwargs.items()))
    return to_json(payload)


def stable_hash(args: tuple[Any, ...], kwargs: dict[str, Any] | None = None) -> str:
    return hashlib.md5(serialize_arguments(args, kwargs), usedforsecurity=False).hexdigest()


def entity_key(prefix: str, id: Any) -> str:
    return f"{prefix}:{id}"


def all_key(prefix: str) -> str:
    return f"{prefix}:{ALL_TAG}"


def operation_key(
    prefix: str, tag: str, args: tuple[Any, ...], kwargs: dict[str, Any] | None = None
) -> str:
    return f"{prefix}:{tag}:{stable_hash(args, kwargs)}"
