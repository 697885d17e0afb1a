"""Base entity contract shared by every repository-managed model.

Entities are pure domain objects (Pydantic, frozen), never ORM rows.  The
repository reads exactly one thing from them: the primary key named by
``key_field``.  Whether an instance came from the store is tracked in a
private attribute so it never leaks into ``model_dump()``, JSON schemas or
cache-key serialization.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr


class Entity(BaseModel):
    """Persisted record with a unique key.

    Subclasses must be instantiable without arguments: repositories build
    fresh, unpersisted instances for ``find_or_new``.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    key_field: ClassVar[str] = "id"
    # None means "every model field".
    visible_fields: ClassVar[tuple[str, ...] | None] = None
    # Explicit rule descriptor; None falls back to the rule provider default.
    validation_rules: ClassVar[dict[str, Any] | None] = None

    _exists: bool = PrivateAttr(default=False)

    @property
    def key(self) -> Any:
        return getattr(self, self.key_field)

    @property
    def exists(self) -> bool:
        """True when this instance was loaded from (or written to) the store."""
        return self._exists

    def as_persisted(self) -> Entity:
        """Return a copy flagged as existing in the store."""
        persisted = self.model_copy()
        persisted._exists = True
        return persisted

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)
