"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
package.  Concrete implementations live in repocache/infrastructure/persistence/
and are wired at the application boundary via dependency injection.

Design notes:
  - All methods are synchronous; callers may invoke them from many threads.
  - T is the domain entity type (never an ORM row or DTO).
  - The SQL repository and the caching decorator both implement this
    interface with identical signatures, so any caller can be handed either.
  - Filters are exact-match Criteria (or a plain mapping, normalised by
    Criteria.coerce); sorting and filtering beyond that are out of scope.
  - read_operations lists the extra get* queries a specialised interface
    declares.  The caching decorator registers a handler for each of them
    at construction time.
"""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from repocache.domain.models.base import Entity
from repocache.domain.models.criteria import Criteria, Scalar
from repocache.domain.models.paging import CursorRequest, CursorResult, Page, PagingInfo

T = TypeVar("T", bound=Entity)

CriteriaLike = Criteria | Mapping[str, Scalar] | None


class Repository(ABC, Generic[T]):
    """Abstract CRUD and query interface for one entity type."""

    read_operations: ClassVar[tuple[str, ...]] = ()

    # --- metadata ---

    @property
    @abstractmethod
    def entity_type(self) -> type[T]:
        """The entity class this repository manages."""

    @abstractmethod
    def new_entity(self) -> T:
        """Return a fresh, unpersisted instance of the entity type."""

    @property
    @abstractmethod
    def visible_fields(self) -> tuple[str, ...]:
        """Entity fields exposed to callers."""

    @property
    @abstractmethod
    def searchable_fields(self) -> tuple[str, ...]:
        """Entity fields accepted in filter criteria."""

    @property
    def model_validation_rules(self) -> dict[str, Any]:
        return self.get_model_validation_rules()

    @abstractmethod
    def get_model_validation_rules(self, entity: T | None = None) -> dict[str, Any]:
        """Return the validation rule descriptor for the entity type."""

    # --- single-entity reads ---

    @abstractmethod
    def find_or_fail(self, id: Any) -> T:
        """Return the entity with the given key.  Raises NotFound if absent."""

    @abstractmethod
    def find_or_new(self, id: Any) -> T:
        """Return the entity with the given key, or a fresh unpersisted instance."""

    @abstractmethod
    def find_where(self, criteria: CriteriaLike) -> T | None:
        """Return the first entity matching every condition, or None."""

    # --- writes ---

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or update the entity.  Raises PersistenceFailure on rejection."""

    @abstractmethod
    def save_many(self, entities: Sequence[T]) -> list[T]:
        """Save every entity in one transaction; all or nothing."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove the entity.  Raises PersistenceFailure if the store refuses."""

    @abstractmethod
    def delete_many(self, entities: Sequence[T]) -> None:
        """Delete every entity in one transaction; all or nothing."""

    def create(self, entity: T) -> T:
        """Deprecated: use save()."""
        warnings.warn(
            f"{type(self).__name__}.create() is deprecated, use save()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.save(entity)

    # --- collection reads ---

    @abstractmethod
    def get(self) -> list[T]:
        """Return every entity.  Unbounded; callers guard against large tables."""

    @abstractmethod
    def get_where(self, criteria: CriteriaLike) -> list[T]:
        """Return every entity matching the criteria (no criteria means all)."""

    @abstractmethod
    def get_page(self, paging: PagingInfo, criteria: CriteriaLike = None) -> Page[T]:
        """Return the requested offset window with the total match count."""

    @abstractmethod
    def get_cursor_page(
        self, cursor: CursorRequest, criteria: CriteriaLike = None
    ) -> CursorResult[T]:
        """Return records strictly after the cursor position."""
