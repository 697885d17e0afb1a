"""Cache-aside decorator for any Repository.

CachingRepository implements the same interface as the repository it wraps.
Reads check the cache store first and populate it on a miss; writes go to
the wrapped repository and then invalidate cache entries.

Invalidation is narrow.  save() and delete() forget only the
entity's identifier key (``<prefix>:<id>``) and the ``<prefix>:all`` key.
Entries cached by find_where, get_where, get_page, get_cursor_page and the
generic get* pass-through are NOT invalidated and stay stale until their
TTL expires.  save_many() and delete_many() pass straight through and
invalidate nothing.

Concurrency: no locks are taken.  Two concurrent misses on one key both
compute and both store (last write wins).  A write racing an in-flight read
of the same key can be undone by the read's later put(); the resulting
staleness is bounded by the TTL.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from repocache.domain.exceptions import ConfigurationError, NotFound, UnsupportedOperation
from repocache.domain.models.base import Entity
from repocache.domain.models.criteria import Criteria
from repocache.domain.models.paging import CursorRequest, CursorResult, Page, PagingInfo
from repocache.domain.repositories.base import CriteriaLike, Repository
from repocache.infrastructure.cache.base import CacheStore
from repocache.infrastructure.cache.keys import all_key, entity_key, operation_key

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)

READ_PREFIX = "get"


class CachingRepository(Repository[T]):
    def __init__(
        self,
        repository: Repository[T],
        cache: CacheStore,
        prefix: str,
        ttl: int = 10,
        readers: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        if not prefix:
            raise ConfigurationError(self, "Cache key prefix must not be empty")
        if ttl <= 0:
            raise ConfigurationError(self, f"Cache TTL must be positive, got {ttl}")
        self._repository = repository
        self._cache = cache
        self._prefix = prefix
        self._ttl = ttl
        self._readers: dict[str, Callable[..., Any]] = {}
        for name in repository.read_operations:
            self.register_reader(name, getattr(repository, name))
        for name, handler in (readers or {}).items():
            self.register_reader(name, handler)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def inner(self) -> Repository[T]:
        return self._repository

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        try:
            if self._cache.has(key):
                logger.debug("Cache hit: %s", key)
                return self._cache.get(key)
        except KeyError:
            logger.debug("Cache entry expired between has() and get(): %s", key)
        logger.debug("Cache miss: %s", key)
        result = compute()
        self._cache.put(key, result, self._ttl)
        return result

    # --- generic get* pass-through ---

    def register_reader(self, name: str, handler: Callable[..., Any]) -> None:
        """Register a read operation reachable through call() and attribute access."""
        if not name.startswith(READ_PREFIX):
            raise UnsupportedOperation(
                self, f"Caching repository proxies only {READ_PREFIX}* methods, not {name!r}"
            )
        if hasattr(CachingRepository, name):
            raise ConfigurationError(self, f"{name!r} is already a cached operation")
        self._readers[name] = handler

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a registered get* operation through the cache."""
        if not name.startswith(READ_PREFIX):
            raise UnsupportedOperation(
                self, f"Caching repository proxies only {READ_PREFIX}* methods, not {name!r}"
            )
        handler = self._readers.get(name)
        if handler is None:
            raise UnsupportedOperation(self, f"No read operation {name!r} is registered")
        key = operation_key(self._prefix, name, args, kwargs)
        return self._cached(key, lambda: handler(*args, **kwargs))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        if name in self.__dict__.get("_readers", {}):
            return functools.partial(self.call, name)
        repository = self.__dict__.get("_repository")
        if not name.startswith(READ_PREFIX) and hasattr(type(repository), name):
            raise UnsupportedOperation(
                self, f"Caching repository proxies only {READ_PREFIX}* methods, not {name!r}"
            )
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # --- metadata ---

    @property
    def entity_type(self) -> type[T]:
        return self._repository.entity_type

    def new_entity(self) -> T:
        return self._repository.new_entity()

    def _cached_attribute(self, name: str) -> Any:
        return self._cached(f"{self._prefix}:{name}", lambda: getattr(self._repository, name))

    @property
    def visible_fields(self) -> tuple[str, ...]:
        return self._cached_attribute("visible_fields")

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return self._cached_attribute("searchable_fields")

    @property
    def model_validation_rules(self) -> dict[str, Any]:
        return self._cached_attribute("model_validation_rules")

    def get_model_validation_rules(self, entity: T | None = None) -> dict[str, Any]:
        return self._repository.get_model_validation_rules(entity)

    # --- single-entity reads ---

    @functools.cached_property
    def _key_adapter(self) -> TypeAdapter:
        entity_type = self.entity_type
        return TypeAdapter(entity_type.model_fields[entity_type.key_field].annotation)

    def _normalize_id(self, id: Any) -> Any:
        """Coerce id to the key field type so every spelling maps to one cache key."""
        try:
            return self._key_adapter.validate_python(id)
        except ValidationError:
            # Malformed ids are looked up as given and come back absent.
            return id

    def _find(self, id: Any) -> T | None:
        id = self._normalize_id(id)

        def compute() -> T | None:
            entity = self._repository.find_or_new(id)
            return entity if entity.exists else None

        return self._cached(entity_key(self._prefix, id), compute)

    def find_or_fail(self, id: Any) -> T:
        entity = self._find(id)
        if entity is None:
            raise NotFound(self, self.entity_type, id)
        return entity

    def find_or_new(self, id: Any) -> T:
        entity = self._find(id)
        return entity if entity is not None else self.new_entity()

    def find_where(self, criteria: CriteriaLike) -> T | None:
        criteria = Criteria.coerce(criteria)
        key = operation_key(self._prefix, "find", (criteria,))
        return self._cached(key, lambda: self._repository.find_where(criteria))

    # --- writes ---

    def forget_entity(self, id: Any) -> None:
        key = entity_key(self._prefix, self._normalize_id(id))
        self._cache.forget(key)
        logger.debug("Cache invalidated: %s", key)

    def forget_all(self) -> None:
        key = all_key(self._prefix)
        self._cache.forget(key)
        logger.debug("Cache invalidated: %s", key)

    def _invalidate(self, entity: T) -> None:
        self.forget_entity(entity.key)
        self.forget_all()

    def save(self, entity: T) -> T:
        result = self._repository.save(entity)
        self._invalidate(entity)
        return result

    def save_many(self, entities: Sequence[T]) -> list[T]:
        return self._repository.save_many(entities)

    def delete(self, entity: T) -> None:
        self._repository.delete(entity)
        self._invalidate(entity)

    def delete_many(self, entities: Sequence[T]) -> None:
        self._repository.delete_many(entities)

    # --- collection reads ---

    def get(self) -> list[T]:
        return self._cached(all_key(self._prefix), self._repository.get)

    def get_where(self, criteria: CriteriaLike) -> list[T]:
        criteria = Criteria.coerce(criteria)
        key = operation_key(self._prefix, "get", (criteria,))
        return self._cached(key, lambda: self._repository.get_where(criteria))

    def get_page(self, paging: PagingInfo, criteria: CriteriaLike = None) -> Page[T]:
        criteria = Criteria.coerce(criteria)
        key = operation_key(self._prefix, "page", (paging, criteria))
        return self._cached(key, lambda: self._repository.get_page(paging, criteria))

    def get_cursor_page(
        self, cursor: CursorRequest, criteria: CriteriaLike = None
    ) -> CursorResult[T]:
        criteria = Criteria.coerce(criteria)
        key = operation_key(self._prefix, "cursor", (cursor, criteria))
        return self._cached(key, lambda: self._repository.get_cursor_page(cursor, criteria))
