"""SQLAlchemy implementation of the generic Repository interface.

SqlRepository is the single source of truth for one entity type.  Subclasses
bind it by setting ``entity_class`` (a domain Entity) and ``orm_class`` (its
ORM mapper); column names must match the entity's field names.

Every operation runs inside its own ``session_factory.begin()`` block, so
single writes commit on success and batch writes (save_many / delete_many)
are all-or-nothing: the first failure rolls the whole batch back.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import Select, func, inspect, select
from sqlalchemy.exc import NoInspectionAvailable, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from repocache.domain.exceptions import ConfigurationError, NotFound, PersistenceFailure
from repocache.domain.models.base import Entity
from repocache.domain.models.criteria import Criteria
from repocache.domain.models.paging import (
    CursorRequest,
    CursorResult,
    Page,
    PagingInfo,
)
from repocache.domain.repositories.base import CriteriaLike, Repository
from repocache.infrastructure.validation import SchemaRuleProvider, ValidationRuleProvider

from .cursor import (
    after_position,
    column_value,
    cursor_ordering,
    decode_cursor,
    encode_cursor,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class SqlRepository(Repository[T]):
    entity_class: ClassVar[type[Entity] | None] = None
    orm_class: ClassVar[type | None] = None
    searchable_field_names: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        rule_provider: ValidationRuleProvider | None = None,
    ) -> None:
        self._check_configuration()
        self._session_factory = session_factory
        self._rule_provider = rule_provider or SchemaRuleProvider()
        self._key_adapter = TypeAdapter(
            self.entity_class.model_fields[self.entity_class.key_field].annotation
        )

    def _check_configuration(self) -> None:
        entity_class = self.entity_class
        if entity_class is None:
            raise ConfigurationError(self, "Mandatory attribute entity_class not defined")
        if not isinstance(entity_class, type) or not issubclass(entity_class, Entity):
            raise ConfigurationError(self, f"{entity_class!r} must extend {Entity.__name__}")
        try:
            entity_class()
        except Exception as exc:
            raise ConfigurationError(
                self, f"Error creating instance of entity {entity_class.__name__}"
            ) from exc
        if entity_class.key_field not in entity_class.model_fields:
            raise ConfigurationError(
                self, f"{entity_class.__name__} has no key field {entity_class.key_field!r}"
            )
        if self.orm_class is None:
            raise ConfigurationError(self, "Mandatory attribute orm_class not defined")
        try:
            columns = set(inspect(self.orm_class).columns.keys())
        except NoInspectionAvailable as exc:
            raise ConfigurationError(self, f"{self.orm_class!r} is not a mapped class") from exc
        missing = set(entity_class.model_fields) - columns
        if missing:
            raise ConfigurationError(
                self,
                f"{self.orm_class.__name__} has no columns for {sorted(missing)}",
            )

    # --- mapping ---

    def _to_domain(self, row: Any) -> T:
        return self.entity_class.model_validate(row).as_persisted()

    def _to_values(self, entity: T) -> dict[str, Any]:
        return {
            name: column_value(getattr(entity, name)) for name in self.entity_class.model_fields
        }

    def _column(self, name: str):
        return getattr(self.orm_class, name)

    def _key_column(self):
        return self._column(self.entity_class.key_field)

    def _check_fields(self, names: Sequence[str]) -> None:
        unknown = [name for name in names if name not in self.entity_class.model_fields]
        if unknown:
            raise ValueError(f"Unknown {self.entity_class.__name__} field(s): {unknown}")

    def _select(self, criteria: CriteriaLike) -> Select:
        criteria = Criteria.coerce(criteria)
        self._check_fields(criteria.field_names)
        stmt = select(self.orm_class)
        for field, value in criteria.conditions:
            stmt = stmt.where(self._column(field) == column_value(value))
        return stmt

    def _coerce_key(self, id: Any) -> Any:
        return self._key_adapter.validate_python(id)

    # --- metadata ---

    @property
    def entity_type(self) -> type[T]:
        return self.entity_class

    def new_entity(self) -> T:
        return self.entity_class()

    @property
    def visible_fields(self) -> tuple[str, ...]:
        return self.entity_class.visible_fields or self.entity_class.field_names()

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return self.searchable_field_names

    def get_model_validation_rules(self, entity: T | None = None) -> dict[str, Any]:
        return self._rule_provider.rules_for(entity if entity is not None else self.new_entity())

    # --- single-entity reads ---

    def _find(self, id: Any) -> T | None:
        try:
            key = self._coerce_key(id)
        except ValidationError:
            return None
        with self._session_factory() as session:
            row = session.get(self.orm_class, key)
            return self._to_domain(row) if row is not None else None

    def find_or_fail(self, id: Any) -> T:
        entity = self._find(id)
        if entity is None:
            raise NotFound(self, self.entity_class, id)
        return entity

    def find_or_new(self, id: Any) -> T:
        entity = self._find(id)
        return entity if entity is not None else self.new_entity()

    def find_where(self, criteria: CriteriaLike) -> T | None:
        stmt = self._select(criteria).order_by(self._key_column()).limit(1)
        with self._session_factory() as session:
            row = session.execute(stmt).scalars().first()
            return self._to_domain(row) if row is not None else None

    # --- writes ---

    def _stage(self, session: Session, entity: T) -> bool:
        """Stage an insert or update; return True if the row already existed."""
        row = session.get(self.orm_class, entity.key)
        values = self._to_values(entity)
        if row is None:
            session.add(self.orm_class(**values))
            existed = False
        else:
            for name, value in values.items():
                setattr(row, name, value)
            existed = True
        return existed

    def _write_failure(self, action: str, entity: T, exc: Exception) -> PersistenceFailure:
        name = self.entity_class.__name__
        logger.warning("Cannot %s %s record %s: %s", action, name, entity.key, exc)
        return PersistenceFailure(self, f"Cannot {action} {name} record")

    def save(self, entity: T) -> T:
        existed = entity.exists
        try:
            with self._session_factory.begin() as session:
                existed = self._stage(session, entity)
                session.flush()
        except SQLAlchemyError as exc:
            raise self._write_failure("update" if existed else "create", entity, exc) from exc
        return entity.as_persisted()

    def save_many(self, entities: Sequence[T]) -> list[T]:
        current: T | None = None
        existed = False
        try:
            with self._session_factory.begin() as session:
                for current in entities:
                    existed = self._stage(session, current)
                    session.flush()
        except SQLAlchemyError as exc:
            action = "update" if existed else "create"
            raise self._write_failure(action, current, exc) from exc
        return [entity.as_persisted() for entity in entities]

    def _remove(self, session: Session, entity: T) -> None:
        row = session.get(self.orm_class, entity.key)
        if row is None:
            name = self.entity_class.__name__
            logger.warning("Cannot delete %s record %s: not found", name, entity.key)
            raise PersistenceFailure(self, f"Cannot delete {name} record")
        session.delete(row)
        session.flush()

    def delete(self, entity: T) -> None:
        try:
            with self._session_factory.begin() as session:
                self._remove(session, entity)
        except SQLAlchemyError as exc:
            raise self._write_failure("delete", entity, exc) from exc

    def delete_many(self, entities: Sequence[T]) -> None:
        current: T | None = None
        try:
            with self._session_factory.begin() as session:
                for current in entities:
                    self._remove(session, current)
        except SQLAlchemyError as exc:
            raise self._write_failure("delete", current, exc) from exc

    # --- collection reads ---

    def get(self) -> list[T]:
        return self.get_where(None)

    def get_where(self, criteria: CriteriaLike) -> list[T]:
        stmt = self._select(criteria).order_by(self._key_column())
        with self._session_factory() as session:
            return [self._to_domain(row) for row in session.execute(stmt).scalars()]

    def get_page(self, paging: PagingInfo, criteria: CriteriaLike = None) -> Page[T]:
        stmt = self._select(criteria)
        count_stmt = select(func.count()).select_from(stmt.subquery())
        window = stmt.order_by(self._key_column()).limit(paging.page_size).offset(paging.offset)
        with self._session_factory() as session:
            total = session.execute(count_stmt).scalar_one()
            items = [self._to_domain(row) for row in session.execute(window).scalars()]
        return Page(items=items, total=total, page=paging.page, page_size=paging.page_size)

    def get_cursor_page(
        self, cursor: CursorRequest, criteria: CriteriaLike = None
    ) -> CursorResult[T]:
        sort = cursor.sort
        key_field = self.entity_class.key_field
        key_column = self._key_column()
        sort_column = None
        if sort.field is not None:
            self._check_fields([sort.field])
            if sort.field != key_field:
                sort_column = self._column(sort.field)

        stmt = self._select(criteria)
        if cursor.cursor is not None:
            position = decode_cursor(cursor.cursor, sort, self.entity_class)
            stmt = stmt.where(after_position(sort_column, key_column, sort.direction, position))

        ordering = cursor_ordering(sort_column, key_column, sort.direction)
        stmt = stmt.order_by(*ordering).limit(cursor.page_size + 1)

        with self._session_factory() as session:
            rows = list(session.execute(stmt).scalars())
            items = [self._to_domain(row) for row in rows[: cursor.page_size]]

        has_more = len(rows) > cursor.page_size
        next_cursor = None
        if has_more:
            last = items[-1]
            value = getattr(last, sort.field) if sort.field is not None else None
            next_cursor = encode_cursor(sort, value, last.key)
        return CursorResult(items=items, next_cursor=next_cursor, has_more=has_more)
