"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the DI factory.
"""

from repocache.infrastructure.persistence.models import *  # noqa: F401, F403
from repocache.infrastructure.persistence.models import __all__ as _orm_all
from repocache.infrastructure.persistence.repositories import (
    CachingRepository,
    Repositories,
    SqlAssetRepository,
    SqlRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "SqlRepository",
    "SqlAssetRepository",
    "CachingRepository",
    "Repositories",
    "get_repositories",
]
