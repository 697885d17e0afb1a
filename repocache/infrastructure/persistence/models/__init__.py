"""ORM model registry: imports every layer module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from repocache.infrastructure.persistence.models.reference import Asset

__all__ = [
    "Asset",
]
