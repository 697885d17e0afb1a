"""Shared fixtures: an in-memory SQLite database and repository wiring.

Each test gets a fresh database; StaticPool keeps the single in-memory
connection alive across the sessions the repository opens.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from repocache.infrastructure.database import Base, init_schema
from repocache.infrastructure.persistence.repositories import SqlAssetRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def asset_repo(session_factory):
    return SqlAssetRepository(session_factory)
