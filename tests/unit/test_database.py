"""Unit tests for repocache/infrastructure/database.py.

Tests cover Settings defaults, env var override, object types and schema
creation against an in-memory engine.
"""

from sqlalchemy import Engine, create_engine, inspect
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from repocache.infrastructure.database import Base, SessionLocal, Settings, engine, init_schema


def test_settings_default_url_uses_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert Settings(_env_file=None).database_url.startswith("sqlite+pysqlite://")


def test_settings_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    assert Settings(_env_file=None).database_echo is False


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+psycopg://u:p@myhost/mydb"


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_sync():
    assert isinstance(engine, Engine)


def test_session_factory_produces_sessions():
    assert isinstance(SessionLocal, sessionmaker)
    assert issubclass(SessionLocal.class_, Session)
    assert SessionLocal.kw["expire_on_commit"] is False


def test_init_schema_creates_assets_table():
    scratch = create_engine("sqlite+pysqlite:///:memory:")
    try:
        init_schema(scratch)
        assert "assets" in inspect(scratch).get_table_names()
    finally:
        scratch.dispose()
