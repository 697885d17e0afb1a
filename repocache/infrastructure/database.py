"""SQLAlchemy engine, session factory, and declarative base.

Repositories take a sessionmaker rather than a live session: every
repository operation opens its own ``session_factory.begin()`` block, which
commits on success and rolls back on any exception.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite+pysqlite:///./repocache.db"
    database_echo: bool = False


settings = Settings()

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def init_schema(bind: Engine | None = None) -> None:
    """Create every mapped table that does not exist yet (tests, local use)."""
    import repocache.infrastructure.persistence.models  # noqa: F401 (registers mappers)

    Base.metadata.create_all(bind or engine)
