"""Repository error hierarchy.

Every error raised by a repository carries the repository that raised it so
log lines and tracebacks name the owner (e.g. "SqlAssetRepository: Asset with
ID=... was not found").  Store-level exceptions are chained via ``raise ...
from exc``; nothing is swallowed.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(RuntimeError):
    """Base error for every repository failure."""

    def __init__(self, repository: Any, message: str) -> None:
        self.repository = repository
        self.message = message
        super().__init__(f"{type(repository).__name__}: {message}")


class ConfigurationError(RepositoryError):
    """Repository is misconfigured (entity type unset, not instantiable or not an Entity)."""


class NotFound(RepositoryError):
    """A required lookup found nothing."""

    def __init__(self, repository: Any, entity_type: type, key: Any) -> None:
        self.entity_type = entity_type
        self.key = key
        super().__init__(repository, f"{entity_type.__name__} with ID={key} was not found")


class PersistenceFailure(RepositoryError):
    """The underlying store rejected a write."""


class UnsupportedOperation(RepositoryError):
    """A non-read operation was routed through the caching pass-through path."""
