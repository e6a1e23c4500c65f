"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import ExtensionStore, StorageError
from .source import ExtensionSource, ExtensionSourceError
from .unit_of_work import (
    ExtensionRepositories,
    ExtensionUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ExtensionRepositories",
    "ExtensionSource",
    "ExtensionSourceError",
    "ExtensionStore",
    "ExtensionUnitOfWork",
    "RepositoryCollection",
    "StorageError",
    "UnitOfWork",
]
