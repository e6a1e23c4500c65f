"""SQLAlchemy adapter package for invext."""

from __future__ import annotations

from .mappings import (
    VersionType,
    classification_table,
    device_table,
    extension_table,
    manufacturer_table,
    mapper_registry,
)
from .repositories import SqlAlchemyExtensionRepository
from .unit_of_work import (
    SqlAlchemyExtensionUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyExtensionRepository",
    "SqlAlchemyExtensionUnitOfWork",
    "StartupError",
    "VersionType",
    "classification_table",
    "device_table",
    "extension_table",
    "manufacturer_table",
    "mapper_registry",
    "shutdown",
    "startup",
]
