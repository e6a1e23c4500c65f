"""SQLAlchemy table metadata for the extension store."""

from __future__ import annotations

from sqlalchemy import (
    JSON,
    Column,
    Dialect,
    ForeignKey,
    String,
    Table,
    TypeDecorator,
    orm,
)

from invext.domain.model import Version


class VersionType(TypeDecorator[Version]):
    impl = String
    cache_ok = True

    def process_bind_param(self, value: Version | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Version | None:
        _ = dialect
        if value is None:
            return None
        return Version.parse(value)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Core tables -----------------------------------------------------------------

extension_table = Table(
    "extension",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("display_name", String, nullable=False),
    Column("version", VersionType, nullable=False),
)

manufacturer_table = Table(
    "manufacturer",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("display_name", String, nullable=False),
)

classification_table = Table(
    "classification",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("display_name", String, nullable=False),
)

device_table = Table(
    "device",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column(
        "extension_id",
        String,
        ForeignKey("extension.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("display_name", String, nullable=False),
    Column("manufacturer_id", String, ForeignKey("manufacturer.id"), nullable=False),
    Column("classification_id", String, ForeignKey("classification.id"), nullable=False),
    Column("primary_model_identifiers", JSON, nullable=False, default=list),
    Column("extended_model_identifiers", JSON, nullable=False, default=list),
)

# Ownership -------------------------------------------------------------------

manufacturer_extension_table = Table(
    "manufacturer_extension",
    mapper_registry.metadata,
    Column(
        "manufacturer_id",
        String,
        ForeignKey("manufacturer.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "extension_id",
        String,
        ForeignKey("extension.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

classification_extension_table = Table(
    "classification_extension",
    mapper_registry.metadata,
    Column(
        "classification_id",
        String,
        ForeignKey("classification.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "extension_id",
        String,
        ForeignKey("extension.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
