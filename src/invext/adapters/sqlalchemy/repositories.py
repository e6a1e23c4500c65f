"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from invext.adapters.sqlalchemy.mappings import (
    classification_extension_table,
    classification_table,
    device_table,
    extension_table,
    manufacturer_extension_table,
    manufacturer_table,
)
from invext.domain.model import Device, ExtensionMetadata
from invext.domain.ports import StorageError

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.orm import Session

    from invext.domain.model import Classification, Extension, ExtensionId, Manufacturer

log = logging.getLogger(__name__)


class SqlAlchemyExtensionRepository:
    """Extension store operating on one session; committing is left to the unit of work."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_loaded(self) -> list[ExtensionMetadata]:
        stmt = select(extension_table).order_by(extension_table.c.id)
        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to list loaded extensions: {exc}") from exc
        return [
            ExtensionMetadata(id=row.id, display_name=row.display_name, version=row.version)
            for row in rows
        ]

    def get(self, extension_id: ExtensionId) -> ExtensionMetadata | None:
        stmt = select(extension_table).where(extension_table.c.id == extension_id)
        try:
            row = self.session.execute(stmt).one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read extension '{extension_id}': {exc}") from exc
        if row is None:
            return None
        return ExtensionMetadata(id=row.id, display_name=row.display_name, version=row.version)

    def devices_for(self, extension_id: ExtensionId) -> list[Device]:
        stmt = (
            select(device_table)
            .where(device_table.c.extension_id == extension_id)
            .order_by(device_table.c.id)
        )
        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read devices of '{extension_id}': {exc}") from exc
        return [
            Device(
                id=row.id,
                display_name=row.display_name,
                manufacturer=row.manufacturer_id,
                classification=row.classification_id,
                primary_model_identifiers=tuple(row.primary_model_identifiers),
                extended_model_identifiers=tuple(row.extended_model_identifiers),
            )
            for row in rows
        ]

    def load(self, extension: Extension) -> None:
        try:
            self.session.execute(
                insert(extension_table).values(
                    id=extension.id,
                    display_name=extension.display_name,
                    version=extension.version,
                )
            )
            self._add_contents(extension)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load extension '{extension.id}': {exc}") from exc

    def reload(self, extension: Extension) -> None:
        if self.get(extension.id) is None:
            raise StorageError(f"Cannot reload extension '{extension.id}': it is not loaded")
        try:
            self.session.execute(
                update(extension_table)
                .where(extension_table.c.id == extension.id)
                .values(display_name=extension.display_name, version=extension.version)
            )
            self._remove_contents(extension.id)
            self._add_contents(extension)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to reload extension '{extension.id}': {exc}") from exc

    def _add_contents(self, extension: Extension) -> None:
        self._add_owned(
            manufacturer_table,
            manufacturer_extension_table,
            "manufacturer_id",
            extension.id,
            extension.manufacturers,
        )
        self._add_owned(
            classification_table,
            classification_extension_table,
            "classification_id",
            extension.id,
            extension.classifications,
        )
        if not extension.devices:
            return
        self.session.execute(
            insert(device_table),
            [
                {
                    "id": device.id,
                    "extension_id": extension.id,
                    "display_name": device.display_name,
                    "manufacturer_id": device.manufacturer,
                    "classification_id": device.classification,
                    "primary_model_identifiers": list(device.primary_model_identifiers),
                    "extended_model_identifiers": list(device.extended_model_identifiers),
                }
                for device in extension.devices
            ],
        )

    def _add_owned(
        self,
        table: Table,
        ownership_table: Table,
        owner_column: str,
        extension_id: ExtensionId,
        records: list[Manufacturer] | list[Classification],
    ) -> None:
        # manufacturers and classifications are shared; the first definition keeps its name
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                continue
            seen.add(record.id)
            exists = self.session.execute(
                select(table.c.id).where(table.c.id == record.id)
            ).scalar_one_or_none()
            if exists is None:
                self.session.execute(
                    insert(table).values(id=record.id, display_name=record.display_name)
                )
            self.session.execute(
                insert(ownership_table).values(
                    {owner_column: record.id, "extension_id": extension_id}
                )
            )

    def _remove_contents(self, extension_id: ExtensionId) -> None:
        self.session.execute(
            delete(device_table).where(device_table.c.extension_id == extension_id)
        )
        self.session.execute(
            delete(manufacturer_extension_table).where(
                manufacturer_extension_table.c.extension_id == extension_id
            )
        )
        self.session.execute(
            delete(classification_extension_table).where(
                classification_extension_table.c.extension_id == extension_id
            )
        )
        orphaned_manufacturers = self.session.execute(
            delete(manufacturer_table).where(
                manufacturer_table.c.id.not_in(
                    select(manufacturer_extension_table.c.manufacturer_id)
                ),
                manufacturer_table.c.id.not_in(select(device_table.c.manufacturer_id)),
            )
        ).rowcount
        orphaned_classifications = self.session.execute(
            delete(classification_table).where(
                classification_table.c.id.not_in(
                    select(classification_extension_table.c.classification_id)
                ),
                classification_table.c.id.not_in(select(device_table.c.classification_id)),
            )
        ).rowcount
        log.debug(
            "Removed contents of extension '%s' (%s orphaned manufacturers, "
            "%s orphaned classifications)",
            extension_id,
            orphaned_manufacturers,
            orphaned_classifications,
        )
