"""Inventory extensions and the catalog records they contribute."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invext.domain.model.primitives import (
        ClassificationId,
        DeviceId,
        ExtensionId,
        ManufacturerId,
        Version,
    )


def device_id_for(
    extension_id: ExtensionId,
    manufacturer_id: ManufacturerId,
    classification_id: ClassificationId,
    true_name: str,
) -> DeviceId:
    """Derive the stable device id, scoped to the contributing extension."""

    return f"{extension_id}/{manufacturer_id}/{classification_id}/{true_name}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtensionMetadata:
    """The part of an extension that reconciliation looks at."""

    id: ExtensionId
    display_name: str
    version: Version


@dataclass(frozen=True, slots=True, kw_only=True)
class Manufacturer:
    id: ManufacturerId
    display_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Classification:
    id: ClassificationId
    display_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Device:
    id: DeviceId
    display_name: str
    manufacturer: ManufacturerId
    classification: ClassificationId
    primary_model_identifiers: tuple[str, ...] = ()
    extended_model_identifiers: tuple[str, ...] = ()


@dataclass(eq=False, kw_only=True)
class Extension:
    """An extension of the inventory: metadata plus the records it contributes.

    Only ``metadata`` takes part in reconciliation; the catalog records are
    carried along and handed to the store untouched.
    """

    metadata: ExtensionMetadata
    manufacturers: list[Manufacturer] = field(default_factory=list["Manufacturer"])
    classifications: list[Classification] = field(default_factory=list["Classification"])
    devices: list[Device] = field(default_factory=list["Device"])

    @property
    def id(self) -> ExtensionId:
        return self.metadata.id

    @property
    def display_name(self) -> str:
        return self.metadata.display_name

    @property
    def version(self) -> Version:
        return self.metadata.version
