"""Translate extension documents into domain extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invext.domain.model import (
    Classification,
    Device,
    Extension,
    ExtensionMetadata,
    Manufacturer,
    Version,
    device_id_for,
)

if TYPE_CHECKING:
    from .schema import DeviceDocument, ExtensionDocument


def translate_extension(document: ExtensionDocument) -> Extension:
    """Build an ``Extension`` from a validated document.

    Raises ``InvalidVersionError`` when ``extension_version`` is not a semantic
    version.
    """

    extension_id = document.extension_id
    return Extension(
        metadata=ExtensionMetadata(
            id=extension_id,
            display_name=document.extension_display_name,
            version=Version.parse(document.extension_version),
        ),
        manufacturers=[
            Manufacturer(id=item.id, display_name=item.display_name)
            for item in document.manufacturers
        ],
        classifications=[
            Classification(id=item.id, display_name=item.display_name)
            for item in document.classifications
        ],
        devices=[_translate_device(extension_id, item) for item in document.devices],
    )


def _translate_device(extension_id: str, document: DeviceDocument) -> Device:
    return Device(
        id=device_id_for(
            extension_id,
            document.manufacturer,
            document.classification,
            document.true_name,
        ),
        display_name=document.display_name,
        manufacturer=document.manufacturer,
        classification=document.classification,
        primary_model_identifiers=tuple(document.primary_model_identifiers),
        extended_model_identifiers=tuple(document.extended_model_identifiers),
    )
