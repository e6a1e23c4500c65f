"""Public domain model surface."""

from __future__ import annotations

from invext.domain.model.extension import (
    Classification,
    Device,
    Extension,
    ExtensionMetadata,
    Manufacturer,
    device_id_for,
)
from invext.domain.model.primitives import (
    ClassificationId,
    DeviceId,
    ExtensionId,
    InvalidVersionError,
    ManufacturerId,
    Version,
)

__all__ = [  # noqa: RUF022
    # primitives
    "ExtensionId",
    "ManufacturerId",
    "ClassificationId",
    "DeviceId",
    "Version",
    "InvalidVersionError",
    # extensions
    "ExtensionMetadata",
    "Extension",
    "Manufacturer",
    "Classification",
    "Device",
    "device_id_for",
]
