"""Schemas for extension definition files.

Display names are read from ``common_name`` (``extension_common_name`` at the
top level); ``display_name`` is accepted as an alternative spelling.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

_NAME_ALIASES = AliasChoices("common_name", "display_name")


class ExtensionFileBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)
    _logged_extra_keys: ClassVar[set[tuple[str, str]]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        model_name = type(self).__name__
        new_keys = {key for key in extras if (model_name, key) not in self._logged_extra_keys}
        if not new_keys:
            return
        self._logged_extra_keys.update((model_name, key) for key in new_keys)
        log.warning(
            "Extension file %s: unmodeled keys: %s",
            model_name,
            ", ".join(sorted(new_keys)),
        )


class ManufacturerDocument(ExtensionFileBaseModel):
    id: str = Field(min_length=1)
    display_name: str = Field(validation_alias=_NAME_ALIASES)


class ClassificationDocument(ExtensionFileBaseModel):
    id: str = Field(min_length=1)
    display_name: str = Field(validation_alias=_NAME_ALIASES)


class DeviceDocument(ExtensionFileBaseModel):
    true_name: str = Field(min_length=1)
    display_name: str = Field(validation_alias=_NAME_ALIASES)
    manufacturer: str
    classification: str
    primary_model_identifiers: list[str] = Field(default_factory=list)
    extended_model_identifiers: list[str] = Field(default_factory=list)


class ExtensionDocument(ExtensionFileBaseModel):
    extension_id: str = Field(min_length=1)
    extension_display_name: str = Field(
        validation_alias=AliasChoices("extension_common_name", "extension_display_name")
    )
    extension_version: str
    manufacturers: list[ManufacturerDocument]
    classifications: list[ClassificationDocument] = Field(default_factory=list)
    devices: list[DeviceDocument]
