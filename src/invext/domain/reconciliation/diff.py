"""Metadata comparison between a loaded and a staged extension.

The diff only looks at display name and version. Extension contents
(manufacturers, classifications, devices) are never compared.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invext.domain.model import ExtensionMetadata, Version


class VersionOrder(StrEnum):
    """How the staged version relates to the loaded one."""

    STAGED_HIGHER = "staged_higher"
    STAGED_LOWER = "staged_lower"
    EQUAL = "equal"

    @classmethod
    def compare(cls, staged: Version, loaded: Version) -> VersionOrder:
        if staged > loaded:
            return cls.STAGED_HIGHER
        if staged < loaded:
            return cls.STAGED_LOWER
        return cls.EQUAL


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtensionDiff:
    same_display_name: bool
    version_order: VersionOrder

    @property
    def is_name_change(self) -> bool:
        return not self.same_display_name

    @property
    def is_update(self) -> bool:
        return self.same_display_name and self.version_order is VersionOrder.STAGED_HIGHER

    @property
    def is_downgrade(self) -> bool:
        return self.same_display_name and self.version_order is VersionOrder.STAGED_LOWER


def diff_metadata(loaded: ExtensionMetadata, staged: ExtensionMetadata) -> ExtensionDiff | None:
    """Compare ``staged`` against ``loaded``.

    Returns ``None`` when the two extensions have different ids and are thus
    incomparable.
    """

    if loaded.id != staged.id:
        return None
    return ExtensionDiff(
        same_display_name=loaded.display_name == staged.display_name,
        version_order=VersionOrder.compare(staged.version, loaded.version),
    )
