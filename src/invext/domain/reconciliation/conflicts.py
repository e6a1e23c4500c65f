"""Conflicts between staged extensions and extensions already loaded.

A staged extension can conflict with at most one loaded extension, and the
other way round:

- conflicts only arise when a staged and a loaded extension share an id
- loaded ids are unique (primary key of the store)
- staged ids are unique (rejected by the staging set)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .diff import diff_metadata

if TYPE_CHECKING:
    from invext.domain.model import ExtensionId, ExtensionMetadata, Version


@dataclass(frozen=True, slots=True, kw_only=True)
class NameChange:
    """The display name of a staged extension differs from its loaded counterpart."""

    loaded_name: str
    staged_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionChange:
    """The version of a staged extension differs from its loaded counterpart."""

    loaded_version: Version
    staged_version: Version

    @property
    def is_upgrade(self) -> bool:
        return self.loaded_version < self.staged_version


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadConflict:
    """A staged extension whose id is already loaded."""

    id: ExtensionId
    name_change: NameChange | None = None
    version_change: VersionChange | None = None

    def should_reload(self) -> bool:
        """Whether the staged version supersedes the loaded one.

        The override flag is not consulted here; ``policy.decide`` applies it
        first.
        """

        if self.version_change is None:
            return False
        return self.version_change.is_upgrade


def find_conflict(
    staged: ExtensionMetadata,
    loaded: list[ExtensionMetadata],
) -> LoadConflict | None:
    """Return the conflict between ``staged`` and the first loaded entry sharing its id.

    The matched entry is removed from ``loaded`` so that later calls in the
    same pass cannot match it again.
    """

    for index, candidate in enumerate(loaded):
        diff = diff_metadata(candidate, staged)
        if diff is None:
            continue

        name_change = (
            NameChange(loaded_name=candidate.display_name, staged_name=staged.display_name)
            if diff.is_name_change
            else None
        )
        # a version difference under a name change is not reported as a version change
        version_change = (
            VersionChange(loaded_version=candidate.version, staged_version=staged.version)
            if diff.is_update or diff.is_downgrade
            else None
        )

        del loaded[index]
        return LoadConflict(
            id=candidate.id,
            name_change=name_change,
            version_change=version_change,
        )

    return None
