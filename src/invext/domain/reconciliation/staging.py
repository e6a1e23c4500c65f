"""Staging of parsed extensions ahead of a reconciliation pass."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from invext.domain.model import Extension, ExtensionId

log = logging.getLogger(__name__)


class DuplicateExtensionError(ValueError):
    """Raised when an extension id is staged twice."""

    def __init__(self, extension_id: ExtensionId) -> None:
        self.extension_id = extension_id
        super().__init__(f"Extension with ID '{extension_id}' already staged")


class StagingSet:
    """Staged extensions keyed by id, in staging order. The first one staged wins."""

    def __init__(self) -> None:
        self._extensions: dict[ExtensionId, Extension] = {}

    def stage(self, extension: Extension) -> None:
        if extension.id in self._extensions:
            raise DuplicateExtensionError(extension.id)
        self._extensions[extension.id] = extension

    def __iter__(self) -> Iterator[Extension]:
        return iter(tuple(self._extensions.values()))

    def __len__(self) -> int:
        return len(self._extensions)


def stage_extensions(extensions: Iterable[Extension]) -> tuple[StagingSet, list[ExtensionId]]:
    """Stage every extension, dropping and logging duplicates.

    Returns the staging set and the ids of the rejected duplicates, in the
    order they were encountered.
    """

    staging = StagingSet()
    duplicates: list[ExtensionId] = []
    for extension in extensions:
        try:
            staging.stage(extension)
        except DuplicateExtensionError as exc:
            log.error(  # noqa: TRY400
                "Extension with ID '%s' already staged, skipping.", exc.extension_id
            )
            duplicates.append(exc.extension_id)
            continue
        log.info("Staging extension '%s'.", extension.id)
    return staging, duplicates
