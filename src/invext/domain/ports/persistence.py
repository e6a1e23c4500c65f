"""Ports for persisting inventory extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from invext.domain.model import Extension, ExtensionMetadata


class StorageError(RuntimeError):
    """Raised when the extension store fails to read or write."""


@runtime_checkable
class ExtensionStore(Protocol):
    """Persistence contract used by a reconciliation pass.

    ``load`` commits an extension under an id that is not yet present,
    ``reload`` replaces the extension already committed under that id.
    Implementations raise ``StorageError`` on failure.
    """

    def list_loaded(self) -> Sequence[ExtensionMetadata]: ...

    def load(self, extension: Extension) -> None: ...

    def reload(self, extension: Extension) -> None: ...
