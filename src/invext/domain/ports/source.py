"""Ports for reading extension definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from invext.domain.model import Extension


class ExtensionSourceError(RuntimeError):
    """Raised when extension definitions cannot be discovered or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class ExtensionSource(Protocol):
    """Produce every extension definition available to a load run."""

    def __call__(self) -> Iterable[Extension]: ...
