"""Discover and parse extension files from a directory."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from invext.domain.model import InvalidVersionError
from invext.domain.ports import ExtensionSourceError

from .schema import ExtensionDocument
from .translator import translate_extension

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from invext.domain.model import Extension

log = logging.getLogger(__name__)

EXTENSION_SUFFIX: Final[str] = ".toml"


def discover_extension_files(directory: Path) -> list[Path]:
    """Return the extension files directly inside ``directory``, sorted by name."""

    if not directory.is_dir():
        raise ExtensionSourceError("extensions directory does not exist", path=directory)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise ExtensionSourceError(f"cannot list directory: {exc}", path=directory) from exc
    return sorted(
        (entry for entry in entries if entry.is_file() and entry.suffix == EXTENSION_SUFFIX),
        key=lambda entry: entry.name,
    )


def parse_extension_file(path: Path) -> Extension:
    """Read, validate and translate one extension file."""

    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except OSError as exc:
        raise ExtensionSourceError(f"cannot read file: {exc}", path=path) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ExtensionSourceError(f"invalid TOML: {exc}", path=path) from exc

    try:
        document = ExtensionDocument.model_validate(payload)
        return translate_extension(document)
    except ValidationError as exc:
        raise ExtensionSourceError(f"invalid extension definition: {exc}", path=path) from exc
    except InvalidVersionError as exc:
        raise ExtensionSourceError(str(exc), path=path) from exc


@dataclass(slots=True)
class DirectoryExtensionSource:
    """Extension source reading every ``*.toml`` file of one directory."""

    directory: Path

    def __call__(self) -> Iterator[Extension]:
        for path in discover_extension_files(self.directory):
            log.info("Located extension file: %s", path)
            yield parse_extension_file(path)
