"""Public interface for the TOML extension file adapter."""

from __future__ import annotations

from .schema import ExtensionDocument
from .source import (
    DirectoryExtensionSource,
    discover_extension_files,
    parse_extension_file,
)
from .translator import translate_extension

__all__ = [
    "DirectoryExtensionSource",
    "ExtensionDocument",
    "discover_extension_files",
    "parse_extension_file",
    "translate_extension",
]
