"""Extension loading configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_flag

DEFAULT_EXTENSIONS_DIR: Final[Path] = Path("extensions")


@dataclass(frozen=True, slots=True)
class ExtensionsConfig:
    directory: Path = DEFAULT_EXTENSIONS_DIR
    load_override: bool = False


def get_extensions_config() -> ExtensionsConfig:
    env_dir = os.getenv("INVEXT_EXTENSIONS_DIR")
    directory = (
        Path(env_dir).expanduser() if env_dir and env_dir.strip() else DEFAULT_EXTENSIONS_DIR
    )
    return ExtensionsConfig(
        directory=directory,
        load_override=env_flag("INVEXT_LOAD_OVERRIDE"),
    )
