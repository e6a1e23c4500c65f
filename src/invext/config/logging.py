"""Logging setup for the invext command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for console output.

    Reconciliation messages are emitted through module loggers under ``invext``;
    this only attaches a handler and a compact format to the root logger.
    ``force=True`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
