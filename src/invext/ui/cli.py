from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from invext.adapters.toml import DirectoryExtensionSource
from invext.app import list_extensions, load_extensions
from invext.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from invext.domain.reconciliation import LoadConflict

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage inventory extensions")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load extension files into the database")
    load.add_argument(
        "--extensions-dir",
        type=str,
        help="Directory holding *.toml extension files (defaults to config)",
    )
    load.add_argument(
        "--override",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reload extensions whose staged version is newer (defaults to config)",
    )

    subparsers.add_parser("list", help="List extensions loaded in the database")

    return parser.parse_args(list(argv))


def _parse_directory(value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_dir():
        raise ValueError(f"Not a directory: {value}")
    return path


def _describe_conflict(conflict: LoadConflict) -> str:
    parts: list[str] = []
    if conflict.name_change is not None:
        parts.append(
            f"name '{conflict.name_change.loaded_name}' -> '{conflict.name_change.staged_name}'"
        )
    if conflict.version_change is not None:
        parts.append(
            f"version {conflict.version_change.loaded_version} -> "
            f"{conflict.version_change.staged_version}"
        )
    return f"{conflict.id}: {', '.join(parts) or 'unchanged'}"


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        directory = None
        if parsed_args.command == "load" and parsed_args.extensions_dir is not None:
            directory = _parse_directory(parsed_args.extensions_dir)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "load":
            result = load_extensions(
                source=DirectoryExtensionSource(directory) if directory is not None else None,
                load_override=parsed_args.override,
            )
            reconciliation = result.reconciliation
            for conflict in reconciliation.conflicts:
                log.info("Conflict %s", _describe_conflict(conflict))
            log.info(
                "Extension load finished: staged=%s, duplicates=%s, loaded=%s, reloaded=%s, "
                "skipped=%s",
                result.staged,
                len(result.duplicates),
                reconciliation.loaded,
                reconciliation.reloaded,
                reconciliation.skipped,
            )
        elif parsed_args.command == "list":
            for metadata in list_extensions():
                print(f"{metadata.id}\t{metadata.display_name}\tv{metadata.version}")  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during extension load")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
