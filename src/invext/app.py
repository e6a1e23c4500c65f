"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from invext.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyExtensionUnitOfWork,
    is_started,
    startup,
)
from invext.adapters.toml import DirectoryExtensionSource
from invext.config import get_extensions_config
from invext.domain.reconciliation import (
    ReconciliationEngine,
    ReconciliationResult,
    stage_extensions,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from invext.domain.model import Extension, ExtensionId, ExtensionMetadata
    from invext.domain.ports import ExtensionSource, ExtensionUnitOfWork

UnitOfWorkFactory = Callable[[], "ExtensionUnitOfWork"]


log = getLogger(__name__)


@dataclass(slots=True)
class LoadExtensionsResult:
    """Outcome of one extension load run."""

    staged: int
    duplicates: list[ExtensionId] = field(default_factory=list["ExtensionId"])
    reconciliation: ReconciliationResult = field(default_factory=ReconciliationResult)


class CommittingExtensionStore:
    """Store that commits every load and reload on its own.

    A failure therefore never rolls back extensions handled earlier in the
    same pass.
    """

    def __init__(self, uow: ExtensionUnitOfWork) -> None:
        self._uow = uow

    def list_loaded(self) -> Sequence[ExtensionMetadata]:
        return self._uow.repositories.extensions.list_loaded()

    def load(self, extension: Extension) -> None:
        self._uow.repositories.extensions.load(extension)
        self._uow.commit()

    def reload(self, extension: Extension) -> None:
        self._uow.repositories.extensions.reload(extension)
        self._uow.commit()


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyExtensionUnitOfWork


def load_extensions(
    *,
    source: ExtensionSource | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    load_override: bool | None = None,
) -> LoadExtensionsResult:
    """Parse every available extension and reconcile it with the database."""

    config = get_extensions_config()
    effective_source = source or DirectoryExtensionSource(config.directory)
    effective_override = config.load_override if load_override is None else load_override

    # parse everything up front so a broken file aborts before anything is written
    extensions = list(effective_source())
    staging, duplicates = stage_extensions(extensions)

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    log.info(
        "Starting extension load: staged=%s, duplicates=%s, override=%s",
        len(staging),
        len(duplicates),
        effective_override,
    )

    with effective_uow() as uow:
        engine = ReconciliationEngine(
            store=CommittingExtensionStore(uow),
            override_enabled=effective_override,
        )
        reconciliation = engine.reconcile(staging)

    return LoadExtensionsResult(
        staged=len(staging),
        duplicates=duplicates,
        reconciliation=reconciliation,
    )


def list_extensions(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[ExtensionMetadata]:
    """Return the metadata of every committed extension, ordered by id."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        return list(uow.repositories.extensions.list_loaded())
