"""Orchestrator for one reconciliation pass.

Staged extensions are handled strictly in staging order, one at a time: an
extension is matched, decided and written before the next one is looked at.
The first ``StorageError`` ends the pass; whatever the store committed before
it stays committed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .conflicts import LoadConflict, find_conflict
from .policy import LoadAction, decide, report_decision

if TYPE_CHECKING:
    from collections.abc import Iterable

    from invext.domain.model import Extension, ExtensionMetadata
    from invext.domain.ports import ExtensionStore

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationResult:
    """Conflict report and store effects of one pass."""

    conflicts: list[LoadConflict] = field(default_factory=list["LoadConflict"])
    loaded: int = 0
    reloaded: int = 0
    skipped: int = 0


@dataclass(slots=True)
class ReconciliationEngine:
    """Run reconciliation passes against one store."""

    store: ExtensionStore
    override_enabled: bool = False

    def reconcile(self, staged: Iterable[Extension]) -> ReconciliationResult:
        """Reconcile ``staged`` against a fresh snapshot of the store."""

        log.info("Loading staged extensions into database...")
        return _run_pass(
            staged,
            list(self.store.list_loaded()),
            override_enabled=self.override_enabled,
            store=self.store,
        )


def reconcile(
    staged: Iterable[Extension],
    loaded: Iterable[ExtensionMetadata],
    *,
    override_enabled: bool,
    store: ExtensionStore,
) -> list[LoadConflict]:
    """Load or reload ``staged`` through ``store`` and return every conflict met."""

    return _run_pass(
        staged,
        list(loaded),
        override_enabled=override_enabled,
        store=store,
    ).conflicts


def _run_pass(
    staged: Iterable[Extension],
    remaining: list[ExtensionMetadata],
    *,
    override_enabled: bool,
    store: ExtensionStore,
) -> ReconciliationResult:
    result = ReconciliationResult()

    for extension in staged:
        conflict = find_conflict(extension.metadata, remaining)
        decision = decide(conflict, override_enabled=override_enabled)

        if conflict is None:
            log.info("Loading extension '%s'.", extension.id)
            store.load(extension)
            result.loaded += 1
            continue

        report_decision(conflict, decision)
        if decision.action is LoadAction.RELOAD:
            store.reload(extension)
            result.reloaded += 1
        else:
            result.skipped += 1
        result.conflicts.append(conflict)

    log.info(
        "Finished reconciliation: loaded=%s, reloaded=%s, skipped=%s, conflicts=%s",
        result.loaded,
        result.reloaded,
        result.skipped,
        len(result.conflicts),
    )
    return result
