"""Reconciliation of staged extensions against the extensions already loaded.

Layered flow:
1) stage parsed extensions, rejecting duplicate ids
2) match each staged extension against the loaded snapshot
3) classify the differences of a match as a conflict
4) decide load / reload / skip from the conflict and the override flag
5) apply the decision through the extension store
"""

from __future__ import annotations

from .conflicts import LoadConflict, NameChange, VersionChange, find_conflict
from .diff import ExtensionDiff, VersionOrder, diff_metadata
from .engine import ReconciliationEngine, ReconciliationResult, reconcile
from .policy import DecisionReason, LoadAction, LoadDecision, decide, report_decision
from .staging import DuplicateExtensionError, StagingSet, stage_extensions

__all__ = [
    "DecisionReason",
    "DuplicateExtensionError",
    "ExtensionDiff",
    "LoadAction",
    "LoadConflict",
    "LoadDecision",
    "NameChange",
    "ReconciliationEngine",
    "ReconciliationResult",
    "StagingSet",
    "VersionChange",
    "VersionOrder",
    "decide",
    "diff_metadata",
    "find_conflict",
    "reconcile",
    "report_decision",
    "stage_extensions",
]
