"""Load/reload/skip policy for staged extensions.

``decide`` is the only place where the override flag and the version
direction are combined:

- no conflict -> load
- no version change -> skip
- version change without override -> skip, whichever the direction
- version change with override -> reload upgrades, skip downgrades

Name changes never gate the action; they are only reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .conflicts import LoadConflict

log = logging.getLogger(__name__)


class LoadAction(StrEnum):
    """Store effect chosen for one staged extension."""

    LOAD = "load"
    RELOAD = "reload"
    SKIP = "skip"


class DecisionReason(StrEnum):
    NEW = "new"
    UNCHANGED = "unchanged"
    NAME_CHANGED = "name_changed"
    OVERRIDE_DISABLED = "override_disabled"
    UPDATE = "update"
    NEWER_LOADED = "newer_loaded"


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadDecision:
    action: LoadAction
    reason: DecisionReason


def decide(conflict: LoadConflict | None, *, override_enabled: bool) -> LoadDecision:
    """Resolve the action for a staged extension and its conflict, if any."""

    if conflict is None:
        return LoadDecision(action=LoadAction.LOAD, reason=DecisionReason.NEW)

    if conflict.version_change is None:
        reason = (
            DecisionReason.NAME_CHANGED
            if conflict.name_change is not None
            else DecisionReason.UNCHANGED
        )
        return LoadDecision(action=LoadAction.SKIP, reason=reason)

    if not override_enabled:
        return LoadDecision(action=LoadAction.SKIP, reason=DecisionReason.OVERRIDE_DISABLED)

    if conflict.should_reload():
        return LoadDecision(action=LoadAction.RELOAD, reason=DecisionReason.UPDATE)
    return LoadDecision(action=LoadAction.SKIP, reason=DecisionReason.NEWER_LOADED)


def report_decision(conflict: LoadConflict, decision: LoadDecision) -> None:
    """Log what happened to a conflicting extension."""

    if conflict.name_change is not None:
        log.warning(
            "Loaded and staged extension with ID '%s' have conflicting display names "
            "'%s' and '%s'.",
            conflict.id,
            conflict.name_change.loaded_name,
            conflict.name_change.staged_name,
        )

    version_change = conflict.version_change
    match decision.reason:
        case DecisionReason.UPDATE if version_change is not None:
            log.warning(
                "Updating extension '%s' from v%s to v%s.",
                conflict.id,
                version_change.loaded_version,
                version_change.staged_version,
            )
        case DecisionReason.OVERRIDE_DISABLED if version_change is not None:
            log.error(
                "Skipping extension '%s' v%s because a different version v%s is already "
                "loaded and load override is disabled.",
                conflict.id,
                version_change.staged_version,
                version_change.loaded_version,
            )
        case DecisionReason.NEWER_LOADED if version_change is not None:
            log.warning(
                "Skipping extension '%s' v%s because a newer version v%s is already loaded.",
                conflict.id,
                version_change.staged_version,
                version_change.loaded_version,
            )
        case DecisionReason.NAME_CHANGED:
            log.warning(
                "Skipping extension '%s' because its display name changed but its version "
                "has not.",
                conflict.id,
            )
        case _:
            log.warning(
                "Skipping extension '%s' because it is already loaded and its version has "
                "not been changed.",
                conflict.id,
            )
