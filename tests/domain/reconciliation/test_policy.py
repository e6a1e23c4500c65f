from __future__ import annotations

import logging

import pytest

from invext.domain.model import Version
from invext.domain.reconciliation.conflicts import LoadConflict, NameChange, VersionChange
from invext.domain.reconciliation.policy import (
    DecisionReason,
    LoadAction,
    LoadDecision,
    decide,
    report_decision,
)


def _version_change(loaded: str, staged: str) -> VersionChange:
    return VersionChange(loaded_version=Version.parse(loaded), staged_version=Version.parse(staged))


UPGRADE = LoadConflict(id="acme", version_change=_version_change("1.0.0", "2.0.0"))
DOWNGRADE = LoadConflict(id="acme", version_change=_version_change("2.0.0", "1.0.0"))
UNCHANGED = LoadConflict(id="acme")
RENAMED = LoadConflict(id="acme", name_change=NameChange(loaded_name="Foo", staged_name="Bar"))


@pytest.mark.parametrize("override_enabled", [False, True])
def test_new_extension_is_loaded(override_enabled: bool) -> None:
    decision = decide(None, override_enabled=override_enabled)

    assert decision == LoadDecision(action=LoadAction.LOAD, reason=DecisionReason.NEW)


@pytest.mark.parametrize("override_enabled", [False, True])
def test_unchanged_extension_is_skipped(override_enabled: bool) -> None:
    decision = decide(UNCHANGED, override_enabled=override_enabled)

    assert decision == LoadDecision(action=LoadAction.SKIP, reason=DecisionReason.UNCHANGED)


@pytest.mark.parametrize("override_enabled", [False, True])
def test_name_change_alone_is_skipped(override_enabled: bool) -> None:
    decision = decide(RENAMED, override_enabled=override_enabled)

    assert decision == LoadDecision(action=LoadAction.SKIP, reason=DecisionReason.NAME_CHANGED)


@pytest.mark.parametrize("conflict", [UPGRADE, DOWNGRADE])
def test_version_change_without_override_is_skipped(conflict: LoadConflict) -> None:
    decision = decide(conflict, override_enabled=False)

    assert decision == LoadDecision(
        action=LoadAction.SKIP,
        reason=DecisionReason.OVERRIDE_DISABLED,
    )


def test_upgrade_with_override_is_reloaded() -> None:
    decision = decide(UPGRADE, override_enabled=True)

    assert decision == LoadDecision(action=LoadAction.RELOAD, reason=DecisionReason.UPDATE)


def test_downgrade_with_override_is_skipped() -> None:
    decision = decide(DOWNGRADE, override_enabled=True)

    assert decision == LoadDecision(action=LoadAction.SKIP, reason=DecisionReason.NEWER_LOADED)


def test_prerelease_to_release_counts_as_upgrade() -> None:
    conflict = LoadConflict(id="acme", version_change=_version_change("1.0.0-rc.1", "1.0.0"))

    assert decide(conflict, override_enabled=True).action is LoadAction.RELOAD


def test_report_update_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    report_decision(UPGRADE, decide(UPGRADE, override_enabled=True))

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "Updating extension 'acme' from v1.0.0 to v2.0.0." in caplog.text


def test_report_override_disabled_logs_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    report_decision(UPGRADE, decide(UPGRADE, override_enabled=False))

    assert [record.levelno for record in caplog.records] == [logging.ERROR]
    assert "load override is disabled" in caplog.text
    assert "'acme' v2.0.0" in caplog.text


def test_report_newer_loaded_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    report_decision(DOWNGRADE, decide(DOWNGRADE, override_enabled=True))

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "a newer version v2.0.0 is already loaded" in caplog.text


def test_report_unchanged_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    report_decision(UNCHANGED, decide(UNCHANGED, override_enabled=False))

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "already loaded and its version has not been changed" in caplog.text


def test_report_name_change_logs_names_before_outcome(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    report_decision(RENAMED, decide(RENAMED, override_enabled=True))

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert "conflicting display names 'Foo' and 'Bar'" in messages[0]
    assert "display name changed but its version has not" in messages[1]
