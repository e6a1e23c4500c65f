from __future__ import annotations

import logging

import pytest

from invext.domain.reconciliation.staging import (
    DuplicateExtensionError,
    StagingSet,
    stage_extensions,
)
from tests.helpers.extensions import make_extension


def test_staging_set_keeps_staging_order() -> None:
    staging = StagingSet()
    for extension_id in ("zeta", "alpha", "mu"):
        staging.stage(make_extension(extension_id))

    assert [extension.id for extension in staging] == ["zeta", "alpha", "mu"]
    assert len(staging) == 3


def test_staging_set_rejects_duplicate_ids() -> None:
    staging = StagingSet()
    first = make_extension("acme", name="First")
    staging.stage(first)

    with pytest.raises(DuplicateExtensionError) as exc:
        staging.stage(make_extension("acme", name="Second"))

    assert exc.value.extension_id == "acme"
    assert list(staging) == [first]


def test_stage_extensions_drops_duplicates_and_keeps_first(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)
    first = make_extension("acme", name="First")
    second = make_extension("globex")
    duplicate = make_extension("acme", name="Second")

    staging, duplicates = stage_extensions([first, second, duplicate])

    assert list(staging) == [first, second]
    assert duplicates == ["acme"]
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert [record.getMessage() for record in errors] == [
        "Extension with ID 'acme' already staged, skipping."
    ]
    assert "Staging extension 'globex'." in caplog.text


def test_stage_extensions_with_nothing_to_stage() -> None:
    staging, duplicates = stage_extensions([])

    assert len(staging) == 0
    assert duplicates == []
