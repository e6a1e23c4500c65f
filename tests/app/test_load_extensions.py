from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from invext.app import list_extensions, load_extensions
from invext.domain.model import Version
from invext.domain.ports import ExtensionSourceError, StorageError
from tests.helpers.extensions import (
    FakeExtensionSource,
    FakeExtensionStore,
    FakeExtensionUnitOfWork,
    make_extension,
    make_metadata,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from invext.adapters.sqlalchemy.unit_of_work import SqlAlchemyExtensionUnitOfWork
    from invext.domain.model import Extension


@pytest.fixture(autouse=True)
def clear_extension_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INVEXT_LOAD_OVERRIDE", raising=False)
    monkeypatch.delenv("INVEXT_EXTENSIONS_DIR", raising=False)


def test_load_extensions_commits_each_write() -> None:
    store = FakeExtensionStore([make_metadata("acme", version="1.0.0")])
    uow = FakeExtensionUnitOfWork(store)
    source = FakeExtensionSource(
        [make_extension("acme", version="1.1.0"), make_extension("globex")],
    )

    result = load_extensions(source=source, unit_of_work_factory=lambda: uow, load_override=True)

    assert result.staged == 2
    assert result.duplicates == []
    assert (result.reconciliation.loaded, result.reconciliation.reloaded) == (1, 1)
    assert uow.commits == 2
    assert store.items["acme"].version == Version.parse("1.1.0")


def test_load_extensions_reads_override_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVEXT_LOAD_OVERRIDE", "yes")
    store = FakeExtensionStore([make_metadata("acme", version="1.0.0")])
    uow = FakeExtensionUnitOfWork(store)

    load_extensions(
        source=FakeExtensionSource([make_extension("acme", version="2.0.0")]),
        unit_of_work_factory=lambda: uow,
    )

    assert ("reload", "acme") in store.calls


def test_explicit_override_wins_over_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVEXT_LOAD_OVERRIDE", "yes")
    store = FakeExtensionStore([make_metadata("acme", version="1.0.0")])
    uow = FakeExtensionUnitOfWork(store)

    result = load_extensions(
        source=FakeExtensionSource([make_extension("acme", version="2.0.0")]),
        unit_of_work_factory=lambda: uow,
        load_override=False,
    )

    assert store.calls == [("list_loaded", "")]
    assert result.reconciliation.skipped == 1


def test_load_extensions_reports_duplicates() -> None:
    store = FakeExtensionStore()
    uow = FakeExtensionUnitOfWork(store)
    first = make_extension("acme", name="First")

    result = load_extensions(
        source=FakeExtensionSource([first, make_extension("acme", name="Second")]),
        unit_of_work_factory=lambda: uow,
    )

    assert result.staged == 1
    assert result.duplicates == ["acme"]
    assert store.items["acme"].display_name == "First"


def test_storage_failure_keeps_earlier_commits() -> None:
    store = FakeExtensionStore(fail_on="second")
    uow = FakeExtensionUnitOfWork(store)
    source = FakeExtensionSource(
        [make_extension("first"), make_extension("second"), make_extension("third")],
    )

    with pytest.raises(StorageError):
        load_extensions(source=source, unit_of_work_factory=lambda: uow)

    assert uow.commits == 1
    assert uow.rollback_called
    assert list(store.items) == ["first"]


def test_source_failure_aborts_before_touching_the_store() -> None:
    opened: list[FakeExtensionUnitOfWork] = []

    def broken_source() -> Iterator[Extension]:
        yield make_extension("first")
        raise ExtensionSourceError("invalid TOML")

    def factory() -> FakeExtensionUnitOfWork:
        uow = FakeExtensionUnitOfWork(FakeExtensionStore())
        opened.append(uow)
        return uow

    with pytest.raises(ExtensionSourceError):
        load_extensions(source=broken_source, unit_of_work_factory=factory)

    assert opened == []


def _write_extension(directory: Path, extension_id: str, *, name: str, version: str) -> None:
    (directory / f"{extension_id}.toml").write_text(
        f'extension_id = "{extension_id}"\n'
        f'extension_display_name = "{name}"\n'
        f'extension_version = "{version}"\n'
        "\n"
        "[[manufacturers]]\n"
        'id = "acme-corp"\n'
        'display_name = "Acme Corporation"\n'
        "\n"
        "[[classifications]]\n"
        'id = "phone"\n'
        'display_name = "Phone"\n'
        "\n"
        "[[devices]]\n"
        'true_name = "rocket"\n'
        'display_name = "Rocket"\n'
        'manufacturer = "acme-corp"\n'
        'classification = "phone"\n',
        encoding="utf-8",
    )


def test_load_extensions_against_sqlite(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyExtensionUnitOfWork],
) -> None:
    monkeypatch.setenv("INVEXT_EXTENSIONS_DIR", str(tmp_path))
    _write_extension(tmp_path, "acme", name="Acme Devices", version="1.0.0")
    _write_extension(tmp_path, "globex", name="Globex", version="0.1.0")

    first = load_extensions(unit_of_work_factory=sqlite_unit_of_work)

    assert first.reconciliation.loaded == 2
    assert list_extensions(unit_of_work_factory=sqlite_unit_of_work) == [
        make_metadata("acme", name="Acme Devices", version="1.0.0"),
        make_metadata("globex", name="Globex", version="0.1.0"),
    ]

    _write_extension(tmp_path, "acme", name="Acme Devices", version="1.1.0")
    _write_extension(tmp_path, "globex", name="Globex", version="0.0.9")

    second = load_extensions(unit_of_work_factory=sqlite_unit_of_work, load_override=True)

    assert (
        second.reconciliation.loaded,
        second.reconciliation.reloaded,
        second.reconciliation.skipped,
    ) == (0, 1, 1)
    versions = [item.version for item in list_extensions(unit_of_work_factory=sqlite_unit_of_work)]
    assert versions == [
        Version.parse("1.1.0"),
        Version.parse("0.1.0"),
    ]
