from __future__ import annotations

from pathlib import Path

import pytest

from invext.config import (
    ConfigurationError,
    ExtensionsConfig,
    StorageConfig,
    env_flag,
    get_database_config,
    get_extensions_config,
    get_storage_config,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("off", False)],
)
def test_env_flag_parses_common_spellings(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: bool,
) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert env_flag("EXAMPLE_FLAG") is expected


def test_env_flag_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_FLAG", raising=False)

    assert env_flag("EXAMPLE_FLAG") is False
    assert env_flag("EXAMPLE_FLAG", default=True) is True

    monkeypatch.setenv("EXAMPLE_FLAG", "  ")
    assert env_flag("EXAMPLE_FLAG", default=True) is True


def test_env_flag_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(ConfigurationError, match="EXAMPLE_FLAG"):
        env_flag("EXAMPLE_FLAG")


def test_storage_config_builds_sqlite_uri(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path / "data")

    uri = config.database_uri()

    assert uri == f"sqlite+pysqlite:///{(tmp_path / 'data').resolve() / 'invext.db'}"
    assert (tmp_path / "data").is_dir()


def test_storage_config_reads_data_dir_from_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("INVEXT_DATA_DIR", str(tmp_path))

    assert get_storage_config().data_dir == tmp_path


def test_database_config_prefers_explicit_uri(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"


def test_database_config_falls_back_to_storage(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)

    config = get_database_config(storage=StorageConfig(data_dir=tmp_path))

    assert config.uri.endswith("invext.db")
    assert str(tmp_path.resolve()) in config.uri


def test_extensions_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INVEXT_EXTENSIONS_DIR", raising=False)
    monkeypatch.delenv("INVEXT_LOAD_OVERRIDE", raising=False)

    assert get_extensions_config() == ExtensionsConfig(
        directory=Path("extensions"),
        load_override=False,
    )


def test_extensions_config_reads_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("INVEXT_EXTENSIONS_DIR", str(tmp_path))
    monkeypatch.setenv("INVEXT_LOAD_OVERRIDE", "true")

    config = get_extensions_config()

    assert config.directory == tmp_path
    assert config.load_override is True
