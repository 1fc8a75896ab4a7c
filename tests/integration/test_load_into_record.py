"""Integration tests for loading config files and binding them onto records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from envbind import (
    LoadError,
    RequiredFieldMissingError,
    load,
    load_into,
    tagged,
)


@dataclass
class Profile:
    name: str = ""
    age: int = 0


@dataclass
class Database:
    host: str = tagged("host,required")
    port: int = tagged("port,default=5432", default=0)


@dataclass
class AppSettings:
    name: str = tagged("name", default="")
    debug: bool = tagged("debug,default=false", default=True)
    ratio: float = tagged("ratio", default=0.0)
    database: Database = tagged("database", default_factory=lambda: Database(host=""))


def test_load_into_binds_env_file_end_to_end(tmp_path: Path) -> None:
    """Valid lines should reach the record; comments, sections, and junk are dropped."""

    source = tmp_path / "profile.env"
    source.write_text(
        "name=alice\nage:30\n# comment\n[section]\njusttext\n",
        encoding="utf-8",
    )

    assert load(source) == {"name": "alice", "age": "30"}

    profile = Profile()
    load_into(source, profile)

    assert profile == Profile(name="alice", age=30)


def test_load_defaults_to_dot_env_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Loading without a path should read `.env` from the working directory."""

    (tmp_path / ".env").write_text("name=bob\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load() == {"name": "bob"}
    assert load("") == {"name": "bob"}


def test_load_raises_load_error_for_missing_file(tmp_path: Path) -> None:
    """A missing file should surface as `LoadError` chained from the OS error."""

    missing = tmp_path / "missing.env"

    with pytest.raises(LoadError, match="Config file not found") as excinfo:
        load(missing)

    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_reads_yaml_sources_with_typed_and_nested_values(tmp_path: Path) -> None:
    """YAML sources should keep native scalars and nested mappings."""

    source = tmp_path / "settings.yaml"
    source.write_text(
        """
name: billing
debug: true
ratio: 2
database:
  host: db.internal
""".strip(),
        encoding="utf-8",
    )

    settings = AppSettings()
    load_into(source, settings)

    assert settings.name == "billing"
    assert settings.debug is True
    assert settings.ratio == 2.0
    assert settings.database == Database(host="db.internal", port=5432)


def test_load_into_applies_defaults_for_absent_yaml_keys(tmp_path: Path) -> None:
    """Absent keys with a `default=` directive should take the default."""

    source = tmp_path / "settings.yml"
    source.write_text("name: billing\n", encoding="utf-8")

    settings = AppSettings()
    load_into(source, settings)

    assert settings.debug is False
    assert settings.database.host == ""


def test_load_into_reports_required_nested_field(tmp_path: Path) -> None:
    """A missing required nested field should abort before later siblings are bound."""

    source = tmp_path / "settings.yaml"
    source.write_text("database:\n  port: 6543\n", encoding="utf-8")

    settings = AppSettings()

    with pytest.raises(RequiredFieldMissingError) as excinfo:
        load_into(source, settings)

    assert excinfo.value.key == "host"
    assert settings.database.port == 0


def test_load_treats_empty_yaml_document_as_empty_mapping(tmp_path: Path) -> None:
    """An empty YAML document should load as an empty mapping."""

    source = tmp_path / "empty.yaml"
    source.write_text("", encoding="utf-8")

    assert load(source) == {}


def test_load_rejects_yaml_with_non_mapping_root(tmp_path: Path) -> None:
    """YAML sequences at the root should fail as invalid config files."""

    source = tmp_path / "list.yaml"
    source.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(LoadError, match="top-level mapping"):
        load(source)


def test_load_rejects_invalid_yaml_syntax(tmp_path: Path) -> None:
    """Broken YAML should fail as an invalid config file."""

    source = tmp_path / "broken.yaml"
    source.write_text("name: [unclosed\n", encoding="utf-8")

    with pytest.raises(LoadError, match="Invalid config file"):
        load(source)


def test_load_reports_non_utf8_env_file_with_encoding_hint(tmp_path: Path) -> None:
    """Undecodable env files should fail with an encoding hint, not a YAML one."""

    source = tmp_path / "latin1.env"
    source.write_bytes("name=caf\xe9\n".encode("latin-1"))

    with pytest.raises(LoadError, match="is not valid UTF-8") as excinfo:
        load(source)

    assert excinfo.value.hint == "Re-save the file with UTF-8 encoding."
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
