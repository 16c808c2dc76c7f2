from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cdmpy.app import load_project
from cdmpy.config import MissingConfigurationError
from cdmpy.domain.resolution import NoContainedDefinitionFoundError, keep_newest
from tests.helpers.datafiles import library_tables, project_tables, write_yaml

if TYPE_CHECKING:
    from pathlib import Path


def _write_project(project_dir: Path) -> None:
    write_yaml(project_dir / "src" / "project.yaml", project_tables())


def test_load_project_from_a_single_directory(tmp_path: Path) -> None:
    write_yaml(tmp_path / "src" / "library.yaml", library_tables())
    _write_project(tmp_path)

    loaded = load_project(tmp_path)

    assert len(loaded.files) == 2
    assert loaded.project.wire_cables["WC1"].wire_cable_type is loaded.library.cable_types["C1"]
    assert loaded.config.config_path is None


def test_default_libraries_come_first(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    default_dir = tmp_path / "defaults"
    write_yaml(default_dir / "catalog.yaml", library_tables())
    monkeypatch.setenv("CDMPY_LIBRARY_DIR", str(default_dir))
    project_dir = tmp_path / "project"
    _write_project(project_dir)

    loaded = load_project(project_dir)

    assert [bag.source_path for bag in loaded.files] == [
        default_dir / "catalog.yaml",
        project_dir / "src" / "project.yaml",
    ]
    assert loaded.library.wire_types["W1"].source_path == default_dir / "catalog.yaml"


def test_default_libraries_can_be_skipped(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    default_dir = tmp_path / "defaults"
    write_yaml(default_dir / "catalog.yaml", library_tables())
    monkeypatch.setenv("CDMPY_LIBRARY_DIR", str(default_dir))
    project_dir = tmp_path / "project"
    _write_project(project_dir)

    with pytest.raises(NoContainedDefinitionFoundError):
        load_project(project_dir, use_default_libraries=False)

    write_yaml(project_dir / "cdm_config.yaml", {"no_default_libraries": True})
    with pytest.raises(NoContainedDefinitionFoundError):
        load_project(project_dir)


def test_configured_library_files_and_directories(tmp_path: Path) -> None:
    tables = library_tables()
    shared = tmp_path / "shared"
    write_yaml(shared / "wires.yaml", {"wire_type": tables["wire_type"]})
    write_yaml(
        shared / "more" / "types.yaml",
        {key: value for key, value in tables.items() if key != "wire_type"},
    )
    project_dir = tmp_path / "project"
    _write_project(project_dir)
    write_yaml(
        project_dir / "src" / "cdm_config.yaml",
        {"library_files": ["../../shared/wires.yaml", str(shared / "more")]},
    )

    loaded = load_project(project_dir, decide=keep_newest)

    assert len(loaded.files) == 3
    assert loaded.files[-1].source_path == project_dir / "src" / "project.yaml"
    assert loaded.library.term_cable_types["T1"].core is loaded.library.wire_types["W1"]


def test_missing_configured_library_is_reported(tmp_path: Path) -> None:
    _write_project(tmp_path)
    write_yaml(tmp_path / "cdm_config.yaml", {"library_files": ["missing.yaml"]})

    with pytest.raises(MissingConfigurationError, match="missing.yaml") as exc:
        load_project(tmp_path)

    assert exc.value.path == tmp_path / "missing.yaml"


def test_project_dir_must_be_a_directory(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        load_project(tmp_path / "absent")
