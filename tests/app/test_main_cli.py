from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from cdmpy.domain.resolution import keep_first, keep_newest
from cdmpy.ui import cli as cli_module
from tests.helpers.datafiles import library_tables, project_tables, write_yaml

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def logging_levels(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    levels: list[int] = []

    def fake_configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
        levels.append(level)

    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)
    return levels


def _write_valid_project(project_dir: Path) -> None:
    write_yaml(project_dir / "library.yaml", library_tables())
    write_yaml(project_dir / "project.yaml", project_tables())


def test_main_cli_prints_summary(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], logging_levels: list[int]
) -> None:
    _write_valid_project(tmp_path)

    cli_module.main([str(tmp_path), "-n", "--merge-policy", "keep-first"])

    out = capsys.readouterr().out
    assert "Read 2 data file(s)" in out
    assert "  WireType: 1" in out
    assert "  WireCable: 1" in out
    assert logging_levels == [logging.INFO]


def test_main_cli_passes_options(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, logging_levels: list[int]
) -> None:
    captured: dict[str, object] = {}

    def fake_load_project(project_dir: Path, **kwargs: object) -> None:
        captured["project_dir"] = project_dir
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "load_project", fake_load_project)
    monkeypatch.setattr(cli_module, "_print_summary", lambda _loaded: None)

    cli_module.main(
        [str(tmp_path), "-v", "-q", "--no-default-libs", "--merge-policy", "keep-newest"]
    )

    assert captured == {
        "project_dir": tmp_path,
        "decide": keep_newest,
        "use_default_libraries": False,
    }
    assert logging_levels == [logging.ERROR]


def test_main_cli_defaults_to_prompting(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, logging_levels: list[int]
) -> None:
    captured: dict[str, object] = {}

    def fake_load_project(project_dir: Path, **kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "load_project", fake_load_project)
    monkeypatch.setattr(cli_module, "_print_summary", lambda _loaded: None)

    cli_module.main([str(tmp_path), "-v"])

    assert captured["decide"] is not keep_first
    assert callable(captured["decide"])
    assert captured["use_default_libraries"] is True
    assert logging_levels == [logging.DEBUG]


def test_main_cli_rejects_missing_directory(tmp_path: Path, logging_levels: list[int]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([str(tmp_path / "absent")])

    assert excinfo.value.code == 2


def test_main_cli_exits_on_resolution_error(tmp_path: Path, logging_levels: list[int]) -> None:
    write_yaml(
        tmp_path / "cables.yaml",
        {"cable_type": {"C1": {"cable_cores": {"a": {"type": "W1"}}}}},
    )

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([str(tmp_path), "--merge-policy", "keep-first"])

    assert excinfo.value.code == 1
