from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cdmpy.adapters.datafile import DataFileError, load_datafile, parse_project_dir
from cdmpy.adapters.datafile.schema import CableTypeRecord, WireTypeRecord
from cdmpy.domain.model import EntityKind
from tests.helpers.datafiles import write_yaml

if TYPE_CHECKING:
    from pathlib import Path


def test_load_datafile_decodes_known_tables(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path / "cables.yaml",
        {
            "cable_type": {
                "C1": {
                    "cable_type_code": "SOOW",
                    "cable_cores": {"a": {"type": "W1", "is_wire": True}},
                    "unexpected": "ignored",
                }
            },
            "wire_type": {"W1": {"material": "copper"}},
            "not_a_kind": {"X": {}},
        },
    )

    bag = load_datafile(path)

    assert bag.source_path == path
    assert [kind for kind, _records in bag.tables()] == [
        EntityKind.WIRE_TYPE,
        EntityKind.CABLE_TYPE,
    ]
    cable = bag.cable_type["C1"] if bag.cable_type else None
    assert isinstance(cable, CableTypeRecord)
    assert cable.cable_cores["a"].type_str == "W1"
    assert cable.cross_section == "Circular"
    assert not bag.is_empty()


def test_record_without_body_decodes_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "wires.yaml"
    path.write_text("wire_type:\n  W1:\n", encoding="utf-8")

    bag = load_datafile(path)

    assert bag.wire_type == {"W1": WireTypeRecord()}


def test_empty_document_yields_an_empty_bag(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("# nothing yet\n", encoding="utf-8")

    bag = load_datafile(path)

    assert bag.is_empty()
    assert bag.source_path == path


def test_invalid_yaml_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("wire_type: [unclosed\n", encoding="utf-8")

    with pytest.raises(DataFileError, match="broken.yaml") as exc:
        load_datafile(path)

    assert exc.value.path == path


def test_undecodable_bytes_name_the_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_bytes(b"wire_type:\n  W1:\n    material: \xff\xfe\n")

    with pytest.raises(DataFileError, match="bad.yaml") as exc:
        load_datafile(path)

    assert exc.value.path == path
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_unreadable_path_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "folder.yaml"
    path.mkdir()

    with pytest.raises(DataFileError, match="folder.yaml"):
        load_datafile(path)


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    path = write_yaml(tmp_path / "list.yaml", ["wire_type"])

    with pytest.raises(DataFileError, match="expected a mapping at top level, got list"):
        load_datafile(path)


def test_schema_violations_are_reported(tmp_path: Path) -> None:
    path = write_yaml(tmp_path / "project.yaml", {"pathway": {"P1": {"length": 3}}})

    with pytest.raises(DataFileError, match="project.yaml"):
        load_datafile(path)


def test_parse_project_dir_walks_recursively_in_sorted_order(tmp_path: Path) -> None:
    write_yaml(tmp_path / "src" / "b.yml", {"wire_type": {"W2": {"material": "copper"}}})
    write_yaml(tmp_path / "src" / "a.yaml", {"wire_type": {"W1": {"material": "copper"}}})
    write_yaml(tmp_path / "lib" / "nested" / "c.yaml", {})
    write_yaml(tmp_path / "src" / "cdm_config.yaml", {"no_default_libraries": True})
    (tmp_path / "notes.txt").write_text("not data", encoding="utf-8")

    bags = parse_project_dir(tmp_path)

    assert [bag.source_path for bag in bags] == [
        tmp_path / "lib" / "nested" / "c.yaml",
        tmp_path / "src" / "a.yaml",
        tmp_path / "src" / "b.yml",
    ]


def test_parse_project_dir_requires_a_directory(tmp_path: Path) -> None:
    path = write_yaml(tmp_path / "file.yaml", {})

    with pytest.raises(NotADirectoryError):
        parse_project_dir(path)
