"""Decode YAML data files into ``FileBag`` objects."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from pathlib import Path
from typing import Final

import yaml
from pydantic import ValidationError

from cdmpy.config.project import CONFIG_FILENAME

from .schema import FileBag

log = getLogger(__name__)

DATA_FILE_SUFFIXES: Final[frozenset[str]] = frozenset({".yaml", ".yml"})


class DataFileError(RuntimeError):
    """Raised when a data file cannot be read or does not match the record schema."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Parsing data file {path} failed: {message}")


def load_datafile(path: Path) -> FileBag:
    """Decode one data file; an empty document yields an empty bag."""
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        raise DataFileError(path, str(exc)) from exc

    if data is None:
        log.debug("Data file %s is empty", path)
        return FileBag(source_path=path)
    if not isinstance(data, Mapping):
        raise DataFileError(path, f"expected a mapping at top level, got {type(data).__name__}")

    try:
        bag = FileBag.model_validate(data)
    except ValidationError as exc:
        raise DataFileError(path, str(exc)) from exc
    return bag.model_copy(update={"source_path": path})


def _is_data_file(path: Path) -> bool:
    return (
        path.is_file()
        and path.suffix.lower() in DATA_FILE_SUFFIXES
        and path.name != CONFIG_FILENAME
    )


def iter_data_files(directory: Path) -> list[Path]:
    """Return every data file below ``directory``, sorted for a stable build order."""
    return sorted(path for path in directory.rglob("*") if _is_data_file(path))


def parse_project_dir(project_dir: Path) -> list[FileBag]:
    """Decode every data file found recursively below ``project_dir``."""
    if not project_dir.is_dir():
        raise NotADirectoryError(f"Provided filepath not a directory {project_dir}")

    bags: list[FileBag] = []
    for path in iter_data_files(project_dir):
        log.debug("Reading data file %s", path)
        bags.append(load_datafile(path))
    log.info("Read %d data file(s) from %s", len(bags), project_dir)
    return bags
