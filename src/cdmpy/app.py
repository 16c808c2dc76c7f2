"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from cdmpy.adapters.datafile import load_datafile, parse_project_dir
from cdmpy.config import (
    MissingConfigurationError,
    ProjectConfig,
    get_default_library_dir,
    load_project_config,
)
from cdmpy.domain.resolution import build_library, build_project, keep_first

if TYPE_CHECKING:
    from pathlib import Path

    from cdmpy.adapters.datafile import FileBag
    from cdmpy.domain.model import Library, Project
    from cdmpy.domain.resolution import ConflictPolicy


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedProject:
    config: ProjectConfig
    library: Library
    project: Project
    files: tuple[FileBag, ...]


def _read_library_path(path: Path) -> list[FileBag]:
    if path.is_dir():
        return parse_project_dir(path)
    if path.is_file():
        return [load_datafile(path)]
    raise MissingConfigurationError(path, "Library file does not exist")


def collect_files(
    project_dir: Path,
    config: ProjectConfig,
    *,
    use_default_libraries: bool = True,
) -> list[FileBag]:
    """Assemble data files in build order: default libraries, configured libraries, project."""

    files: list[FileBag] = []
    if use_default_libraries and not config.no_default_libraries:
        library_dir = get_default_library_dir()
        if library_dir.is_dir():
            files.extend(parse_project_dir(library_dir))
        else:
            log.debug("Default library directory %s does not exist", library_dir)
    else:
        log.info("Skipping default libraries")

    for library_path in config.library_files:
        files.extend(_read_library_path(library_path))

    files.extend(parse_project_dir(project_dir))
    return files


def load_project(
    project_dir: Path,
    *,
    decide: ConflictPolicy = keep_first,
    use_default_libraries: bool = True,
) -> LoadedProject:
    """Read a project directory and resolve it into a linked library and project."""

    if not project_dir.is_dir():
        raise NotADirectoryError(f"Provided filepath not a directory {project_dir}")

    config = load_project_config(project_dir)
    files = collect_files(project_dir, config, use_default_libraries=use_default_libraries)
    log.info("Loading project %s from %d data file(s)", project_dir, len(files))

    library = build_library(files, decide)
    project = build_project(files, library, decide)

    return LoadedProject(
        config=config,
        library=library,
        project=project,
        files=tuple(files),
    )
