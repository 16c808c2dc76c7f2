"""Per-project configuration file (``cdm_config.yaml``)."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

log = getLogger(__name__)

CONFIG_FILENAME: Final[str] = "cdm_config.yaml"
SOURCE_DIR_NAME: Final[str] = "src"


class ConfigurationError(RuntimeError):
    """Raised when the config file, or a path it names, cannot be used."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class MissingConfigurationError(ConfigurationError):
    """Raised when a library path named by the config file does not exist."""


class _ConfigFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    library_files: list[Path] = Field(default_factory=list)
    no_default_libraries: bool = False


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    # files or directories read into the library before the project files
    library_files: tuple[Path, ...] = ()
    no_default_libraries: bool = False
    # the file these values came from; ``None`` when defaults are used
    config_path: Path | None = None


def find_config_file(project_dir: Path) -> Path | None:
    """Return the config file of ``project_dir``; ``src/`` takes precedence over the root."""
    for candidate in (
        project_dir / SOURCE_DIR_NAME / CONFIG_FILENAME,
        project_dir / CONFIG_FILENAME,
    ):
        if candidate.is_file():
            log.info("Using config file %s", candidate)
            return candidate
        log.debug("Config file was not found at %s", candidate)
    return None


def load_project_config(project_dir: Path) -> ProjectConfig:
    """Read the project's config file, falling back to defaults when there is none.

    Relative library paths are resolved against the directory holding the config file.
    """

    config_path = find_config_file(project_dir)
    if config_path is None:
        log.info("No config file found in %s, using defaults", project_dir)
        return ProjectConfig()

    try:
        with config_path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        raise ConfigurationError(config_path, f"Could not parse config file ({exc})") from exc

    if data is None:
        data = {}
    try:
        parsed = _ConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(config_path, f"Invalid config file ({exc})") from exc

    base_dir = config_path.parent
    return ProjectConfig(
        library_files=tuple(
            path if path.is_absolute() else base_dir / path
            for path in (p.expanduser() for p in parsed.library_files)
        ),
        no_default_libraries=parsed.no_default_libraries,
        config_path=config_path,
    )
