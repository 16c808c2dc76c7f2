"""Application configuration helpers."""

from __future__ import annotations

from .env import env_path
from .libraries import LIBRARY_DIR_ENV, get_default_library_dir
from .logging import configure_logging, verbosity_to_level
from .project import (
    CONFIG_FILENAME,
    ConfigurationError,
    MissingConfigurationError,
    ProjectConfig,
    find_config_file,
    load_project_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "LIBRARY_DIR_ENV",
    "ConfigurationError",
    "MissingConfigurationError",
    "ProjectConfig",
    "configure_logging",
    "env_path",
    "find_config_file",
    "get_default_library_dir",
    "load_project_config",
    "verbosity_to_level",
]
