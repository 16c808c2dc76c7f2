"""Location of the default libraries shipped alongside the application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from .env import env_path

APP_DIR_NAME: Final[str] = "cdmpy"
LIBRARY_DIR_NAME: Final[str] = "libraries"
LIBRARY_DIR_ENV: Final[str] = "CDMPY_LIBRARY_DIR"


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_default_library_dir() -> Path:
    """Directory holding the default library data files.

    ``CDMPY_LIBRARY_DIR`` overrides the per-user data directory. The directory
    does not need to exist; a missing one simply provides no libraries.
    """

    override = env_path(LIBRARY_DIR_ENV)
    if override is not None:
        return override.resolve()
    return _default_data_dir() / LIBRARY_DIR_NAME
