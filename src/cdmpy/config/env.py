"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path


def env_path(name: str) -> Path | None:
    """Return the environment variable ``name`` as a path, or ``None`` if unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()
