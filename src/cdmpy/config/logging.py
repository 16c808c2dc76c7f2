"""Shared logging helpers for cdmpy."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or when the CLI changes verbosity.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def verbosity_to_level(verbose: int, quiet: int) -> int:
    """Map ``-v`` / ``-q`` counts to a log level; quiet wins over verbose."""
    if quiet >= 2:  # noqa: PLR2004
        return logging.CRITICAL
    if quiet == 1:
        return logging.ERROR
    if verbose >= 1:
        return logging.DEBUG
    return logging.INFO
