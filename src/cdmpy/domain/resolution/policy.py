"""Built-in, non-interactive conflict policies.

A policy receives only the differing fields and must answer every one of them;
``True`` adopts the incoming value.
"""

from __future__ import annotations

from logging import getLogger

log = getLogger(__name__)


def keep_first(diff: dict[str, tuple[str, str]]) -> dict[str, bool]:
    """Keep the first definition, warn about every discarded value."""
    for name, (current, incoming) in diff.items():
        log.warning("Ignoring redefinition of %s: keeping %r over %r", name, current, incoming)
    return dict.fromkeys(diff, False)


def keep_newest(diff: dict[str, tuple[str, str]]) -> dict[str, bool]:
    """Let the most recently parsed definition win every differing field."""
    return dict.fromkeys(diff, True)
