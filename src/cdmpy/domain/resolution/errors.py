"""Errors raised while resolving data files into a ``Library`` / ``Project``.

All of them abort the build they occur in; no partial graph is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from cdmpy.domain.model import EntityKind


def _display_path(path: Path | str | None) -> str:
    return "<unknown>" if path is None else str(path)


class ResolutionError(RuntimeError):
    """Base class for every resolver failure."""


class NoDefinitionFoundError(ResolutionError):
    """An entity was referenced but still a placeholder after all files were read."""

    def __init__(self, kind: EntityKind, entity_id: str, source_path: Path | None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        self.source_path = source_path
        super().__init__(
            f"{kind.label}: {entity_id} was specified in file: "
            f"{_display_path(source_path)}, but no definition was found."
        )


class DefinitionProcessingError(ResolutionError):
    """A record's contents are structurally invalid."""

    def __init__(
        self,
        kind: EntityKind,
        entity_id: str,
        message: str,
        source_path: Path | None,
    ) -> None:
        self.kind = kind
        self.entity_id = entity_id
        self.message = message
        self.source_path = source_path
        super().__init__(
            f"{kind.label}: {entity_id} found in file: {_display_path(source_path)}, "
            f"had error during processing: {message}."
        )


class NoContainedDefinitionFoundError(ResolutionError):
    """A record references something that must already exist but does not.

    ``contained_kind`` is a string so that non-entity targets (``SubLocation``)
    can be reported the same way.
    """

    def __init__(
        self,
        *,
        contained_kind: str,
        contained_id: str,
        container_kind: EntityKind,
        container_id: str,
        source_path: Path | None,
    ) -> None:
        self.contained_kind = contained_kind
        self.contained_id = contained_id
        self.container_kind = container_kind
        self.container_id = container_id
        self.source_path = source_path
        super().__init__(
            f"{contained_kind}: {contained_id} specified in {container_kind.label}: "
            f"{container_id} in file: {_display_path(source_path)}, was not found. "
            "Check your spelling."
        )


class DataMergeError(ResolutionError):
    """Two entities with different IDs were handed to the merge protocol."""

    def __init__(
        self,
        kind: EntityKind,
        *,
        self_id: str,
        other_id: str,
        self_path: Path | None,
        other_path: Path | None,
    ) -> None:
        self.kind = kind
        self.self_id = self_id
        self.other_id = other_id
        self.self_path = self_path
        self.other_path = other_path
        super().__init__(
            f"Attempting to merge two entities of type {kind.label} with IDs {self_id} and "
            f"{other_id} which don't match. They came from datafiles "
            f"{_display_path(self_path)} and {_display_path(other_path)}."
        )


class MergePolicyError(ResolutionError):
    """A conflict policy returned no decision for a differing field."""

    def __init__(self, kind: EntityKind, entity_id: str, missing: tuple[str, ...]) -> None:
        self.kind = kind
        self.entity_id = entity_id
        self.missing = missing
        super().__init__(
            f"Conflict policy gave no decision for {kind.label}: {entity_id} "
            f"field(s): {', '.join(missing)}"
        )
