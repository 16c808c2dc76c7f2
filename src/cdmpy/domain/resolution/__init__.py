"""Resolution of decoded data files into linked ``Library`` / ``Project`` graphs."""

from __future__ import annotations

from .errors import (
    DataMergeError,
    DefinitionProcessingError,
    MergePolicyError,
    NoContainedDefinitionFoundError,
    NoDefinitionFoundError,
    ResolutionError,
)
from .library_builder import LibraryBuilder, build_library
from .merge import ConflictPolicy, FieldDiff, diff_entities, fill_placeholder, merge_entity
from .placeholders import ensure_defined, require_reference, resolve_reference, upsert
from .policy import keep_first, keep_newest
from .project_builder import ProjectBuilder, build_project

__all__ = [  # noqa: RUF022
    # errors
    "ResolutionError",
    "NoDefinitionFoundError",
    "DefinitionProcessingError",
    "NoContainedDefinitionFoundError",
    "DataMergeError",
    "MergePolicyError",
    # merge protocol
    "ConflictPolicy",
    "FieldDiff",
    "diff_entities",
    "merge_entity",
    "fill_placeholder",
    "keep_first",
    "keep_newest",
    # placeholders
    "resolve_reference",
    "require_reference",
    "upsert",
    "ensure_defined",
    # builders
    "LibraryBuilder",
    "ProjectBuilder",
    "build_library",
    "build_project",
]
