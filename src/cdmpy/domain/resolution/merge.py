"""Field-by-field merge of two definitions sharing one ID.

The merge mutates the existing entity in place, so every object that already
references it observes the result. Which side wins for each differing field is
decided by an injected ``ConflictPolicy``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from cdmpy.domain.model.entity import PROVENANCE_FIELD, describe_value

from .errors import DataMergeError, MergePolicyError

if TYPE_CHECKING:
    from cdmpy.domain.model import Entity

log = getLogger(__name__)

# field name -> (existing value, incoming value), stringified, only differing fields;
# returns field name -> adopt the incoming value
type ConflictPolicy = Callable[[dict[str, tuple[str, str]]], Mapping[str, bool]]


@dataclass(frozen=True, slots=True)
class FieldDiff:
    name: str
    self_value: str
    other_value: str
    equal: bool


def _check_same_identity(target: Entity, other: Entity) -> None:
    if target.kind is not other.kind or target.id != other.id:
        raise DataMergeError(
            target.kind,
            self_id=target.id,
            other_id=other.id,
            self_path=target.source_path,
            other_path=other.source_path,
        )


def diff_entities(target: Entity, other: Entity) -> list[FieldDiff]:
    """Compare every field except ``id``, in declaration order."""
    _check_same_identity(target, other)
    diffs: list[FieldDiff] = []
    for name in target.merge_field_names():
        self_value = getattr(target, name)
        other_value = getattr(other, name)
        diffs.append(
            FieldDiff(
                name=name,
                self_value=describe_value(self_value),
                other_value=describe_value(other_value),
                equal=self_value == other_value,
            )
        )
    return diffs


def merge_entity(target: Entity, other: Entity, decide: ConflictPolicy) -> list[str]:
    """Merge ``other`` into ``target`` and return the names of adopted fields.

    ``decide`` is only called when at least one content field differs. A copy that
    differs in its source file alone keeps the existing provenance.
    """

    differing = [diff for diff in diff_entities(target, other) if not diff.equal]
    if all(diff.name == PROVENANCE_FIELD for diff in differing):
        log.debug(
            "%s %s redefined identically in %s", target.kind.label, target.id, other.source_path
        )
        return []

    request = {diff.name: (diff.self_value, diff.other_value) for diff in differing}
    decisions = decide(request)

    missing = tuple(name for name in request if name not in decisions)
    if missing:
        raise MergePolicyError(target.kind, target.id, missing)

    adopted: list[str] = []
    for diff in differing:
        if decisions[diff.name]:
            setattr(target, diff.name, getattr(other, diff.name))
            adopted.append(diff.name)

    log.info(
        "Merged %s %s: %d differing field(s), adopted %s",
        target.kind.label,
        target.id,
        len(differing),
        ", ".join(adopted) or "none",
    )
    return adopted


def fill_placeholder(target: Entity, source: Entity) -> None:
    """Copy every field except ``id`` from ``source`` into the placeholder ``target``."""
    _check_same_identity(target, source)
    for name in target.merge_field_names():
        setattr(target, name, getattr(source, name))
    log.debug("Filled placeholder %s %s from %s", target.kind.label, target.id, target.source_path)
