"""Forward references, strict lookups and the partial-empty sweep.

At most one object exists per ``(kind, id)`` within a build: a reference to an
unseen ID inserts an empty placeholder, and a later definition fills that same
object in place.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from cdmpy.domain.model import Entity, EntityKind

from .errors import NoContainedDefinitionFoundError, NoDefinitionFoundError
from .merge import fill_placeholder, merge_entity

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, MutableMapping
    from pathlib import Path

    from .merge import ConflictPolicy

log = getLogger(__name__)


def resolve_reference[E: Entity](
    table: MutableMapping[str, E],
    entity_cls: type[E],
    ref_id: str,
    *,
    referrer: Entity | None = None,
) -> E:
    """Return the entity for ``ref_id``, inserting a placeholder if it is unknown.

    A placeholder remembers the file of its first referrer so that a missing
    definition can be traced back to where it was asked for.
    """
    existing = table.get(ref_id)
    if existing is not None:
        return existing

    placeholder = entity_cls.empty(ref_id)
    if referrer is not None:
        placeholder.source_path = referrer.source_path
    table[ref_id] = placeholder
    if referrer is None:
        log.info("Created placeholder %s %s", placeholder.kind.label, ref_id)
    else:
        log.info(
            "Created placeholder %s %s referenced by %s %s",
            placeholder.kind.label,
            ref_id,
            referrer.kind.label,
            referrer.id,
        )
    return placeholder


def require_reference[E: Entity](
    table: Mapping[str, E],
    kind: str | EntityKind,
    ref_id: str,
    *,
    container_kind: EntityKind,
    container_id: str,
    source_path: Path | None,
) -> E:
    """Return the entity for ``ref_id`` or fail; never creates a placeholder."""
    try:
        return table[ref_id]
    except KeyError:
        raise NoContainedDefinitionFoundError(
            contained_kind=kind.label if isinstance(kind, EntityKind) else kind,
            contained_id=ref_id,
            container_kind=container_kind,
            container_id=container_id,
            source_path=source_path,
        ) from None


def upsert[E: Entity](table: MutableMapping[str, E], entity: E, decide: ConflictPolicy) -> E:
    """Insert ``entity``, fill the placeholder it defines, or merge it into the existing one.

    Returns the object stored in the table, which is never replaced once present.
    """

    existing = table.get(entity.id)
    if existing is None:
        table[entity.id] = entity
        log.debug("Inserted %s %s from %s", entity.kind.label, entity.id, entity.source_path)
        return entity
    if existing is entity:
        return existing
    if existing.is_partial_empty():
        fill_placeholder(existing, entity)
    else:
        merge_entity(existing, entity, decide)
    return existing


def ensure_defined(tables: Iterable[tuple[EntityKind, Mapping[str, Entity]]]) -> None:
    """Fail on the first entity, in processing order, that is still a placeholder."""
    for kind, table in tables:
        for entity in table.values():
            if entity.is_partial_empty():
                raise NoDefinitionFoundError(kind, entity.id, entity.source_path)
