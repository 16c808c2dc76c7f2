"""
Base building blocks:
identity, canonical empty values and field stringification.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Self

if TYPE_CHECKING:
    from pathlib import Path

    from cdmpy.domain.model.enums import EntityKind


PROVENANCE_FIELD = "source_path"


@dataclass(eq=False, kw_only=True)
class Entity:
    """Shared, mutable graph node identified by ``(kind, id)``.

    Equality and hashing never look at contents: two objects are the same
    entity when their kind and ID match. Contents are compared field by field
    by the merge protocol instead.
    """

    id: str
    # file the entity was defined in; for a placeholder, the file that referenced it
    source_path: Path | None = None

    # class-level discriminator; subclasses must override
    ENTITY_KIND: ClassVar[EntityKind]

    @property
    def kind(self) -> EntityKind:
        return self.ENTITY_KIND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.ENTITY_KIND is other.ENTITY_KIND and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.ENTITY_KIND, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    @classmethod
    def empty(cls, entity_id: str) -> Self:
        """Return the canonical empty value of this kind carrying ``entity_id``."""
        return cls(id=entity_id)

    @classmethod
    def merge_field_names(cls) -> tuple[str, ...]:
        """Every field except ``id``, in declaration order."""
        return tuple(f.name for f in fields(cls) if f.name != "id")

    @classmethod
    def content_field_names(cls) -> tuple[str, ...]:
        """Every field except ``id`` and the provenance path."""
        return tuple(name for name in cls.merge_field_names() if name != PROVENANCE_FIELD)

    def is_partial_empty(self) -> bool:
        """True when all content equals the empty value, i.e. an unfilled placeholder."""
        blank = type(self).empty(self.id)
        return all(
            getattr(self, name) == getattr(blank, name) for name in self.content_field_names()
        )

    def field_strings(self) -> dict[str, str]:
        return {name: describe_value(getattr(self, name)) for name in self.merge_field_names()}


def describe_value(value: object) -> str:
    """Render a field value for display in a merge diff.

    Referenced entities render as their ID, which keeps cyclic graphs finite.
    """

    if value is None:
        return ""
    if isinstance(value, Entity):
        return value.id
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Mapping):
        items = ", ".join(f"{key}: {describe_value(item)}" for key, item in value.items())
        return "{" + items + "}"
    if isinstance(value, list | tuple):
        return "[" + ", ".join(describe_value(item) for item in value) + "]"
    if is_dataclass(value) and not isinstance(value, type):
        parts = ", ".join(
            f"{f.name}={describe_value(getattr(value, f.name))}" for f in fields(value)
        )
        return f"{type(value).__name__}({parts})"
    return str(value)
