"""Resolved table sets: the ``Library`` catalog and the ``Project`` instance graph.

Each table maps ID -> shared entity and keeps insertion order. Kind order
below is also the order in which builders process the tables of a file,
since later kinds may reference earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, cast

from cdmpy.domain.model.enums import EntityKind
from cdmpy.domain.model.library import (
    CableType,
    ConnectorType,
    EquipmentType,
    LocationType,
    PathwayType,
    TermCableType,
    WireType,
)
from cdmpy.domain.model.project import Equipment, Location, Pathway, WireCable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cdmpy.domain.model.entity import Entity


LIBRARY_KIND_ORDER: Final[tuple[EntityKind, ...]] = (
    EntityKind.WIRE_TYPE,
    EntityKind.CABLE_TYPE,
    EntityKind.PATHWAY_TYPE,
    EntityKind.LOCATION_TYPE,
    EntityKind.CONNECTOR_TYPE,
    EntityKind.TERM_CABLE_TYPE,
    EntityKind.EQUIPMENT_TYPE,
)

PROJECT_KIND_ORDER: Final[tuple[EntityKind, ...]] = (
    EntityKind.PATHWAY,
    EntityKind.LOCATION,
    EntityKind.WIRE_CABLE,
    EntityKind.EQUIPMENT,
)

ENTITY_CLASSES: Final[dict[EntityKind, type[Entity]]] = {
    EntityKind.WIRE_TYPE: WireType,
    EntityKind.CABLE_TYPE: CableType,
    EntityKind.TERM_CABLE_TYPE: TermCableType,
    EntityKind.CONNECTOR_TYPE: ConnectorType,
    EntityKind.EQUIPMENT_TYPE: EquipmentType,
    EntityKind.LOCATION_TYPE: LocationType,
    EntityKind.PATHWAY_TYPE: PathwayType,
    EntityKind.LOCATION: Location,
    EntityKind.EQUIPMENT: Equipment,
    EntityKind.PATHWAY: Pathway,
    EntityKind.WIRE_CABLE: WireCable,
}

_TABLE_ATTRS: Final[dict[EntityKind, str]] = {
    EntityKind.WIRE_TYPE: "wire_types",
    EntityKind.CABLE_TYPE: "cable_types",
    EntityKind.TERM_CABLE_TYPE: "term_cable_types",
    EntityKind.CONNECTOR_TYPE: "connector_types",
    EntityKind.EQUIPMENT_TYPE: "equipment_types",
    EntityKind.LOCATION_TYPE: "location_types",
    EntityKind.PATHWAY_TYPE: "pathway_types",
    EntityKind.LOCATION: "locations",
    EntityKind.EQUIPMENT: "equipment",
    EntityKind.PATHWAY: "pathways",
    EntityKind.WIRE_CABLE: "wire_cables",
}


class _TableSet:
    __slots__ = ()

    KIND_ORDER: tuple[EntityKind, ...] = ()

    def table(self, kind: EntityKind) -> dict[str, Entity]:
        if kind not in self.KIND_ORDER:
            raise KeyError(f"{type(self).__name__} has no table for {kind.label}")
        return cast("dict[str, Entity]", getattr(self, _TABLE_ATTRS[kind]))

    def tables(self) -> Iterator[tuple[EntityKind, dict[str, Entity]]]:
        """Yield ``(kind, table)`` pairs in processing order."""
        for kind in self.KIND_ORDER:
            yield kind, self.table(kind)

    def __len__(self) -> int:
        return sum(len(table) for _kind, table in self.tables())

    def counts(self) -> dict[EntityKind, int]:
        return {kind: len(table) for kind, table in self.tables()}


@dataclass(slots=True, eq=False)
class Library(_TableSet):
    """All catalog types read from data files."""

    KIND_ORDER = LIBRARY_KIND_ORDER

    wire_types: dict[str, WireType] = field(default_factory=dict["str", "WireType"])
    cable_types: dict[str, CableType] = field(default_factory=dict["str", "CableType"])
    term_cable_types: dict[str, TermCableType] = field(
        default_factory=dict["str", "TermCableType"]
    )
    connector_types: dict[str, ConnectorType] = field(
        default_factory=dict["str", "ConnectorType"]
    )
    equipment_types: dict[str, EquipmentType] = field(
        default_factory=dict["str", "EquipmentType"]
    )
    location_types: dict[str, LocationType] = field(default_factory=dict["str", "LocationType"])
    pathway_types: dict[str, PathwayType] = field(default_factory=dict["str", "PathwayType"])


@dataclass(slots=True, eq=False)
class Project(_TableSet):
    """All project instances; every type reference points into a ``Library``."""

    KIND_ORDER = PROJECT_KIND_ORDER

    locations: dict[str, Location] = field(default_factory=dict["str", "Location"])
    equipment: dict[str, Equipment] = field(default_factory=dict["str", "Equipment"])
    pathways: dict[str, Pathway] = field(default_factory=dict["str", "Pathway"])
    wire_cables: dict[str, WireCable] = field(default_factory=dict["str", "WireCable"])
