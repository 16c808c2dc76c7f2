"""Project (instance) entities: physical items that reference library types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from cdmpy.domain.model.entity import Entity
from cdmpy.domain.model.enums import EntityKind
from cdmpy.domain.model.library import (
    CableType,
    EquipmentType,
    LocationType,
    PathwayType,
    TermCableType,
    WireType,
)

type WireCableTypeRef = WireType | CableType | TermCableType


@dataclass(slots=True, kw_only=True)
class SubLocation:
    """Point inside a location, in mm from its left, bottom and back faces."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(eq=False, repr=False, kw_only=True)
class Location(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.LOCATION

    location_type: LocationType | None = None
    identifier: str | None = None
    description: str | None = None
    physical_location: str | None = None
    sub_locations: dict[str, SubLocation] = field(default_factory=dict["str", "SubLocation"])


@dataclass(eq=False, repr=False, kw_only=True)
class Equipment(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.EQUIPMENT

    equipment_type: EquipmentType | None = None
    identifier: str | None = None
    mounting_type: str | None = None
    location: Location | None = None
    # key into ``location.sub_locations``
    sub_location: str | None = None
    description: str | None = None

    @property
    def position(self) -> SubLocation | None:
        """Resolved sub location, looked up through the (shared) location."""
        if self.location is None or self.sub_location is None:
            return None
        return self.location.sub_locations.get(self.sub_location)


@dataclass(eq=False, repr=False, kw_only=True)
class Pathway(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.PATHWAY

    pathway_type: PathwayType | None = None
    identifier: str | None = None
    description: str | None = None
    length: float = 0.0


@dataclass(eq=False, repr=False, kw_only=True)
class WireCable(Entity):
    """A deployed wire, cable or terminated cable."""

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.WIRE_CABLE

    # exactly one library type; ``None`` only while this is a placeholder
    wire_cable_type: WireCableTypeRef | None = None
    identifier: str | None = None
    description: str | None = None
    length: float | None = None
    pathway: Pathway | None = None

    @property
    def type_kind(self) -> EntityKind | None:
        if self.wire_cable_type is None:
            return None
        return self.wire_cable_type.kind
