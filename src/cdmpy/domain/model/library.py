"""Library (catalog) entities: reusable type definitions.

Cross-references between library entities are plain shared object references.
A ``CableType`` core or a ``TermCableType`` core may point at a ``WireType``
or at another ``CableType``; the referenced object's class is the tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from cdmpy.domain.model.entity import Entity
from cdmpy.domain.model.enums import CrossSection, EntityKind, LayerType


@dataclass(eq=False, repr=False, kw_only=True)
class CatalogEntity(Entity):
    """Fields shared by every catalog entry."""

    manufacturer: str | None = None
    model: str | None = None
    part_number: str | None = None
    manufacturer_part_number: str | None = None
    supplier: str | None = None
    supplier_part_number: str | None = None


@dataclass(eq=False, repr=False, kw_only=True)
class WireType(CatalogEntity):
    """An individual wire with optional insulation."""

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.WIRE_TYPE

    material: str | None = None
    insulated: bool = False
    insulation_material: str | None = None
    # THHN, MTW, TFFN, ...
    wire_type_code: str | None = None
    # areas in mm^2
    conductor_cross_sect_area: float = 0.0
    overall_cross_sect_area: float = 0.0
    stranded: bool = False
    num_strands: int | None = None
    strand_cross_sect_area: float | None = None
    # volts / kelvin
    insul_volt_rating: float | None = None
    insul_temp_rating: float | None = None
    insul_color: str | None = None


type CoreType = WireType | CableType


@dataclass(slots=True, kw_only=True)
class CableLayer:
    """Insulation or shield layer, numbered from the inside out (1-indexed)."""

    layer_number: int = 0
    layer_type: LayerType = LayerType.INSULATION
    material: str | None = None
    volt_rating: float | None = None
    temp_rating: float | None = None
    color: str | None = None


@dataclass(eq=False, repr=False, kw_only=True)
class CableType(CatalogEntity):
    """A cable made of several cores. Something with a single core is a wire."""

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CABLE_TYPE

    # SOOW, NM, USE, ...
    cable_type_code: str | None = None
    cross_sect_area: float = 0.0
    cross_section: CrossSection = CrossSection.CIRCULAR
    height: float = 0.0
    width: float = 0.0
    diameter: float | None = None
    cable_cores: dict[str, CoreType] = field(default_factory=dict["str", "CoreType"])
    insul_layers: list[CableLayer] = field(default_factory=list["CableLayer"])

    @property
    def core_count(self) -> int:
        return len(self.cable_cores)


@dataclass(slots=True, kw_only=True)
class ConnectorPin:
    id: str
    label: str | None = None
    signal_type: str | None = None
    color: str | None = None
    visual_rep: str | None = None
    gender: str | None = None


@dataclass(eq=False, repr=False, kw_only=True)
class ConnectorType(CatalogEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CONNECTOR_TYPE

    description: str | None = None
    mount_type: str | None = None
    panel_cutout: str | None = None
    gender: str | None = None
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    diameter: float | None = None
    pins: list[ConnectorPin] = field(default_factory=list["ConnectorPin"])
    visual_rep: str | None = None

    @property
    def pin_count(self) -> int:
        return len(self.pins)


@dataclass(slots=True, kw_only=True)
class Termination:
    """Maps one cable core onto one connector pin."""

    core: int | None = None
    pin: int | None = None


@dataclass(slots=True, kw_only=True)
class TermCableConnector:
    connector_type: ConnectorType
    terminations: list[Termination] | None = None


@dataclass(eq=False, repr=False, kw_only=True)
class TermCableType(CatalogEntity):
    """A wire or cable with connectors assembled onto both ends."""

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.TERM_CABLE_TYPE

    description: str | None = None
    # exactly one wire or cable type; ``None`` only while this is a placeholder
    core: CoreType | None = None
    nominal_length: float | None = None
    actual_length: float | None = None
    end1: list[TermCableConnector] = field(default_factory=list["TermCableConnector"])
    end2: list[TermCableConnector] = field(default_factory=list["TermCableConnector"])


@dataclass(slots=True, kw_only=True)
class EquipConnector:
    """Connector placement on one face of an equipment type."""

    connector_type: ConnectorType
    direction: str | None = None
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True, kw_only=True)
class EquipFace:
    visual_rep: str | None = None
    connectors: list[EquipConnector] = field(default_factory=list["EquipConnector"])


@dataclass(eq=False, repr=False, kw_only=True)
class EquipmentType(CatalogEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.EQUIPMENT_TYPE

    description: str | None = None
    mount_type: str | None = None
    equip_type: str | None = None
    faces: dict[str, EquipFace] = field(default_factory=dict["str", "EquipFace"])
    visual_rep: str | None = None

    @property
    def connectors(self) -> tuple[EquipConnector, ...]:
        return tuple(c for face in self.faces.values() for c in face.connectors)


@dataclass(eq=False, repr=False, kw_only=True)
class LocationType(CatalogEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.LOCATION_TYPE

    description: str | None = None
    material: str | None = None
    # dimensions in mm
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    usable_width: float = 0.0
    usable_height: float = 0.0
    usable_depth: float = 0.0


@dataclass(eq=False, repr=False, kw_only=True)
class PathwayType(CatalogEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.PATHWAY_TYPE

    description: str | None = None
    size: str | None = None
    trade_size: str | None = None
    height: float = 0.0
    width: float = 0.0
    cross_sect_area: float = 0.0
    material: str | None = None
