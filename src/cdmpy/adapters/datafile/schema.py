"""Pydantic models describing the records of one decoded data file.

Cross-references stay plain ID strings here; the resolution builders turn them
into shared entity references.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cdmpy.domain.model import EntityKind


class RecordModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CatalogRecord(RecordModel):
    manufacturer: str | None = None
    model: str | None = None
    part_number: str | None = None
    manufacturer_part_number: str | None = None
    supplier: str | None = None
    supplier_part_number: str | None = None


# --- library records -------------------------------------------------------


class WireTypeRecord(CatalogRecord):
    material: str | None = None
    insulated: bool = False
    insulation_material: str | None = None
    wire_type_code: str | None = None
    conductor_cross_sect_area: float = 0.0
    overall_cross_sect_area: float = 0.0
    stranded: bool = False
    num_strands: int | None = None
    strand_cross_sect_area: float | None = None
    insul_volt_rating: float | None = None
    insul_temp_rating: float | None = None
    insul_color: str | None = None


class CableCoreRecord(RecordModel):
    type_str: str = Field(alias="type")
    is_wire: bool = True


class CableLayerRecord(RecordModel):
    layer_number: int = 0
    layer_type: str = "Insulation"
    material: str | None = None
    volt_rating: float | None = None
    temp_rating: float | None = None
    color: str | None = None


class CableTypeRecord(CatalogRecord):
    cable_type_code: str | None = None
    cross_sect_area: float = 0.0
    # validated by the builder so that the error names the record
    cross_section: str = "Circular"
    height: float = 0.0
    width: float = 0.0
    diameter: float | None = None
    cable_cores: dict[str, CableCoreRecord] = Field(default_factory=dict)
    insul_layers: list[CableLayerRecord] = Field(default_factory=list)


class TerminationRecord(RecordModel):
    core: int | None = None
    pin: int | None = None


class TermCableConnectorRecord(RecordModel):
    connector_type: str = Field(alias="type")
    terminations: list[TerminationRecord] | None = None


class TermCableTypeRecord(CatalogRecord):
    description: str | None = None
    wire: str | None = None
    cable: str | None = None
    nominal_length: float | None = None
    actual_length: float | None = None
    end1: list[TermCableConnectorRecord] = Field(default_factory=list)
    end2: list[TermCableConnectorRecord] = Field(default_factory=list)


class ConnectorPinRecord(RecordModel):
    id: str
    label: str | None = None
    signal_type: str | None = None
    color: str | None = None
    visual_rep: str | None = None
    gender: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        # pin numbers are usually written as bare integers
        return str(value) if isinstance(value, int) else value


class ConnectorTypeRecord(CatalogRecord):
    description: str | None = None
    mount_type: str | None = None
    panel_cutout: str | None = None
    gender: str | None = None
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    diameter: float | None = None
    pins: list[ConnectorPinRecord] = Field(default_factory=list)
    visual_rep: str | None = None


class EquipConnectorRecord(RecordModel):
    connector_type: str
    direction: str | None = None
    x: float = 0.0
    y: float = 0.0


class EquipFaceRecord(RecordModel):
    name: str
    visual_rep: str | None = None
    connectors: list[EquipConnectorRecord] | None = None


class EquipmentTypeRecord(CatalogRecord):
    description: str | None = None
    mount_type: str | None = None
    equip_type: str | None = None
    faces: list[EquipFaceRecord] | None = None
    visual_rep: str | None = None


class LocationTypeRecord(CatalogRecord):
    description: str | None = None
    material: str | None = None
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    usable_width: float = 0.0
    usable_height: float = 0.0
    usable_depth: float = 0.0


class PathwayTypeRecord(CatalogRecord):
    description: str | None = None
    size: str | None = None
    trade_size: str | None = None
    height: float = 0.0
    width: float = 0.0
    cross_sect_area: float = 0.0
    material: str | None = None


# --- project records -------------------------------------------------------


class SubLocationRecord(RecordModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class LocationRecord(RecordModel):
    location_type: str = Field(alias="type")
    identifier: str | None = None
    description: str | None = None
    physical_location: str | None = None
    sub_locations: dict[str, SubLocationRecord] = Field(default_factory=dict)


class EquipmentRecord(RecordModel):
    equipment_type: str = Field(alias="type")
    identifier: str | None = None
    mounting_type: str | None = None
    location: str | None = None
    sub_location: str | None = None
    description: str | None = None


class PathwayRecord(RecordModel):
    pathway_type: str = Field(alias="type")
    identifier: str | None = None
    description: str | None = None
    length: float = 0.0


class WireCableRecord(RecordModel):
    wire: str | None = None
    cable: str | None = None
    term_cable: str | None = None
    identifier: str | None = None
    description: str | None = None
    length: float | None = None
    pathway: str | None = None


type Record = (
    WireTypeRecord
    | CableTypeRecord
    | TermCableTypeRecord
    | ConnectorTypeRecord
    | EquipmentTypeRecord
    | LocationTypeRecord
    | PathwayTypeRecord
    | LocationRecord
    | EquipmentRecord
    | PathwayRecord
    | WireCableRecord
)


class FileBag(RecordModel):
    """Everything decoded from one data file: one optional table per kind."""

    source_path: Path | None = Field(default=None, exclude=True)

    wire_type: dict[str, WireTypeRecord] | None = None
    cable_type: dict[str, CableTypeRecord] | None = None
    term_cable_type: dict[str, TermCableTypeRecord] | None = None
    connector_type: dict[str, ConnectorTypeRecord] | None = None
    equipment_type: dict[str, EquipmentTypeRecord] | None = None
    location_type: dict[str, LocationTypeRecord] | None = None
    pathway_type: dict[str, PathwayTypeRecord] | None = None

    location: dict[str, LocationRecord] | None = None
    equipment: dict[str, EquipmentRecord] | None = None
    pathway: dict[str, PathwayRecord] | None = None
    wire_cable: dict[str, WireCableRecord] | None = None

    @field_validator(*(kind.value for kind in EntityKind), mode="before")
    @classmethod
    def _null_records_are_empty(cls, value: object) -> object:
        # ``W1:`` with no body decodes to None
        if isinstance(value, Mapping):
            mapping_value = cast("Mapping[object, object]", value)
            return {
                str(key): ({} if record is None else record)
                for key, record in mapping_value.items()
            }
        return value

    def table(self, kind: EntityKind) -> Mapping[str, Record] | None:
        return cast("Mapping[str, Record] | None", getattr(self, kind.value))

    def tables(self) -> Iterator[tuple[EntityKind, Mapping[str, Record]]]:
        """Yield ``(kind, records)`` for every table present in the file."""
        for kind in EntityKind:
            records = self.table(kind)
            if records is not None:
                yield kind, records

    def is_empty(self) -> bool:
        return not any(records for _kind, records in self.tables())
