"""Build a ``Library`` from an ordered sequence of decoded data files.

Within one file the kinds are processed in ``LIBRARY_KIND_ORDER``. References
between catalog types may point forward, even into later files: they resolve
to placeholders that a later definition fills in. Anything still a placeholder
once every file was read fails the build.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from cdmpy.domain.model import (
    LIBRARY_KIND_ORDER,
    CableLayer,
    CableType,
    ConnectorPin,
    ConnectorType,
    CrossSection,
    EntityKind,
    EquipConnector,
    EquipFace,
    EquipmentType,
    LayerType,
    Library,
    LocationType,
    PathwayType,
    TermCableConnector,
    TermCableType,
    Termination,
    WireType,
)

from .errors import DefinitionProcessingError
from .placeholders import ensure_defined, resolve_reference, upsert

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from cdmpy.adapters.datafile.schema import (
        CableCoreRecord,
        CableTypeRecord,
        CatalogRecord,
        ConnectorTypeRecord,
        EquipmentTypeRecord,
        FileBag,
        LocationTypeRecord,
        PathwayTypeRecord,
        TermCableConnectorRecord,
        TermCableTypeRecord,
        WireTypeRecord,
    )
    from cdmpy.domain.model import CatalogEntity, CoreType, Entity

    from .merge import ConflictPolicy

log = getLogger(__name__)

type _Translator = Callable[[str, Any, Path | None], Entity]


def _catalog_fields(record: CatalogRecord) -> dict[str, str | None]:
    return {
        "manufacturer": record.manufacturer,
        "model": record.model,
        "part_number": record.part_number,
        "manufacturer_part_number": record.manufacturer_part_number,
        "supplier": record.supplier,
        "supplier_part_number": record.supplier_part_number,
    }


class LibraryBuilder:
    """Accumulates data files into one ``Library``."""

    def __init__(self, decide: ConflictPolicy) -> None:
        self._decide = decide
        self.library = Library()
        self._translators: dict[EntityKind, _Translator] = {
            EntityKind.WIRE_TYPE: self._wire_type,
            EntityKind.CABLE_TYPE: self._cable_type,
            EntityKind.PATHWAY_TYPE: self._pathway_type,
            EntityKind.LOCATION_TYPE: self._location_type,
            EntityKind.CONNECTOR_TYPE: self._connector_type,
            EntityKind.TERM_CABLE_TYPE: self._term_cable_type,
            EntityKind.EQUIPMENT_TYPE: self._equipment_type,
        }

    def add_file(self, bag: FileBag) -> None:
        for kind in LIBRARY_KIND_ORDER:
            records = bag.table(kind)
            if not records:
                continue
            translate = self._translators[kind]
            table = self.library.table(kind)
            for entity_id, record in records.items():
                upsert(table, translate(entity_id, record, bag.source_path), self._decide)

    def finish(self) -> Library:
        """Run the placeholder sweep and return the finished library."""
        ensure_defined(self.library.tables())
        return self.library

    # --- reference helpers -------------------------------------------------

    def _core(self, record: CableCoreRecord, referrer: CatalogEntity) -> CoreType:
        if record.is_wire:
            return resolve_reference(
                self.library.wire_types, WireType, record.type_str, referrer=referrer
            )
        return resolve_reference(
            self.library.cable_types, CableType, record.type_str, referrer=referrer
        )

    def _connector_type_ref(self, ref_id: str, referrer: CatalogEntity) -> ConnectorType:
        return resolve_reference(
            self.library.connector_types, ConnectorType, ref_id, referrer=referrer
        )

    # --- translators -------------------------------------------------------

    def _wire_type(self, entity_id: str, record: WireTypeRecord, path: Path | None) -> WireType:
        return WireType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            material=record.material,
            insulated=record.insulated,
            insulation_material=record.insulation_material,
            wire_type_code=record.wire_type_code,
            conductor_cross_sect_area=record.conductor_cross_sect_area,
            overall_cross_sect_area=record.overall_cross_sect_area,
            stranded=record.stranded,
            num_strands=record.num_strands,
            strand_cross_sect_area=record.strand_cross_sect_area,
            insul_volt_rating=record.insul_volt_rating,
            insul_temp_rating=record.insul_temp_rating,
            insul_color=record.insul_color,
        )

    def _cable_type(
        self, entity_id: str, record: CableTypeRecord, path: Path | None
    ) -> CableType:
        try:
            cross_section = CrossSection.parse(record.cross_section)
            layers = [
                CableLayer(
                    layer_number=layer.layer_number,
                    layer_type=LayerType.parse(layer.layer_type),
                    material=layer.material,
                    volt_rating=layer.volt_rating,
                    temp_rating=layer.temp_rating,
                    color=layer.color,
                )
                for layer in record.insul_layers
            ]
        except ValueError as exc:
            raise DefinitionProcessingError(
                EntityKind.CABLE_TYPE, entity_id, str(exc), path
            ) from exc

        cable = CableType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            cable_type_code=record.cable_type_code,
            cross_sect_area=record.cross_sect_area,
            cross_section=cross_section,
            height=record.height,
            width=record.width,
            diameter=record.diameter,
            insul_layers=layers,
        )
        cable.cable_cores = {
            name: self._core(core, cable) for name, core in record.cable_cores.items()
        }
        return cable

    def _pathway_type(
        self, entity_id: str, record: PathwayTypeRecord, path: Path | None
    ) -> PathwayType:
        return PathwayType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            description=record.description,
            size=record.size,
            trade_size=record.trade_size,
            height=record.height,
            width=record.width,
            cross_sect_area=record.cross_sect_area,
            material=record.material,
        )

    def _location_type(
        self, entity_id: str, record: LocationTypeRecord, path: Path | None
    ) -> LocationType:
        return LocationType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            description=record.description,
            material=record.material,
            height=record.height,
            width=record.width,
            depth=record.depth,
            usable_width=record.usable_width,
            usable_height=record.usable_height,
            usable_depth=record.usable_depth,
        )

    def _connector_type(
        self, entity_id: str, record: ConnectorTypeRecord, path: Path | None
    ) -> ConnectorType:
        return ConnectorType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            description=record.description,
            mount_type=record.mount_type,
            panel_cutout=record.panel_cutout,
            gender=record.gender,
            height=record.height,
            width=record.width,
            depth=record.depth,
            diameter=record.diameter,
            pins=[
                ConnectorPin(
                    id=pin.id,
                    label=pin.label,
                    signal_type=pin.signal_type,
                    color=pin.color,
                    visual_rep=pin.visual_rep,
                    gender=pin.gender,
                )
                for pin in record.pins
            ],
            visual_rep=record.visual_rep,
        )

    def _term_cable_ends(
        self, connectors: list[TermCableConnectorRecord], referrer: TermCableType
    ) -> list[TermCableConnector]:
        return [
            TermCableConnector(
                connector_type=self._connector_type_ref(connector.connector_type, referrer),
                terminations=None
                if connector.terminations is None
                else [Termination(core=t.core, pin=t.pin) for t in connector.terminations],
            )
            for connector in connectors
        ]

    def _term_cable_type(
        self, entity_id: str, record: TermCableTypeRecord, path: Path | None
    ) -> TermCableType:
        if (record.wire is None) == (record.cable is None):
            raise DefinitionProcessingError(
                EntityKind.TERM_CABLE_TYPE,
                entity_id,
                "exactly one of wire or cable must be set",
                path,
            )

        term_cable = TermCableType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            description=record.description,
            nominal_length=record.nominal_length,
            actual_length=record.actual_length,
        )
        if record.wire is not None:
            term_cable.core = resolve_reference(
                self.library.wire_types, WireType, record.wire, referrer=term_cable
            )
        elif record.cable is not None:
            term_cable.core = resolve_reference(
                self.library.cable_types, CableType, record.cable, referrer=term_cable
            )
        term_cable.end1 = self._term_cable_ends(record.end1, term_cable)
        term_cable.end2 = self._term_cable_ends(record.end2, term_cable)
        return term_cable

    def _equipment_type(
        self, entity_id: str, record: EquipmentTypeRecord, path: Path | None
    ) -> EquipmentType:
        equipment_type = EquipmentType(
            id=entity_id,
            source_path=path,
            **_catalog_fields(record),
            description=record.description,
            mount_type=record.mount_type,
            equip_type=record.equip_type,
            visual_rep=record.visual_rep,
        )
        equipment_type.faces = {
            face.name: EquipFace(
                visual_rep=face.visual_rep,
                connectors=[
                    EquipConnector(
                        connector_type=self._connector_type_ref(
                            connector.connector_type, equipment_type
                        ),
                        direction=connector.direction,
                        x=connector.x,
                        y=connector.y,
                    )
                    for connector in face.connectors or ()
                ],
            )
            for face in record.faces or ()
        }
        return equipment_type


def build_library(files: Iterable[FileBag], decide: ConflictPolicy) -> Library:
    """Resolve ``files``, in order, into a fully linked ``Library``.

    An empty sequence yields an empty library. Any error aborts the whole build.
    """

    builder = LibraryBuilder(decide)
    file_count = 0
    for bag in files:
        builder.add_file(bag)
        file_count += 1
    library = builder.finish()
    log.info("Built library with %d entities from %d file(s)", len(library), file_count)
    return library
