"""Build a ``Project`` from decoded data files and a finished ``Library``.

Library lookups are strict: the library is closed before any project record is
read, so an unknown type is an error rather than a placeholder. References
between project entities (equipment to location, wire/cable to pathway) may
point forward and use placeholders like the library builder does.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from cdmpy.domain.model import (
    PROJECT_KIND_ORDER,
    Equipment,
    EntityKind,
    Location,
    Pathway,
    Project,
    SubLocation,
    WireCable,
)

from .errors import DefinitionProcessingError, NoContainedDefinitionFoundError
from .placeholders import ensure_defined, require_reference, resolve_reference, upsert

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from pathlib import Path

    from cdmpy.adapters.datafile.schema import (
        EquipmentRecord,
        FileBag,
        LocationRecord,
        PathwayRecord,
        WireCableRecord,
    )
    from cdmpy.domain.model import Entity, Library, WireCableTypeRef

    from .merge import ConflictPolicy

log = getLogger(__name__)

type _Translator = Callable[[str, Any, Path | None], Entity]


class ProjectBuilder:
    """Accumulates data files into one ``Project`` linked against ``library``."""

    def __init__(self, library: Library, decide: ConflictPolicy) -> None:
        # an unfinished library would leave project types pointing at placeholders
        ensure_defined(library.tables())
        self._library = library
        self._decide = decide
        self.project = Project()
        self._translators: dict[EntityKind, _Translator] = {
            EntityKind.PATHWAY: self._pathway,
            EntityKind.LOCATION: self._location,
            EntityKind.WIRE_CABLE: self._wire_cable,
            EntityKind.EQUIPMENT: self._equipment,
        }

    def add_file(self, bag: FileBag) -> None:
        for kind in PROJECT_KIND_ORDER:
            records = bag.table(kind)
            if not records:
                continue
            translate = self._translators[kind]
            table = self.project.table(kind)
            for entity_id, record in records.items():
                upsert(table, translate(entity_id, record, bag.source_path), self._decide)

    def finish(self) -> Project:
        """Run the placeholder sweep, then check equipment sub locations."""
        ensure_defined(self.project.tables())
        for equipment in self.project.equipment.values():
            self._check_sub_location(equipment)
        return self.project

    def _check_sub_location(self, equipment: Equipment) -> None:
        # sub locations are only known once the location itself is defined
        if equipment.sub_location is None or equipment.location is None:
            return
        if equipment.sub_location not in equipment.location.sub_locations:
            raise NoContainedDefinitionFoundError(
                contained_kind="SubLocation",
                contained_id=equipment.sub_location,
                container_kind=EntityKind.LOCATION,
                container_id=equipment.location.id,
                source_path=equipment.source_path,
            )

    def _library_ref[E: Entity](
        self,
        table: Mapping[str, E],
        kind: EntityKind,
        ref_id: str,
        container: Entity,
    ) -> E:
        return require_reference(
            table,
            kind,
            ref_id,
            container_kind=container.kind,
            container_id=container.id,
            source_path=container.source_path,
        )

    # --- translators -------------------------------------------------------

    def _pathway(self, entity_id: str, record: PathwayRecord, path: Path | None) -> Pathway:
        pathway = Pathway(
            id=entity_id,
            source_path=path,
            identifier=record.identifier,
            description=record.description,
            length=record.length,
        )
        pathway.pathway_type = self._library_ref(
            self._library.pathway_types, EntityKind.PATHWAY_TYPE, record.pathway_type, pathway
        )
        return pathway

    def _location(self, entity_id: str, record: LocationRecord, path: Path | None) -> Location:
        location = Location(
            id=entity_id,
            source_path=path,
            identifier=record.identifier,
            description=record.description,
            physical_location=record.physical_location,
            sub_locations={
                name: SubLocation(x=sub.x, y=sub.y, z=sub.z)
                for name, sub in record.sub_locations.items()
            },
        )
        location.location_type = self._library_ref(
            self._library.location_types, EntityKind.LOCATION_TYPE, record.location_type, location
        )
        return location

    def _wire_cable_type(self, record: WireCableRecord, wire_cable: WireCable) -> WireCableTypeRef:
        selected = [
            (kind, ref_id)
            for kind, ref_id in (
                (EntityKind.WIRE_TYPE, record.wire),
                (EntityKind.CABLE_TYPE, record.cable),
                (EntityKind.TERM_CABLE_TYPE, record.term_cable),
            )
            if ref_id is not None
        ]
        if len(selected) != 1:
            raise DefinitionProcessingError(
                EntityKind.WIRE_CABLE,
                wire_cable.id,
                "exactly one of wire, cable or term_cable must be set",
                wire_cable.source_path,
            )
        kind, ref_id = selected[0]
        if kind is EntityKind.WIRE_TYPE:
            return self._library_ref(self._library.wire_types, kind, ref_id, wire_cable)
        if kind is EntityKind.CABLE_TYPE:
            return self._library_ref(self._library.cable_types, kind, ref_id, wire_cable)
        return self._library_ref(self._library.term_cable_types, kind, ref_id, wire_cable)

    def _wire_cable(
        self, entity_id: str, record: WireCableRecord, path: Path | None
    ) -> WireCable:
        wire_cable = WireCable(
            id=entity_id,
            source_path=path,
            identifier=record.identifier,
            description=record.description,
            length=record.length,
        )
        wire_cable.wire_cable_type = self._wire_cable_type(record, wire_cable)
        if record.pathway is not None:
            wire_cable.pathway = resolve_reference(
                self.project.pathways, Pathway, record.pathway, referrer=wire_cable
            )
        return wire_cable

    def _equipment(self, entity_id: str, record: EquipmentRecord, path: Path | None) -> Equipment:
        equipment = Equipment(
            id=entity_id,
            source_path=path,
            identifier=record.identifier,
            mounting_type=record.mounting_type,
            sub_location=record.sub_location,
            description=record.description,
        )
        equipment.equipment_type = self._library_ref(
            self._library.equipment_types,
            EntityKind.EQUIPMENT_TYPE,
            record.equipment_type,
            equipment,
        )
        if record.location is not None:
            equipment.location = resolve_reference(
                self.project.locations, Location, record.location, referrer=equipment
            )
        elif record.sub_location is not None:
            raise DefinitionProcessingError(
                EntityKind.EQUIPMENT,
                entity_id,
                f"sub_location {record.sub_location} given without a location",
                path,
            )
        return equipment


def build_project(files: Iterable[FileBag], library: Library, decide: ConflictPolicy) -> Project:
    """Resolve ``files``, in order, into a ``Project`` whose types point into ``library``."""
    builder = ProjectBuilder(library, decide)
    file_count = 0
    for bag in files:
        builder.add_file(bag)
        file_count += 1
    project = builder.finish()
    log.info("Built project with %d entities from %d file(s)", len(project), file_count)
    return project
