from __future__ import annotations

import pytest

from cdmpy.domain.model import (
    LIBRARY_KIND_ORDER,
    PROJECT_KIND_ORDER,
    EntityKind,
    Equipment,
    Library,
    Location,
    Project,
    SubLocation,
    WireCable,
    WireType,
)


def test_tables_follow_processing_order() -> None:
    assert [kind for kind, _table in Library().tables()] == list(LIBRARY_KIND_ORDER)
    assert [kind for kind, _table in Project().tables()] == list(PROJECT_KIND_ORDER)


def test_table_lookup_rejects_foreign_kinds() -> None:
    with pytest.raises(KeyError, match="Library has no table for Location"):
        Library().table(EntityKind.LOCATION)
    with pytest.raises(KeyError, match="Project has no table for WireType"):
        Project().table(EntityKind.WIRE_TYPE)


def test_table_returns_the_live_mapping() -> None:
    library = Library()
    wire = WireType(id="W1", material="copper")

    library.table(EntityKind.WIRE_TYPE)["W1"] = wire

    assert library.wire_types["W1"] is wire
    assert len(library) == 1
    assert library.counts()[EntityKind.WIRE_TYPE] == 1
    assert library.counts()[EntityKind.CABLE_TYPE] == 0


def test_equipment_position_is_looked_up_through_its_location() -> None:
    location = Location(id="L1")
    equipment = Equipment(id="EQ1", location=location, sub_location="u1")

    assert equipment.position is None

    location.sub_locations["u1"] = SubLocation(x=1.0, y=2.0, z=3.0)

    assert equipment.position == SubLocation(x=1.0, y=2.0, z=3.0)


def test_wire_cable_type_kind() -> None:
    assert WireCable(id="WC1").type_kind is None
    assert WireCable(id="WC1", wire_cable_type=WireType(id="W1")).type_kind is EntityKind.WIRE_TYPE
