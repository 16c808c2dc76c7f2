from __future__ import annotations

from pathlib import Path

import pytest

from cdmpy.domain.model import (
    ENTITY_CLASSES,
    CableLayer,
    CableType,
    CrossSection,
    EntityKind,
    LayerType,
    Location,
    Termination,
    WireType,
    describe_value,
)


def test_entities_compare_by_kind_and_id_only() -> None:
    copper = WireType(id="W1", material="copper")
    aluminium = WireType(id="W1", material="aluminium")

    assert copper == aluminium
    assert hash(copper) == hash(aluminium)
    assert WireType(id="X") != CableType(id="X")
    assert len({copper, aluminium, CableType(id="W1")}) == 2


@pytest.mark.parametrize("kind", list(EntityKind))
def test_empty_value_is_partial_empty(kind: EntityKind) -> None:
    entity = ENTITY_CLASSES[kind].empty("X")

    assert entity.id == "X"
    assert entity.kind is kind
    assert entity.is_partial_empty()


def test_provenance_does_not_count_as_content() -> None:
    assert WireType(id="W1", source_path=Path("a.yaml")).is_partial_empty()
    assert not WireType(id="W1", insulated=True).is_partial_empty()
    assert not Location(id="L1", physical_location="room 101").is_partial_empty()


def test_merge_field_names_skip_only_the_id() -> None:
    names = WireType.merge_field_names()

    assert "id" not in names
    assert names[0] == "source_path"
    assert names[1:3] == ("manufacturer", "model")
    assert "source_path" not in WireType.content_field_names()


def test_field_strings_render_references_as_ids() -> None:
    cable = CableType(id="C1", insul_layers=[CableLayer(layer_number=1)])
    # a cable containing itself must still render
    cable.cable_cores = {"a": WireType(id="W1"), "loop": cable}

    strings = cable.field_strings()

    assert strings["cable_cores"] == "{a: W1, loop: C1}"
    assert strings["cross_section"] == "Circular"
    assert strings["diameter"] == ""
    assert strings["insul_layers"].startswith("[CableLayer(layer_number=1, layer_type=Insulation")


def test_describe_value_handles_nested_values() -> None:
    assert describe_value([Termination(core=1, pin=2)]) == "[Termination(core=1, pin=2)]"
    assert describe_value(None) == ""
    assert describe_value(2.5) == "2.5"


def test_cross_section_parse_is_case_insensitive() -> None:
    assert CrossSection.parse("oval") is CrossSection.OVAL
    assert CrossSection.parse("SIAMESE") is CrossSection.SIAMESE

    with pytest.raises(ValueError, match="Cross Section: Square not recognized"):
        CrossSection.parse("Square")


def test_layer_type_parse_is_exact() -> None:
    assert LayerType.parse("ConcentricNeutral") is LayerType.CONCENTRIC_NEUTRAL

    with pytest.raises(ValueError, match="LayerType: shield not recognized"):
        LayerType.parse("shield")


def test_entity_kind_labels() -> None:
    assert EntityKind.TERM_CABLE_TYPE.label == "TermCableType"
    assert EntityKind.WIRE_CABLE.label == "WireCable"
    assert EntityKind.PATHWAY_TYPE.is_library_kind
    assert not EntityKind.PATHWAY.is_library_kind
