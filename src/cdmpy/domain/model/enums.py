"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Entity category; values double as the table keys of a decoded data file.

    IDs are unique only within one kind.
    """

    # library (catalog) kinds
    WIRE_TYPE = "wire_type"
    CABLE_TYPE = "cable_type"
    TERM_CABLE_TYPE = "term_cable_type"
    CONNECTOR_TYPE = "connector_type"
    EQUIPMENT_TYPE = "equipment_type"
    LOCATION_TYPE = "location_type"
    PATHWAY_TYPE = "pathway_type"

    # project (instance) kinds
    LOCATION = "location"
    EQUIPMENT = "equipment"
    PATHWAY = "pathway"
    WIRE_CABLE = "wire_cable"

    @property
    def label(self) -> str:
        """CamelCase name used in logs and error messages."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    @property
    def is_library_kind(self) -> bool:
        return self in LIBRARY_KINDS


LIBRARY_KINDS: frozenset[EntityKind] = frozenset(
    {
        EntityKind.WIRE_TYPE,
        EntityKind.CABLE_TYPE,
        EntityKind.TERM_CABLE_TYPE,
        EntityKind.CONNECTOR_TYPE,
        EntityKind.EQUIPMENT_TYPE,
        EntityKind.LOCATION_TYPE,
        EntityKind.PATHWAY_TYPE,
    }
)


class CrossSection(StrEnum):
    """Cross section shape of a wire or cable."""

    OVAL = "Oval"
    CIRCULAR = "Circular"
    # two or more wires/cables bonded to each other, not inside one jacket
    SIAMESE = "Siamese"

    @classmethod
    def parse(cls, value: str) -> CrossSection:
        """Case-insensitive lookup; raises ``ValueError`` for unknown shapes."""
        normalized = value.strip().upper()
        for member in cls:
            if member.value.upper() == normalized:
                return member
        raise ValueError(f"Cross Section: {value} not recognized")


class LayerType(StrEnum):
    """Function of one insulation/shield layer of a cable."""

    INSULATION = "Insulation"
    SEMICONDUCTOR = "Semiconductor"
    SHIELD = "Shield"
    SCREEN = "Screen"
    CONCENTRIC_NEUTRAL = "ConcentricNeutral"
    ARMOR = "Armor"

    @classmethod
    def parse(cls, value: str) -> LayerType:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"LayerType: {value} not recognized") from exc
