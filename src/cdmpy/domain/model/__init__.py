"""Public domain model surface."""

from __future__ import annotations

from cdmpy.domain.model.entity import Entity, describe_value
from cdmpy.domain.model.enums import CrossSection, EntityKind, LayerType
from cdmpy.domain.model.graphs import (
    ENTITY_CLASSES,
    LIBRARY_KIND_ORDER,
    PROJECT_KIND_ORDER,
    Library,
    Project,
)
from cdmpy.domain.model.library import (
    CableLayer,
    CableType,
    CatalogEntity,
    ConnectorPin,
    ConnectorType,
    CoreType,
    EquipConnector,
    EquipFace,
    EquipmentType,
    LocationType,
    PathwayType,
    TermCableConnector,
    TermCableType,
    Termination,
    WireType,
)
from cdmpy.domain.model.project import (
    Equipment,
    Location,
    Pathway,
    SubLocation,
    WireCable,
    WireCableTypeRef,
)

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    "describe_value",
    # enums
    "CrossSection",
    "EntityKind",
    "LayerType",
    # library
    "CatalogEntity",
    "WireType",
    "CableType",
    "CableLayer",
    "CoreType",
    "TermCableType",
    "TermCableConnector",
    "Termination",
    "ConnectorType",
    "ConnectorPin",
    "EquipmentType",
    "EquipFace",
    "EquipConnector",
    "LocationType",
    "PathwayType",
    # project
    "Location",
    "SubLocation",
    "Equipment",
    "Pathway",
    "WireCable",
    "WireCableTypeRef",
    # graphs
    "ENTITY_CLASSES",
    "LIBRARY_KIND_ORDER",
    "PROJECT_KIND_ORDER",
    "Library",
    "Project",
]
