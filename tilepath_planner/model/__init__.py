"""Data model classes for tile-based route planning.

- TileCoordinate: Geometry atom (x, y, plane)
- TransportEdge: Optional connection with skill, quest and trait gates
- CapabilitySnapshot / PreferenceFlags / EligibilitySnapshot: Evaluator state
- PathSegment: Exportable polyline on one plane and map region
- Color / StyleConfig / ExportFormat: Export styling
"""

from tilepath_planner.model.path_segment import PathSegment
from tilepath_planner.model.snapshot import (
    CapabilitySnapshot,
    EligibilitySnapshot,
    PreferenceFlags,
)
from tilepath_planner.model.style import Color, ExportFormat, StyleConfig
from tilepath_planner.model.tile_coordinate import TileCoordinate
from tilepath_planner.model.transport import (
    FAIRY_RING_QUEST,
    QuestState,
    Skill,
    TransportEdge,
    build_registry,
    load_transports,
)

__all__ = [
    "TileCoordinate",
    "Skill",
    "QuestState",
    "FAIRY_RING_QUEST",
    "TransportEdge",
    "build_registry",
    "load_transports",
    "CapabilitySnapshot",
    "PreferenceFlags",
    "EligibilitySnapshot",
    "PathSegment",
    "Color",
    "ExportFormat",
    "StyleConfig",
]
