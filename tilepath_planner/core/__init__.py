"""Core geometry for tile-based route planning.

- GeoRegion / RestrictedZone: Rectangular regions and the wilderness predicate
- map_region_id: Map context classification from the y coordinate
"""

from tilepath_planner.core.geo_region import (
    WILDERNESS,
    GeoRegion,
    RestrictedZone,
)
from tilepath_planner.core.map_region import map_region_id

__all__ = [
    "GeoRegion",
    "RestrictedZone",
    "WILDERNESS",
    "map_region_id",
]
