"""Rectangular world regions and the restricted (wilderness) zone.

A GeoRegion is an axis-aligned rectangle of tiles. Containment only looks at
a tile's (x, y) footprint: the rectangles are defined on plane 0, but tiles on
other planes are tested against the same footprint.

Geometry is backed by Shapely boxes so that regions can be combined and
exported (`__geo_interface__`) like any other map geometry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from tilepath_planner.constants import WildernessConfig

if TYPE_CHECKING:
    from tilepath_planner.model.tile_coordinate import TileCoordinate


@dataclass(frozen=True)
class GeoRegion:
    """Axis-aligned rectangle of tiles.

    Covers x in [x, x + width - 1] and y in [y, y + height - 1], inclusive.

    Attributes:
        x: South-west corner x
        y: South-west corner y
        width: Number of tiles along x
        height: Number of tiles along y
        plane: Plane the region is defined on (informational)
    """

    x: int
    y: int
    width: int
    height: int
    plane: int = 0
    _shape: BaseGeometry = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"GeoRegion must be at least 1x1 tiles, got {self.width}x{self.height}")
        object.__setattr__(
            self,
            "_shape",
            box(self.x, self.y, self.x + self.width - 1, self.y + self.height - 1),
        )

    @property
    def shape(self) -> BaseGeometry:
        """Shapely rectangle through the corner tiles."""
        return self._shape

    def contains(self, tile: TileCoordinate) -> bool:
        """True iff the tile's (x, y) lies inside the rectangle (edges included)."""
        return self._shape.covers(Point(tile.x, tile.y))


class RestrictedZone:
    """Union of rectangular regions users may opt to avoid.

    Example:
        WILDERNESS.contains(TileCoordinate(3100, 3600, 0))  # True
    """

    def __init__(self, regions: list[GeoRegion]) -> None:
        if not regions:
            raise ValueError("RestrictedZone needs at least one region")
        self.regions = tuple(regions)

    def contains(self, tile: TileCoordinate) -> bool:
        return any(region.contains(tile=tile) for region in self.regions)

    def __repr__(self) -> str:
        return f"RestrictedZone({list(self.regions)})"


WILDERNESS_ABOVE_GROUND = GeoRegion(*WildernessConfig.ABOVE_GROUND, plane=WildernessConfig.PLANE)
WILDERNESS_UNDERGROUND = GeoRegion(*WildernessConfig.UNDERGROUND, plane=WildernessConfig.PLANE)
WILDERNESS = RestrictedZone(regions=[WILDERNESS_ABOVE_GROUND, WILDERNESS_UNDERGROUND])
