"""PathSegment - Exportable polyline of tiles sharing one plane and map region.

Produced by the path segmenter, consumed by the path exporter.
Immutable once produced.
"""

from dataclasses import dataclass

from tilepath_planner.constants import ExportConfig
from tilepath_planner.model.tile_coordinate import TileCoordinate


@dataclass(frozen=True)
class PathSegment:
    """Ordered, non-empty run of tiles on one plane and map region.

    Attributes:
        tiles: Direction-compressed tiles in traversal order
        plane: Plane shared by all tiles
        map_region_id: Map region shared by all tiles
        is_transport_jump: True for the 2-point line drawn across a transport
    """

    tiles: tuple[TileCoordinate, ...]
    plane: int
    map_region_id: int
    is_transport_jump: bool = False

    def __post_init__(self) -> None:
        """Validate invariants - fail immediately on a mixed segment."""
        if not self.tiles:
            raise ValueError("PathSegment must contain at least one tile")
        for tile in self.tiles:
            if tile.plane != self.plane:
                raise ValueError(f"Tile {tile} is not on segment plane {self.plane}")
            if tile.map_region_id != self.map_region_id:
                raise ValueError(f"Tile {tile} is not in segment map region {self.map_region_id}")
        if self.is_transport_jump and len(self.tiles) != 2:
            raise ValueError(f"Transport-jump segment must have exactly 2 tiles, got {len(self.tiles)}")

    @classmethod
    def from_tiles(cls, tiles: list[TileCoordinate], is_transport_jump: bool = False) -> "PathSegment":
        """Create a segment tagged with the plane and region of its first tile."""
        if not tiles:
            raise ValueError("PathSegment must contain at least one tile")
        first = tiles[0]
        return cls(
            tiles=tuple(tiles),
            plane=first.plane,
            map_region_id=first.map_region_id,
            is_transport_jump=is_transport_jump,
        )

    @property
    def tile_centers(self) -> list[tuple[float, float]]:
        """(x, y) of each tile center (tile corner + 0.5)."""
        offset = ExportConfig.TILE_CENTER_OFFSET
        return [(tile.x + offset, tile.y + offset) for tile in self.tiles]

    def __len__(self) -> int:
        return len(self.tiles)
