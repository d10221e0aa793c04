"""TileCoordinate - The fundamental geometry atom for tile-based route planning.

A TileCoordinate addresses one grid cell of the world by (x, y, plane).
It is the single source of truth for location throughout the system.

Used by:
- TransportEdge (origin and destination of a transport)
- PathSegment (ordered tiles of an exportable polyline)
- GeoRegion (restricted-zone containment)
"""

from dataclasses import dataclass
from math import inf
from typing import Any, Sequence

from tilepath_planner.core.map_region import map_region_id


@dataclass(frozen=True)
class TileCoordinate:
    """A single tile of the game world.

    Immutable and hashable so it can key transport registries.

    Attributes:
        x: Tile x coordinate (west to east)
        y: Tile y coordinate (south to north)
        plane: Vertical level index (0 = ground floor)

    Example:
        tile = TileCoordinate(x=3222, y=3218, plane=0)
    """

    x: int
    y: int
    plane: int = 0

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        for name in ("x", "y", "plane"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"TileCoordinate {name} must be an integer, got {value!r}")
        if self.plane < 0:
            raise ValueError(f"TileCoordinate cannot have negative plane at ({self.x}, {self.y}, {self.plane})")

    @property
    def map_region_id(self) -> int:
        """Map context derived from the y coordinate."""
        return map_region_id(y=self.y)

    def step_to(self, other: "TileCoordinate") -> tuple[int, int]:
        """Return (dx, dy) step vector to another tile, ignoring plane."""
        return (other.x - self.x, other.y - self.y)

    def chebyshev_distance_to(self, other: "TileCoordinate") -> int:
        """2D tile distance (diagonal steps count as 1), ignoring plane."""
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def distance_to(self, other: "TileCoordinate") -> float:
        """Tile distance to another tile.

        Returns:
            Chebyshev distance when both tiles share a plane, infinity otherwise.
        """
        if self.plane != other.plane:
            return inf
        return self.chebyshev_distance_to(other=other)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "plane": self.plane}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TileCoordinate":
        """Create TileCoordinate from dictionary."""
        return cls(x=int(data["x"]), y=int(data["y"]), plane=int(data.get("plane", 0)))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "TileCoordinate":
        """Create TileCoordinate from an (x, y) or (x, y, plane) sequence."""
        if len(values) not in (2, 3):
            raise ValueError(f"Expected (x, y) or (x, y, plane), got {list(values)}")
        return cls(*(int(v) for v in values))

    def __repr__(self) -> str:
        return f"TileCoordinate({self.x}, {self.y}, {self.plane})"
