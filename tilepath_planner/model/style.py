"""Export styling - colors, widths and the export format selector.

StyleConfig is supplied by the settings store and read-only for the exporter.
Transport-jump segments use the alternate (transport) stroke and width.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from tilepath_planner.constants import ExportConfig, SettingsDefaults

if TYPE_CHECKING:
    from tilepath_planner.model.path_segment import PathSegment
    from tilepath_planner.settings import PlannerSettings


class ExportFormat(Enum):
    """Text encoding for exported paths."""

    WIKI = "wiki"  # {{Map|...}} line markup
    GEO_JSON = "geo_json"  # GeoJSON FeatureCollection


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels.

    Example:
        Color(51, 136, 255).hex_rgb  # "#3388ff"
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be within 0-255, got {value}")

    @property
    def hex_rgb(self) -> str:
        """Lower-case #rrggbb string (alpha not included)."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def opacity(self) -> float:
        """Alpha as a 0-1 fraction rounded to two decimals."""
        return round(self.alpha / 255, ExportConfig.OPACITY_DECIMALS)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Create Color from an (r, g, b) or (r, g, b, a) sequence."""
        if len(values) not in (3, 4):
            raise ValueError(f"Expected (r, g, b) or (r, g, b, a), got {list(values)}")
        return cls(*(int(v) for v in values))


@dataclass(frozen=True)
class StyleConfig:
    """Line style for GeoJSON export.

    Attributes:
        stroke: Color of ordinary path segments
        width: Line width of ordinary path segments (pixels)
        stroke_transport: Color of transport-jump segments
        width_transport: Line width of transport-jump segments (pixels)
        title: Optional description, omitted from the export when empty
    """

    stroke: Color = Color(*SettingsDefaults.STROKE)
    width: int = SettingsDefaults.WIDTH
    stroke_transport: Color = Color(*SettingsDefaults.STROKE_TRANSPORT)
    width_transport: int = SettingsDefaults.WIDTH_TRANSPORT
    title: str = SettingsDefaults.TITLE

    def stroke_for(self, segment: PathSegment) -> Color:
        return self.stroke_transport if segment.is_transport_jump else self.stroke

    def width_for(self, segment: PathSegment) -> int:
        return self.width_transport if segment.is_transport_jump else self.width

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> StyleConfig:
        return cls(
            stroke=settings.stroke,
            width=settings.width,
            stroke_transport=settings.stroke_transport,
            width_transport=settings.width_transport,
            title=settings.title,
        )
