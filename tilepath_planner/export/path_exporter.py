"""Path export encodings for external mapping tools.

Two textual encodings of a segmented path:
- Wiki line markup: one {{Map|...|mtype=line}} template per segment
- GeoJSON: one FeatureCollection with a LineString Feature per segment

Coordinates are tile centers (tile corner + 0.5). The exporter performs no
I/O; it returns the text for the caller to place in a sink.
"""

import json
import logging
from typing import Any, Sequence, Union

from tilepath_planner.model.path_segment import PathSegment
from tilepath_planner.model.style import ExportFormat, StyleConfig

logger = logging.getLogger(__name__)


def to_wiki_markup(segments: Sequence[PathSegment]) -> str:
    """Encode segments as newline-separated wiki map templates.

    Example:
        {{Map|0.5,0.5|2.5,0.5|2.5,2.5|mapID=0|plane=0|mtype=line}}
    """
    blocks = []
    for segment in segments:
        points = "|".join(f"{x},{y}" for x, y in segment.tile_centers)
        blocks.append(f"{{{{Map|{points}|mapID={segment.map_region_id}|plane={segment.plane}|mtype=line}}}}")
    return "\n".join(blocks)


def _feature(segment: PathSegment, style: StyleConfig) -> dict[str, Any]:
    stroke = style.stroke_for(segment=segment)
    properties: dict[str, Any] = {
        "mapID": segment.map_region_id,
        "plane": segment.plane,
        "stroke": stroke.hex_rgb,
        "stroke-width": style.width_for(segment=segment),
        "stroke-opacity": stroke.opacity,
    }
    if style.title:
        properties["title"] = style.title

    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {
            "type": "LineString",
            "coordinates": [[x, y] for x, y in segment.tile_centers],
        },
    }


def to_geojson(segments: Sequence[PathSegment], style: StyleConfig) -> str:
    """Encode segments as a compact GeoJSON FeatureCollection string."""
    collection = {
        "type": "FeatureCollection",
        "features": [_feature(segment=segment, style=style) for segment in segments],
    }
    return json.dumps(collection, separators=(",", ":"))


def export_segments(
    segments: Sequence[PathSegment],
    style: StyleConfig,
    export_format: Union[ExportFormat, str],
) -> str:
    """Encode segments in the requested format.

    Returns:
        Encoded text, or an empty string for an unsupported format.
    """
    if export_format is ExportFormat.WIKI:
        return to_wiki_markup(segments=segments)
    if export_format is ExportFormat.GEO_JSON:
        return to_geojson(segments=segments, style=style)

    logger.warning(f"[EXPORT] Unsupported export format {export_format!r}, exporting nothing")
    return ""


class PathExporter:
    """Serializer bound to a style configuration.

    Example:
        exporter = PathExporter(style=StyleConfig(title="To the bank"))
        text = exporter.export(segments=segments, export_format=ExportFormat.GEO_JSON)
    """

    def __init__(self, style: StyleConfig | None = None) -> None:
        self.style = style or StyleConfig()

    def export(self, segments: Sequence[PathSegment], export_format: Union[ExportFormat, str]) -> str:
        return export_segments(segments=segments, style=self.style, export_format=export_format)
