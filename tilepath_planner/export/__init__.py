"""Path segmentation and export to external mapping tools.

- path_segmenter: Raw tile path -> homogeneous, direction-compressed segments
- path_exporter: Segments -> wiki line markup or GeoJSON
- export_service: Settings-driven export of a finished path into a text sink
"""

from tilepath_planner.export.export_service import FileSink, PathExportService
from tilepath_planner.export.path_exporter import (
    PathExporter,
    export_segments,
    to_geojson,
    to_wiki_markup,
)
from tilepath_planner.export.path_segmenter import (
    BreakKind,
    PathSegmenter,
    classify_break,
    compress_directions,
    segment_path,
)

__all__ = [
    "BreakKind",
    "classify_break",
    "compress_directions",
    "segment_path",
    "PathSegmenter",
    "to_wiki_markup",
    "to_geojson",
    "export_segments",
    "PathExporter",
    "FileSink",
    "PathExportService",
]
