"""Export a saved tile path as wiki line markup or GeoJSON.

Developer utility: converts a JSON file holding a list of [x, y, plane] tiles
(e.g. dumped from a path calculation) into the text the plugin would place on
the clipboard, and prints it.

Usage:
    python scripts/export_path.py path.json --format geo_json --title "To the bank"
"""

import argparse
import json
import logging
from pathlib import Path

from tilepath_planner.constants import SettingsDefaults
from tilepath_planner.export import export_segments, segment_path
from tilepath_planner.model import Color, ExportFormat, StyleConfig, TileCoordinate

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_path(path: Path) -> list[TileCoordinate]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [TileCoordinate.from_sequence(values=values) for values in data]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path_file", type=Path, help="JSON list of [x, y, plane] tiles")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=SettingsDefaults.EXPORT_FORMAT,
    )
    parser.add_argument("--title", default=SettingsDefaults.TITLE, help="GeoJSON line description")
    parser.add_argument("--width", type=int, default=SettingsDefaults.WIDTH, help="GeoJSON line width")
    args = parser.parse_args()

    tiles = load_path(path=args.path_file)
    if not tiles:
        logger.warning(f"{args.path_file} contains no tiles, nothing to export")
        return

    style = StyleConfig(
        stroke=Color(*SettingsDefaults.STROKE),
        width=args.width,
        title=args.title,
    )
    segments = segment_path(tiles=tiles)
    print(export_segments(segments=segments, style=style, export_format=ExportFormat(args.format)))
    logger.info(f"Exported {len(tiles)} tiles as {len(segments)} segments")


if __name__ == "__main__":
    main()
