"""Configuration constants for Tilepath Planner.

All fixed parameters are centralized here for easy tuning.

Classes:
    WildernessConfig: Restricted-zone rectangles
    MapRegionConfig: Map region classification band
    TimingConfig: Game tick timing
    SkillConfig: Skill level floor values
    SettingsDefaults: Default values for user-configurable settings
    ExportConfig: Export format details and output locations
"""

from pathlib import Path

# Package root directory (where tilepath_planner/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of tilepath_planner/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Output directory for exported paths
OUTPUT_DIR = PROJECT_ROOT / "output"


class WildernessConfig:
    """Restricted zone (wilderness) rectangles.

    Each rectangle is (x, y, width, height) in tiles, defined on plane 0.
    Tiles on other planes are tested against the same (x, y) footprint.
    """

    ABOVE_GROUND = (2944, 3523, 448, 448)
    UNDERGROUND = (2944, 9918, 320, 442)
    PLANE = 0


class MapRegionConfig:
    """Map region classification by y-coordinate band.

    A tile belongs to the base map when LOWER_Y < y < UPPER_Y (strict).
    Everything north of the surface band (underground areas sit 6400 tiles
    north of their surface counterparts, instanced areas) is the "other" region.
    """

    BASE_MAP_ID = 0
    OTHER_MAP_ID = -1

    LOWER_Y = -1  # y is never negative
    UPPER_Y = 4160


assert MapRegionConfig.LOWER_Y < MapRegionConfig.UPPER_Y, "Base map band must not be empty"
assert MapRegionConfig.BASE_MAP_ID != MapRegionConfig.OTHER_MAP_ID


class TimingConfig:
    """Game timing parameters."""

    GAME_TICK_LENGTH_MS = 600


class SkillConfig:
    """Skill level floor values.

    A required level at or below the floor means "no requirement".
    """

    FLOOR_LEVEL = 1


class SettingsDefaults:
    """Defaults for user-configurable settings."""

    AVOID_WILDERNESS = True
    USE_AGILITY_SHORTCUTS = True
    USE_GRAPPLE_SHORTCUTS = False
    USE_BOATS = True
    USE_FAIRY_RINGS = False
    USE_TELEPORTS = False

    RECALCULATE_DISTANCE = 10  # -1 for never
    CALCULATION_CUTOFF_TICKS = 5

    EXPORT_PATH_ENABLED = False
    EXPORT_FORMAT = "wiki"

    # RGBA
    STROKE = (51, 136, 255, 255)
    WIDTH = 3
    STROKE_TRANSPORT = (51, 136, 255, 127)
    WIDTH_TRANSPORT = 3
    TITLE = ""


assert SettingsDefaults.RECALCULATE_DISTANCE >= -1
assert 1 <= SettingsDefaults.CALCULATION_CUTOFF_TICKS <= 30


class ExportConfig:
    """Export format details."""

    # Offset from tile corner to tile center
    TILE_CENTER_OFFSET = 0.5

    # Decimal places for GeoJSON stroke-opacity
    OPACITY_DECIMALS = 2

    # Default file written by FileSink
    DEFAULT_EXPORT_FILE = OUTPUT_DIR / "tilepath_planner" / "path_export.txt"
