"""Map region classification for exported paths.

External mapping tools render the base overworld map and every other map
(underground, instanced areas) as separate map contexts. A tile's map context
is derived from its y coordinate alone:
- Base map: y strictly inside the overworld band
- Other: everything else

Two distant locations sharing a y-band are treated as the same map context.
"""

from tilepath_planner.constants import MapRegionConfig


def map_region_id(y: int) -> int:
    """Classify a y coordinate into a map region id.

    Args:
        y: Tile y coordinate

    Returns:
        MapRegionConfig.BASE_MAP_ID if LOWER_Y < y < UPPER_Y,
        otherwise MapRegionConfig.OTHER_MAP_ID.
    """
    if MapRegionConfig.LOWER_Y < y < MapRegionConfig.UPPER_Y:
        return MapRegionConfig.BASE_MAP_ID
    return MapRegionConfig.OTHER_MAP_ID
