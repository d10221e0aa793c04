"""Path segmentation - split a raw tile path into exportable polylines.

The search algorithm produces a flat, ordered tile sequence. Mapping tools need
one polyline per plane and map context, without redundant points:

1. BREAK: Split the sequence wherever consecutive tiles change plane, are not
   adjacent (a teleport or shortcut was taken) or change map region
2. COMPRESS: Collapse collinear unit steps of each run into their endpoints
3. JUMP LINES: Where a non-adjacent jump stays on the same plane and map
   region, add a 2-point transport-jump segment joining both runs

Segments are emitted in traversal order. Pure and stateless: safe to call from
any thread.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from tilepath_planner.model.path_segment import PathSegment
from tilepath_planner.model.tile_coordinate import TileCoordinate

logger = logging.getLogger(__name__)


class BreakKind(Enum):
    """Reason two consecutive tiles end up in different runs."""

    PLANE_CHANGE = "plane_change"
    JUMP = "jump"  # Same plane, tile distance > 1
    REGION_CHANGE = "region_change"  # Adjacent, but map region differs


def classify_break(previous: TileCoordinate, current: TileCoordinate) -> Optional[BreakKind]:
    """Return why a run must end between two consecutive tiles, None to continue it.

    Duplicate tiles (distance 0) never break a run.
    """
    if previous.plane != current.plane:
        return BreakKind.PLANE_CHANGE
    if previous.chebyshev_distance_to(other=current) > 1:
        return BreakKind.JUMP
    if previous.map_region_id != current.map_region_id:
        return BreakKind.REGION_CHANGE
    return None


def compress_directions(tiles: Sequence[TileCoordinate]) -> list[TileCoordinate]:
    """Drop repeated tiles and interior tiles whose incoming step equals their outgoing step.

    The first and last tile are always kept, so only direction changes remain.

    Example:
        (0,0) (1,0) (2,0) (2,1) (2,2)  ->  (0,0) (2,0) (2,2)
    """
    distinct = [tile for index, tile in enumerate(tiles) if index == 0 or tile != tiles[index - 1]]
    if len(distinct) <= 2:
        return distinct

    coords = np.array([(tile.x, tile.y) for tile in distinct], dtype=np.int64)
    steps = np.diff(coords, axis=0)
    turns = np.any(steps[1:] != steps[:-1], axis=1)
    keep = np.concatenate(([True], turns, [True]))
    return [tile for tile, kept in zip(distinct, keep) if kept]


def segment_path(tiles: Sequence[TileCoordinate]) -> list[PathSegment]:
    """Split a raw path into direction-compressed, homogeneous segments.

    A jump onto the very last tile of the path is the final flush: the last
    tile forms its own segment and no transport-jump segment is drawn.

    Args:
        tiles: Non-empty ordered tile sequence from the search algorithm

    Returns:
        Segments in traversal order, transport-jump segments between the runs
        they connect.

    Raises:
        ValueError: If tiles is empty.
    """
    if not tiles:
        raise ValueError("Cannot segment an empty path")

    segments: list[PathSegment] = []
    run: list[TileCoordinate] = [tiles[0]]
    last_index = len(tiles) - 1

    for index in range(1, len(tiles)):
        previous, current = tiles[index - 1], tiles[index]
        kind = classify_break(previous=previous, current=current)
        if kind is None:
            run.append(current)
            continue

        segments.append(PathSegment.from_tiles(tiles=compress_directions(tiles=run)))
        if (
            kind is BreakKind.JUMP
            and previous.map_region_id == current.map_region_id
            and index != last_index
        ):
            segments.append(PathSegment.from_tiles(tiles=[previous, current], is_transport_jump=True))
        run = [current]

    segments.append(PathSegment.from_tiles(tiles=compress_directions(tiles=run)))

    logger.debug(f"Segmented {len(tiles)} tiles into {len(segments)} segments")
    return segments


class PathSegmenter:
    """Stateless wrapper around segment_path for injection into services."""

    def segment(self, tiles: Sequence[TileCoordinate]) -> list[PathSegment]:
        return segment_path(tiles=tiles)
