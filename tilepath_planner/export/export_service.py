"""Path export orchestration - from a finished path to a text sink.

Called by the host once a path calculation completes:
1. Skip if exporting is disabled in the settings
2. Segment the raw path
3. Encode it with the configured format and style
4. Hand the text to the sink (clipboard, file, ...)

Export is best-effort and user-triggered: nothing here raises to the user.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional, Sequence

from tilepath_planner.constants import ExportConfig
from tilepath_planner.export.path_exporter import export_segments
from tilepath_planner.export.path_segmenter import PathSegmenter
from tilepath_planner.model.style import StyleConfig
from tilepath_planner.model.tile_coordinate import TileCoordinate
from tilepath_planner.settings import SettingsStore

logger = logging.getLogger(__name__)

TextSink = Callable[[str], None]


class FileSink:
    """Sink writing the export text to a UTF-8 file.

    Write failures are logged, not raised.
    """

    def __init__(self, path: Path = ExportConfig.DEFAULT_EXPORT_FILE) -> None:
        self.path = Path(path)

    def __call__(self, text: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
            logger.info(f"[EXPORT] Path written to {self.path.name} ({len(text)} chars)")
        except OSError as e:
            logger.error(f"[EXPORT] Failed to write path export to {self.path}: {e}")


class PathExportService:
    """Exports finished paths according to the current settings.

    Example:
        service = PathExportService(settings_store=store, sink=FileSink())
        service.export(path=tiles)
    """

    def __init__(
        self,
        settings_store: SettingsStore,
        sink: TextSink,
        segmenter: Optional[PathSegmenter] = None,
    ) -> None:
        self._settings_store = settings_store
        self._sink = sink
        self._segmenter = segmenter or PathSegmenter()

    def export(self, path: Sequence[TileCoordinate]) -> Optional[str]:
        """Export a path if enabled.

        Args:
            path: Ordered tiles from the search algorithm

        Returns:
            The text handed to the sink, or None when nothing was exported.
        """
        settings = self._settings_store.load()
        if not settings.export_path_enabled:
            return None

        if not path:
            logger.warning("[EXPORT] Skipping export of an empty path")
            return None

        segments = self._segmenter.segment(tiles=path)
        text = export_segments(
            segments=segments,
            style=StyleConfig.from_settings(settings=settings),
            export_format=settings.export_format,
        )
        self._sink(text)
        logger.info(f"[EXPORT] Exported {len(path)} tiles as {len(segments)} segments ({settings.export_format})")
        return text
