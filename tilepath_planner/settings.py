"""User-configurable settings and the stores that provide them.

PlannerSettings mirrors the plugin settings panel:
- Pathfinding preferences (wilderness avoidance, which transports to use)
- Recalculation and calculation cutoff
- Path export (toggle, format, line style)

Stores:
- StaticSettingsStore: In-memory settings (tests, embedding hosts)
- JsonSettingsStore: Settings persisted as a JSON file
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Union

from tilepath_planner.constants import SettingsDefaults
from tilepath_planner.model.style import Color, ExportFormat

logger = logging.getLogger(__name__)

_COLOR_FIELDS = ("stroke", "stroke_transport")


@dataclass(frozen=True)
class PlannerSettings:
    """Snapshot of the user settings.

    Attributes:
        avoid_wilderness: Avoid entering the wilderness if possible
        use_agility_shortcuts: Include agility shortcuts (level permitting)
        use_grapple_shortcuts: Include crossbow grapple shortcuts
        use_boats: Include boats, canoes and charter ships
        use_fairy_rings: Include fairy rings (quest permitting)
        use_teleports: Include teleportation portals and levers
        recalculate_distance: Distance from the path before recalculating (-1 for never)
        calculation_cutoff_ticks: Ticks without progress before the search stops
        export_path_enabled: Export the path after calculation
        export_format: Export text encoding (unknown values export nothing)
        stroke: Line color for GeoJSON export
        width: Line width for GeoJSON export
        stroke_transport: Transport line color for GeoJSON export
        width_transport: Transport line width for GeoJSON export
        title: Line description for GeoJSON export
    """

    avoid_wilderness: bool = SettingsDefaults.AVOID_WILDERNESS
    use_agility_shortcuts: bool = SettingsDefaults.USE_AGILITY_SHORTCUTS
    use_grapple_shortcuts: bool = SettingsDefaults.USE_GRAPPLE_SHORTCUTS
    use_boats: bool = SettingsDefaults.USE_BOATS
    use_fairy_rings: bool = SettingsDefaults.USE_FAIRY_RINGS
    use_teleports: bool = SettingsDefaults.USE_TELEPORTS
    recalculate_distance: int = SettingsDefaults.RECALCULATE_DISTANCE
    calculation_cutoff_ticks: int = SettingsDefaults.CALCULATION_CUTOFF_TICKS
    export_path_enabled: bool = SettingsDefaults.EXPORT_PATH_ENABLED
    export_format: Union[ExportFormat, str] = ExportFormat(SettingsDefaults.EXPORT_FORMAT)
    stroke: Color = Color(*SettingsDefaults.STROKE)
    width: int = SettingsDefaults.WIDTH
    stroke_transport: Color = Color(*SettingsDefaults.STROKE_TRANSPORT)
    width_transport: int = SettingsDefaults.WIDTH_TRANSPORT
    title: str = SettingsDefaults.TITLE

    def __post_init__(self) -> None:
        if self.recalculate_distance < -1:
            raise ValueError(f"recalculate_distance must be >= -1, got {self.recalculate_distance}")
        if self.calculation_cutoff_ticks < 1:
            raise ValueError(f"calculation_cutoff_ticks must be >= 1, got {self.calculation_cutoff_ticks}")
        if self.width < 0 or self.width_transport < 0:
            raise ValueError(f"Line widths must be non-negative, got {self.width}/{self.width_transport}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Color):
                value = list(value.rgba)
            elif isinstance(value, ExportFormat):
                value = value.value
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlannerSettings":
        """Create settings from a dict, falling back to defaults for missing keys.

        Unknown keys are ignored with a warning. An unknown export format is
        kept as-is so that exporting degrades to an empty string.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"[SETTINGS] Ignoring unknown settings: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for name in known & set(data):
            value = data[name]
            if name in _COLOR_FIELDS:
                value = Color.from_sequence(values=value)
            elif name == "export_format":
                value = _parse_export_format(value=value)
            values[name] = value
        return cls(**values)


def _parse_export_format(value: Any) -> Union[ExportFormat, str]:
    if isinstance(value, ExportFormat):
        return value
    try:
        return ExportFormat(str(value).lower())
    except ValueError:
        logger.warning(f"[SETTINGS] Unsupported export format {value!r}, exports will be empty")
        return str(value)


class SettingsStore(ABC):
    """Source of the current user settings."""

    @abstractmethod
    def load(self) -> PlannerSettings:
        """Return the current settings."""


class StaticSettingsStore(SettingsStore):
    """In-memory settings store.

    Example:
        store = StaticSettingsStore()
        store.update(use_teleports=True)
    """

    def __init__(self, settings: PlannerSettings | None = None) -> None:
        self._settings = settings or PlannerSettings()

    def load(self) -> PlannerSettings:
        return self._settings

    def update(self, **changes: Any) -> PlannerSettings:
        """Replace individual settings and return the new snapshot."""
        self._settings = replace(self._settings, **changes)
        return self._settings


class JsonSettingsStore(SettingsStore):
    """Settings persisted as a JSON object on disk.

    A missing file yields the default settings.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> PlannerSettings:
        if not self.path.exists():
            logger.info(f"[SETTINGS] {self.path} not found, using defaults")
            return PlannerSettings()

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self.path} must contain a JSON object")
        return PlannerSettings.from_dict(data=data)

    def save(self, settings: PlannerSettings) -> None:
        """Write settings to the JSON file, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
        logger.info(f"[SETTINGS] Saved settings to {self.path.name}")
