"""Eligibility snapshots - player capability and user preference.

Both halves are immutable and are swapped together as one EligibilitySnapshot
whenever the transport eligibility is refreshed, so readers never observe a
half-updated state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from tilepath_planner.constants import SettingsDefaults, SkillConfig, TimingConfig
from tilepath_planner.model.transport import Skill

if TYPE_CHECKING:
    from tilepath_planner.settings import PlannerSettings


@dataclass(frozen=True)
class CapabilitySnapshot:
    """Boosted skill levels of the player at refresh time.

    Skills not read yet (e.g. before login) sit at the floor level.
    """

    skill_levels: Mapping[Skill, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "skill_levels", MappingProxyType(dict(self.skill_levels)))

    def level(self, skill: Skill) -> int:
        return self.skill_levels.get(skill, SkillConfig.FLOOR_LEVEL)


@dataclass(frozen=True)
class PreferenceFlags:
    """Transport preferences mirrored from the settings store."""

    avoid_wilderness: bool = SettingsDefaults.AVOID_WILDERNESS
    use_agility_shortcuts: bool = SettingsDefaults.USE_AGILITY_SHORTCUTS
    use_grapple_shortcuts: bool = SettingsDefaults.USE_GRAPPLE_SHORTCUTS
    use_boats: bool = SettingsDefaults.USE_BOATS
    use_fairy_rings: bool = SettingsDefaults.USE_FAIRY_RINGS
    use_teleports: bool = SettingsDefaults.USE_TELEPORTS

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> PreferenceFlags:
        return cls(
            avoid_wilderness=settings.avoid_wilderness,
            use_agility_shortcuts=settings.use_agility_shortcuts,
            use_grapple_shortcuts=settings.use_grapple_shortcuts,
            use_boats=settings.use_boats,
            use_fairy_rings=settings.use_fairy_rings,
            use_teleports=settings.use_teleports,
        )


@dataclass(frozen=True)
class EligibilitySnapshot:
    """Capability and preference pair evaluated by TransportEligibility.

    Attributes:
        capability: Player skill levels
        preferences: Transport preferences
        recalculate_distance: Distance from the path before recalculating (-1 for never)
        calculation_cutoff_ticks: Ticks without progress before the search stops
    """

    capability: CapabilitySnapshot = field(default_factory=CapabilitySnapshot)
    preferences: PreferenceFlags = field(default_factory=PreferenceFlags)
    recalculate_distance: int = SettingsDefaults.RECALCULATE_DISTANCE
    calculation_cutoff_ticks: int = SettingsDefaults.CALCULATION_CUTOFF_TICKS

    @property
    def calculation_cutoff_ms(self) -> int:
        return self.calculation_cutoff_ticks * TimingConfig.GAME_TICK_LENGTH_MS
