"""TransportEdge - Optional connections between tiles.

A transport is a non-walk action in the traversal graph (agility shortcut,
boat, fairy ring, teleport) subject to eligibility gates. Trait flags are not
mutually exclusive: a shortcut may also be a boat.

Transports are owned by the transport registry, keyed by origin tile, and are
read-only for the rest of the system.
"""

import json
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from tilepath_planner.constants import SkillConfig
from tilepath_planner.model.tile_coordinate import TileCoordinate

logger = logging.getLogger(__name__)


class Skill(Enum):
    """Skills that gate transports."""

    AGILITY = "agility"
    RANGED = "ranged"
    STRENGTH = "strength"
    PRAYER = "prayer"
    WOODCUTTING = "woodcutting"


class QuestState(Enum):
    """Completion state of a quest."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# Quest that must at least be started before fairy rings can be used
FAIRY_RING_QUEST = "Fairytale II - Cure a Queen"


@dataclass(frozen=True)
class TransportEdge:
    """One optional connection between two tiles.

    Attributes:
        origin: Tile where the transport is used
        destination: Tile where the transport lands
        skill_levels: Minimum level per skill (missing skills = no requirement)
        is_agility_shortcut: Agility shortcut (primary skill: agility)
        is_grapple_shortcut: Crossbow grapple shortcut (also needs ranged and strength)
        is_boat: Boat, canoe or charter ship
        is_fairy_ring: Fairy ring
        is_teleport: Teleportation portal or lever
        quest: Quest that must be finished to use this transport
    """

    origin: TileCoordinate
    destination: TileCoordinate
    skill_levels: Mapping[Skill, int] = field(default_factory=dict)
    is_agility_shortcut: bool = False
    is_grapple_shortcut: bool = False
    is_boat: bool = False
    is_fairy_ring: bool = False
    is_teleport: bool = False
    quest: Optional[str] = None

    def __post_init__(self) -> None:
        """Freeze skill levels and validate them."""
        for skill, level in self.skill_levels.items():
            if not isinstance(skill, Skill):
                raise ValueError(f"Unknown skill {skill!r} in transport {self.origin} -> {self.destination}")
            if level < 0:
                raise ValueError(f"Negative level {level} for {skill.value} in transport {self.origin}")
        object.__setattr__(self, "skill_levels", MappingProxyType(dict(self.skill_levels)))

    def required_level(self, skill: Skill) -> int:
        """Minimum level for a skill, the floor value when not required."""
        return self.skill_levels.get(skill, SkillConfig.FLOOR_LEVEL)

    @property
    def is_quest_locked(self) -> bool:
        return self.quest is not None

    @property
    def is_canoe(self) -> bool:
        """Boat that also needs woodcutting above the floor level."""
        return self.is_boat and self.required_level(skill=Skill.WOODCUTTING) > SkillConfig.FLOOR_LEVEL

    @property
    def is_prayer_locked(self) -> bool:
        return self.required_level(skill=Skill.PRAYER) > SkillConfig.FLOOR_LEVEL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransportEdge":
        """Create TransportEdge from dictionary.

        Expected keys: origin, destination ([x, y, plane] or {x, y, plane}),
        optional skills ({"agility": 21}), optional flags and quest.
        """
        try:
            skills = {Skill(name.lower()): int(level) for name, level in data.get("skills", {}).items()}
        except ValueError as e:
            raise ValueError(f"Invalid skill requirement in transport {data!r}: {e}") from e

        return cls(
            origin=_parse_tile(data["origin"]),
            destination=_parse_tile(data["destination"]),
            skill_levels=skills,
            is_agility_shortcut=bool(data.get("is_agility_shortcut", False)),
            is_grapple_shortcut=bool(data.get("is_grapple_shortcut", False)),
            is_boat=bool(data.get("is_boat", False)),
            is_fairy_ring=bool(data.get("is_fairy_ring", False)),
            is_teleport=bool(data.get("is_teleport", False)),
            quest=data.get("quest") or None,
        )

    def __repr__(self) -> str:
        return f"TransportEdge({self.origin} -> {self.destination})"


def _parse_tile(value: Any) -> TileCoordinate:
    if isinstance(value, dict):
        return TileCoordinate.from_dict(data=value)
    return TileCoordinate.from_sequence(values=value)


def build_registry(transports: list[TransportEdge]) -> dict[TileCoordinate, list[TransportEdge]]:
    """Group transports by origin tile."""
    registry: dict[TileCoordinate, list[TransportEdge]] = defaultdict(list)
    for transport in transports:
        registry[transport.origin].append(transport)
    return dict(registry)


def load_transports(path: Path) -> dict[TileCoordinate, list[TransportEdge]]:
    """Load a transport registry from a JSON list of transport dicts.

    Args:
        path: JSON file containing a list of transport objects

    Returns:
        Registry mapping origin tile to its transports.

    Raises:
        ValueError: If the file does not contain a list or an entry is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Transport file {path} must contain a JSON list, got {type(data).__name__}")

    transports = []
    for index, entry in enumerate(data):
        try:
            transports.append(TransportEdge.from_dict(data=entry))
        except KeyError as e:
            raise ValueError(f"Transport #{index} in {path} is missing field {e}") from e

    registry = build_registry(transports=transports)
    logger.info(f"Loaded {len(transports)} transports from {path.name} ({len(registry)} origins)")
    return registry
