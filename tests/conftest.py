"""Shared pytest fixtures for tilepath_planner tests.

Provides FakeGameStateProvider and reusable test data for all tests.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Paths use small coordinates near the origin (base map region, plane 0)
    unless a test needs the wilderness or another map region. Wilderness
    tiles use the above-ground rectangle x 2944-3391, y 3523-3970.
"""

from typing import Optional

import pytest

from tilepath_planner.eligibility.interfaces import GameStateProvider, SerialTaskQueue
from tilepath_planner.eligibility.transport_eligibility import TransportEligibility
from tilepath_planner.model.tile_coordinate import TileCoordinate
from tilepath_planner.model.transport import QuestState, Skill, TransportEdge, build_registry
from tilepath_planner.settings import PlannerSettings, StaticSettingsStore


# =============================================================================
# FAKE GAME STATE
# =============================================================================


class FakeGameStateProvider(GameStateProvider):
    """In-memory game session.

    Quests missing from `quest_states` raise LookupError, like a quest the
    client cannot resolve yet.
    """

    def __init__(
        self,
        logged_in: bool = True,
        skill_levels: Optional[dict[Skill, int]] = None,
        quest_states: Optional[dict[str, QuestState]] = None,
        player_location: Optional[TileCoordinate] = None,
    ) -> None:
        self.logged_in = logged_in
        self.skill_levels = skill_levels if skill_levels is not None else {skill: 99 for skill in Skill}
        self.quest_states = quest_states if quest_states is not None else {}
        self.player_location = player_location
        self.quest_lookups: list[str] = []

    def is_logged_in(self) -> bool:
        return self.logged_in

    def get_boosted_skill_level(self, skill: Skill) -> int:
        return self.skill_levels.get(skill, 1)

    def get_quest_state(self, quest: str) -> QuestState:
        self.quest_lookups.append(quest)
        if quest not in self.quest_states:
            raise LookupError(f"Unknown quest {quest}")
        return self.quest_states[quest]

    def get_player_location(self) -> Optional[TileCoordinate]:
        return self.player_location


# =============================================================================
# TILE FIXTURES
# =============================================================================


@pytest.fixture
def origin_tile() -> TileCoordinate:
    return TileCoordinate(x=0, y=0, plane=0)


@pytest.fixture
def lumbridge_tile() -> TileCoordinate:
    """Outside the wilderness, base map."""
    return TileCoordinate(x=3222, y=3218, plane=0)


@pytest.fixture
def wilderness_tile() -> TileCoordinate:
    """Inside the above-ground wilderness rectangle."""
    return TileCoordinate(x=3100, y=3600, plane=0)


@pytest.fixture
def edgeville_tile() -> TileCoordinate:
    """Directly south of the wilderness ditch (y 3522 is outside)."""
    return TileCoordinate(x=3100, y=3522, plane=0)


@pytest.fixture
def l_shaped_path() -> list[TileCoordinate]:
    """Two steps east, then two steps north: one turn at (2, 0)."""
    return [
        TileCoordinate(x=0, y=0, plane=0),
        TileCoordinate(x=1, y=0, plane=0),
        TileCoordinate(x=2, y=0, plane=0),
        TileCoordinate(x=2, y=1, plane=0),
        TileCoordinate(x=2, y=2, plane=0),
    ]


# =============================================================================
# TRANSPORT FIXTURES
# =============================================================================


@pytest.fixture
def quest_transport() -> TransportEdge:
    return TransportEdge(
        origin=TileCoordinate(x=3200, y=3200, plane=0),
        destination=TileCoordinate(x=3300, y=3300, plane=0),
        quest="Dragon Slayer I",
    )


@pytest.fixture
def fairy_ring_transport() -> TransportEdge:
    return TransportEdge(
        origin=TileCoordinate(x=3129, y=3496, plane=0),
        destination=TileCoordinate(x=2412, y=4434, plane=0),
        is_fairy_ring=True,
    )


# =============================================================================
# ELIGIBILITY FIXTURES
# =============================================================================


@pytest.fixture
def game_state() -> FakeGameStateProvider:
    """Logged in, all skills 99, no quests known."""
    return FakeGameStateProvider()


@pytest.fixture
def settings_store() -> StaticSettingsStore:
    """Default settings."""
    return StaticSettingsStore(settings=PlannerSettings())


@pytest.fixture
def task_queue() -> SerialTaskQueue:
    return SerialTaskQueue()


@pytest.fixture
def make_eligibility(game_state, settings_store, task_queue):
    """Factory building a TransportEligibility over the shared fakes."""

    def _make(transports: Optional[list[TransportEdge]] = None) -> TransportEligibility:
        return TransportEligibility(
            transports=build_registry(transports=transports or []),
            game_state=game_state,
            settings_store=settings_store,
            task_queue=task_queue,
        )

    return _make
