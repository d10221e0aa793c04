"""Transport eligibility - which optional edges the pathfinder may use.

Holds a snapshot of player capability (skill levels, quest progress) and user
preference (which transports to use, wilderness avoidance) and evaluates:
- is_usable(edge): skill, quest and preference gates for one transport
- may_cross_restricted(origin, neighbor, target): wilderness avoidance guard
- is_near(location): whether the player is still close to the path

Refresh model:
    refresh() reloads preferences and skill levels synchronously and swaps them
    in as one immutable EligibilitySnapshot. Quest states are only safely
    queryable on the host's main task queue, so their refresh is deferred.
    Until that task runs, quest-gated transports are evaluated against the
    previous quest cache.

Consulted once per graph edge by the search algorithm and by the overlay
renderer. Single writer (the context calling refresh), lock-guarded swaps.
"""

import logging
import threading
from dataclasses import replace
from datetime import timedelta
from types import MappingProxyType
from typing import Mapping, Optional

from tilepath_planner.core.geo_region import WILDERNESS, RestrictedZone
from tilepath_planner.eligibility.interfaces import GameStateProvider, TaskQueue
from tilepath_planner.model.snapshot import (
    CapabilitySnapshot,
    EligibilitySnapshot,
    PreferenceFlags,
)
from tilepath_planner.model.tile_coordinate import TileCoordinate
from tilepath_planner.model.transport import FAIRY_RING_QUEST, QuestState, Skill, TransportEdge
from tilepath_planner.settings import SettingsStore

logger = logging.getLogger(__name__)


class TransportEligibility:
    """Rule engine deciding which transports are usable right now.

    Example:
        eligibility = TransportEligibility(
            transports=registry,
            game_state=provider,
            settings_store=store,
            task_queue=queue,
        )
        usable = [t for t in registry[tile] if eligibility.is_usable(edge=t)]
    """

    def __init__(
        self,
        transports: Mapping[TileCoordinate, list[TransportEdge]],
        game_state: GameStateProvider,
        settings_store: SettingsStore,
        task_queue: TaskQueue,
        restricted_zone: RestrictedZone = WILDERNESS,
    ) -> None:
        """Initialize and perform the first refresh.

        Args:
            transports: Transport registry keyed by origin tile
            game_state: Live game session provider
            settings_store: Source of user settings
            task_queue: Host main task queue for quest lookups
            restricted_zone: Zone avoided when avoid_wilderness is enabled
        """
        self._transports = transports
        self._game_state = game_state
        self._settings_store = settings_store
        self._task_queue = task_queue
        self._restricted_zone = restricted_zone

        self._lock = threading.Lock()
        self._snapshot = EligibilitySnapshot()
        self._quest_states: Mapping[str, QuestState] = MappingProxyType({})

        self.refresh()

    @property
    def transports(self) -> Mapping[TileCoordinate, list[TransportEdge]]:
        return self._transports

    @property
    def snapshot(self) -> EligibilitySnapshot:
        """Current capability/preference snapshot."""
        return self._snapshot

    @property
    def quest_states(self) -> Mapping[str, QuestState]:
        """Cached quest states (read-only)."""
        return self._quest_states

    @property
    def calculation_cutoff(self) -> timedelta:
        """Time without progress after which the search should stop."""
        return timedelta(milliseconds=self._snapshot.calculation_cutoff_ms)

    # =========================================================================
    # Refresh
    # =========================================================================

    def refresh(self) -> None:
        """Re-read settings and, when logged in, skill levels.

        Schedules the quest refresh on the task queue when logged in.
        Skill levels keep their previous values while logged out. Settings that
        cannot be loaded leave the previous preferences in place.
        """
        previous = self._snapshot
        try:
            settings = self._settings_store.load()
        except (ValueError, OSError) as e:
            logger.warning(f"[REFRESH] Could not load settings, keeping previous preferences: {e}")
            preferences = previous.preferences
            recalculate_distance = previous.recalculate_distance
            calculation_cutoff_ticks = previous.calculation_cutoff_ticks
        else:
            preferences = PreferenceFlags.from_settings(settings=settings)
            recalculate_distance = settings.recalculate_distance
            calculation_cutoff_ticks = settings.calculation_cutoff_ticks

        logged_in = self._game_state.is_logged_in()
        if logged_in:
            capability = CapabilitySnapshot(
                skill_levels={skill: self._game_state.get_boosted_skill_level(skill=skill) for skill in Skill}
            )
        else:
            capability = previous.capability

        with self._lock:
            self._snapshot = EligibilitySnapshot(
                capability=capability,
                preferences=preferences,
                recalculate_distance=recalculate_distance,
                calculation_cutoff_ticks=calculation_cutoff_ticks,
            )

        if logged_in:
            self._task_queue.invoke_later(self.refresh_quests)

        logger.debug(f"[REFRESH] logged_in={logged_in}, preferences={preferences}")

    def refresh_quests(self) -> None:
        """Look up quest states for all quest-locked transports.

        Must run on the host main task queue. A quest that cannot be resolved
        is left unset, which keeps its transports unusable.
        Also disables fairy rings unless their unlocking quest is known to be started.
        """
        quest_states: dict[str, QuestState] = {}
        for transports in self._transports.values():
            for transport in transports:
                if not transport.is_quest_locked or transport.quest in quest_states:
                    continue
                try:
                    quest_states[transport.quest] = self._game_state.get_quest_state(quest=transport.quest)
                except LookupError as e:
                    logger.debug(f"[QUESTS] Quest state unavailable for {transport.quest!r}: {e}")

        fairy_rings_locked = self._is_quest_locked(quest=FAIRY_RING_QUEST)

        with self._lock:
            self._quest_states = MappingProxyType(quest_states)
            if fairy_rings_locked and self._snapshot.preferences.use_fairy_rings:
                self._snapshot = replace(
                    self._snapshot,
                    preferences=replace(self._snapshot.preferences, use_fairy_rings=False),
                )

        logger.info(f"[QUESTS] Refreshed {len(quest_states)} quest state(s), fairy rings locked={fairy_rings_locked}")

    def _is_quest_locked(self, quest: str) -> bool:
        """True unless the quest is known to be started. Unresolvable counts as locked."""
        try:
            return self._game_state.get_quest_state(quest=quest) == QuestState.NOT_STARTED
        except LookupError as e:
            logger.debug(f"[QUESTS] Quest state unavailable for {quest!r}: {e}")
            return True

    # =========================================================================
    # Evaluation
    # =========================================================================

    def is_in_wilderness(self, tile: TileCoordinate) -> bool:
        return self._restricted_zone.contains(tile=tile)

    def may_cross_restricted(
        self,
        origin: TileCoordinate,
        neighbor: TileCoordinate,
        target: TileCoordinate,
    ) -> bool:
        """Whether the edge origin -> neighbor should be blocked.

        Blocks only moves from outside into the restricted zone, and only when
        the final target lies outside it too. Moves starting inside the zone
        are never blocked.

        Args:
            origin: Tile the edge starts from
            neighbor: Tile the edge leads to
            target: Overall destination of the search

        Returns:
            True to block the edge.
        """
        return (
            self._snapshot.preferences.avoid_wilderness
            and not self.is_in_wilderness(tile=origin)
            and self.is_in_wilderness(tile=neighbor)
            and not self.is_in_wilderness(tile=target)
        )

    def is_usable(self, edge: TransportEdge) -> bool:
        """Evaluate all gates of a transport against the current snapshot.

        Gates in order: agility shortcut, grapple shortcut, boat (canoe),
        fairy ring, teleport, prayer level, quest. A transport without traits
        or requirements is always usable.
        """
        snapshot = self._snapshot
        preferences = snapshot.preferences
        capability = snapshot.capability

        if edge.is_agility_shortcut:
            if not preferences.use_agility_shortcuts or capability.level(
                skill=Skill.AGILITY
            ) < edge.required_level(skill=Skill.AGILITY):
                return False

            if edge.is_grapple_shortcut and (
                not preferences.use_grapple_shortcuts
                or capability.level(skill=Skill.RANGED) < edge.required_level(skill=Skill.RANGED)
                or capability.level(skill=Skill.STRENGTH) < edge.required_level(skill=Skill.STRENGTH)
            ):
                return False

        if edge.is_boat:
            if not preferences.use_boats:
                return False

            if edge.is_canoe and capability.level(skill=Skill.WOODCUTTING) < edge.required_level(
                skill=Skill.WOODCUTTING
            ):
                return False

        if edge.is_fairy_ring and not preferences.use_fairy_rings:
            return False

        if edge.is_teleport and not preferences.use_teleports:
            return False

        if edge.is_prayer_locked and capability.level(skill=Skill.PRAYER) < edge.required_level(skill=Skill.PRAYER):
            return False

        if edge.is_quest_locked and self._quest_states.get(edge.quest, QuestState.NOT_STARTED) != QuestState.FINISHED:
            return False

        return True

    def is_near(self, location: TileCoordinate, start_point_set: bool = False) -> bool:
        """Whether the player is close enough to a path tile to keep the path.

        Args:
            location: Path tile to compare against
            start_point_set: True when the path starts at a custom point
                instead of the player

        Returns:
            True when no recalculation is needed.
        """
        player_location: Optional[TileCoordinate] = self._game_state.get_player_location()
        if start_point_set or player_location is None:
            return True

        recalculate_distance = self._snapshot.recalculate_distance
        return recalculate_distance < 0 or player_location.chebyshev_distance_to(other=location) <= recalculate_distance
