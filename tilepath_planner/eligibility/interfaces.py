"""Host collaborators consumed by the transport eligibility engine.

The host integration layer implements these to connect the engine to a live
game session:
- GameStateProvider: Login state, skill levels, quest progress, player location
- TaskQueue: The host's single serialized "main" task queue

Quest state may only be queried safely from the main task queue, so the engine
submits its quest refresh as a deferred task instead of running it inline.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from typing import Optional

from tilepath_planner.model.tile_coordinate import TileCoordinate
from tilepath_planner.model.transport import QuestState, Skill

logger = logging.getLogger(__name__)


class GameStateProvider(ABC):
    """Read-only view of the live game session."""

    @abstractmethod
    def is_logged_in(self) -> bool:
        """True when a game session is active."""

    @abstractmethod
    def get_boosted_skill_level(self, skill: Skill) -> int:
        """Current (boosted) level of a skill. Only valid while logged in."""

    @abstractmethod
    def get_quest_state(self, quest: str) -> QuestState:
        """Completion state of a quest.

        Raises:
            LookupError: If the quest cannot be resolved right now.
        """

    def get_player_location(self) -> Optional[TileCoordinate]:
        """Tile the player stands on, None when unknown."""
        return None


class TaskQueue(ABC):
    """Serialized execution context owned by the host."""

    @abstractmethod
    def invoke_later(self, task: Callable[[], None]) -> None:
        """Schedule a task to run on the queue's context after the caller returns."""


class SerialTaskQueue(TaskQueue):
    """FIFO of deferred tasks drained by the owning context.

    The host calls run_pending() once per main-loop iteration (game tick).
    Tasks run in submission order; a failing task is logged and does not
    prevent the remaining tasks from running.
    """

    def __init__(self) -> None:
        self._tasks: deque[Callable[[], None]] = deque()

    def invoke_later(self, task: Callable[[], None]) -> None:
        self._tasks.append(task)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def run_pending(self) -> int:
        """Run all tasks queued so far.

        Tasks queued while draining run on the next call.

        Returns:
            Number of tasks executed.
        """
        count = len(self._tasks)
        for _ in range(count):
            task = self._tasks.popleft()
            try:
                task()
            except Exception:
                logger.exception(f"[QUEUE] Deferred task {task!r} failed")
        return count
