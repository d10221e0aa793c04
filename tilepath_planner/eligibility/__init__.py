"""Transport eligibility rule engine and its host collaborators."""

from tilepath_planner.eligibility.interfaces import (
    GameStateProvider,
    SerialTaskQueue,
    TaskQueue,
)
from tilepath_planner.eligibility.transport_eligibility import TransportEligibility

__all__ = [
    "GameStateProvider",
    "TaskQueue",
    "SerialTaskQueue",
    "TransportEligibility",
]
