"""Base class for all AutoRef monitors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ssl_autoref.autoref.events import GameEvent
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.entities.game.robot import Robot
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot


class BaseMonitor(ABC):
    """Abstract base class for the per-tick rule monitors."""

    @abstractmethod
    def check(self, snapshot: WorldSnapshot, state: AutoRefState) -> List[GameEvent]:
        """Inspect the current snapshot and return every event detected this tick."""
        ...


def is_touching(robot: Robot, snapshot: WorldSnapshot, contact_margin: float) -> bool:
    """True if the robot is close enough to the ball to count as touching it."""
    ball = snapshot.ball
    return robot.p.distance_to(ball.p) <= ball.radius + contact_margin
