"""AutoRefState: the only mutable state carried between ticks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.team import TeamSide

RobotKey = Tuple[TeamSide, int]


@dataclass(frozen=True)
class TouchRecord:
    """Most recent robot-ball contact seen by the AutoRef."""

    team: TeamSide
    robot_id: int
    position: Vector2D
    timestamp: float

    @property
    def key(self) -> RobotKey:
        return (self.team, self.robot_id)


@dataclass(frozen=True)
class FreeKickSession:
    """An awarded free kick that has not been taken yet."""

    team: TeamSide
    start_time: float
    ball_position_at_start: Vector2D


@dataclass
class AutoRefState:
    """Owned by a single ``AutoRef``; monitors read and update it once per tick.

    ``previous_touch`` is the touch record as it stood before the current
    tick's touch update, so monitors can compare a contact against the
    touch that preceded it.
    """

    touch: Optional[TouchRecord] = None
    previous_touch: Optional[TouchRecord] = None
    # robots that were in contact with the ball on the last tick
    in_contact: FrozenSet[RobotKey] = field(default_factory=frozenset)

    free_kick: Optional[FreeKickSession] = None
    # side of the free kick the timer last armed for, None outside free kicks
    free_kick_award: Optional[TeamSide] = None
