"""Game events reported to the game controller.

Each detection kind is its own frozen dataclass carrying exactly the fields
the game controller expects for it. ``GameEvent`` is the closed union of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.team import Team


class GameEventType(Enum):
    BALL_LEFT_FIELD_TOUCH_LINE = "ball_left_field_touch_line"
    BALL_LEFT_FIELD_GOAL_LINE = "ball_left_field_goal_line"
    POSSIBLE_GOAL = "possible_goal"
    ATTACKER_DOUBLE_TOUCHED_BALL = "attacker_double_touched_ball"
    DEFENDER_TOO_CLOSE_TO_KICK_POINT = "defender_too_close_to_kick_point"


@dataclass(frozen=True)
class _BallLeftField:
    by_team: Team
    by_bot: int
    location: Vector2D

    def payload(self) -> dict:
        return {
            "by_team": self.by_team.name,
            "by_bot": self.by_bot,
            "location": self.location.to_dict(),
        }


@dataclass(frozen=True)
class BallLeftFieldTouchLine(_BallLeftField):
    type: ClassVar[GameEventType] = GameEventType.BALL_LEFT_FIELD_TOUCH_LINE


@dataclass(frozen=True)
class BallLeftFieldGoalLine(_BallLeftField):
    type: ClassVar[GameEventType] = GameEventType.BALL_LEFT_FIELD_GOAL_LINE


@dataclass(frozen=True)
class PossibleGoal:
    type: ClassVar[GameEventType] = GameEventType.POSSIBLE_GOAL

    by_team: Team
    kicking_team: Team
    kicking_bot: int
    location: Vector2D
    kick_location: Vector2D

    def payload(self) -> dict:
        return {
            "by_team": self.by_team.name,
            "kicking_team": self.kicking_team.name,
            "kicking_bot": self.kicking_bot,
            "location": self.location.to_dict(),
            "kick_location": self.kick_location.to_dict(),
        }


@dataclass(frozen=True)
class AttackerDoubleTouchedBall:
    type: ClassVar[GameEventType] = GameEventType.ATTACKER_DOUBLE_TOUCHED_BALL

    by_team: Team
    by_bot: int
    location: Vector2D

    def payload(self) -> dict:
        return {
            "by_team": self.by_team.name,
            "by_bot": self.by_bot,
            "location": self.location.to_dict(),
        }


@dataclass(frozen=True)
class DefenderTooCloseToKickPoint:
    type: ClassVar[GameEventType] = GameEventType.DEFENDER_TOO_CLOSE_TO_KICK_POINT

    by_team: Team
    by_bot: int
    location: Vector2D
    distance: float  # how far inside the keep-out radius the robot is

    def payload(self) -> dict:
        return {
            "by_team": self.by_team.name,
            "by_bot": self.by_bot,
            "location": self.location.to_dict(),
            "distance": self.distance,
        }


GameEvent = Union[
    BallLeftFieldTouchLine,
    BallLeftFieldGoalLine,
    PossibleGoal,
    AttackerDoubleTouchedBall,
    DefenderTooCloseToKickPoint,
]


def to_message(event: GameEvent) -> dict:
    """Wrap an event in the ``AutoRefToController`` message layout."""
    return {
        "game_event": {
            "type": event.type.name,
            event.type.value: event.payload(),
        }
    }
