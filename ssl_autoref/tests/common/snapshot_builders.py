"""Helpers for building world snapshots in tests."""

from __future__ import annotations

from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.ball import Ball
from ssl_autoref.entities.game.field_geometry import FieldGeometry
from ssl_autoref.entities.game.robot import Robot
from ssl_autoref.entities.game.team import TeamSide
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.entities.referee.referee_command import RefereeCommand

GEO = FieldGeometry.from_standard_div_b()
BALL_RADIUS = 0.0215
# Centre-to-centre distance that still counts as a touch.
TOUCH_DIST = BALL_RADIUS + 0.09


def make_ball(x: float, y: float) -> Ball:
    return Ball(p=Vector2D(x, y), radius=BALL_RADIUS)


def make_robot(robot_id: int, x: float, y: float, is_friendly: bool = True) -> Robot:
    side = TeamSide.FRIENDLY if is_friendly else TeamSide.ENEMY
    return Robot(id=robot_id, side=side, p=Vector2D(x, y))


def make_snapshot(
    ball: Ball | None,
    friendly_robots: list[Robot] | None = None,
    enemy_robots: list[Robot] | None = None,
    command: RefereeCommand = RefereeCommand.NORMAL_START,
    ts: float = 10.0,
    my_team_is_yellow: bool = True,
    geometry: FieldGeometry = GEO,
) -> WorldSnapshot:
    return WorldSnapshot(
        ts=ts,
        my_team_is_yellow=my_team_is_yellow,
        ball=ball,
        geometry=geometry,
        referee_command=command,
        friendly_robots={r.id: r for r in friendly_robots or []},
        enemy_robots={r.id: r for r in enemy_robots or []},
    )


def own_free_kick(my_team_is_yellow: bool) -> RefereeCommand:
    return RefereeCommand.DIRECT_FREE_YELLOW if my_team_is_yellow else RefereeCommand.DIRECT_FREE_BLUE


def opponent_free_kick(my_team_is_yellow: bool) -> RefereeCommand:
    return RefereeCommand.DIRECT_FREE_BLUE if my_team_is_yellow else RefereeCommand.DIRECT_FREE_YELLOW
