"""DistanceMonitor: detects defenders too close to the ball during a free kick."""

from __future__ import annotations

from typing import List

from ssl_autoref.autoref.events import DefenderTooCloseToKickPoint, GameEvent
from ssl_autoref.autoref.monitors.base_monitor import BaseMonitor
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.config.settings import FREE_KICK_MIN_DISTANCE
from ssl_autoref.entities.game.team import TeamSide
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.global_utils.mapping_utils import side_to_team


class DistanceMonitor(BaseMonitor):
    """One event per defending robot strictly inside ``min_distance`` of the ball.

    There is no cooldown, so a robot that stays too close is reported again
    on every tick.
    """

    def __init__(self, min_distance: float = FREE_KICK_MIN_DISTANCE) -> None:
        self._min_distance = min_distance

    def check(self, snapshot: WorldSnapshot, state: AutoRefState) -> List[GameEvent]:
        kicking_side = snapshot.phase.free_kick_side
        ball = snapshot.ball
        if kicking_side is None or ball is None:
            return []

        if kicking_side is TeamSide.FRIENDLY:
            defenders = snapshot.enemy_robots.values()
        else:
            defenders = snapshot.friendly_robots.values()

        events: List[GameEvent] = []
        for robot in defenders:
            distance = robot.p.distance_to(ball.p)
            if distance < self._min_distance:
                events.append(
                    DefenderTooCloseToKickPoint(
                        by_team=side_to_team(robot.side, snapshot.my_team_is_yellow),
                        by_bot=robot.id,
                        location=robot.p,
                        distance=self._min_distance - distance,
                    )
                )
        return events
