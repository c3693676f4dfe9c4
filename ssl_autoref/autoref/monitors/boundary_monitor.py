"""BoundaryMonitor: detects the ball leaving the field over a touch or goal line."""

from __future__ import annotations

from typing import List

from ssl_autoref.autoref.events import BallLeftFieldGoalLine, BallLeftFieldTouchLine, GameEvent
from ssl_autoref.autoref.monitors.base_monitor import BaseMonitor
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.config.settings import FIELD_MARGIN
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.entities.referee.game_phase import GamePhase
from ssl_autoref.global_utils.mapping_utils import side_to_team


class BoundaryMonitor(BaseMonitor):
    """Reports the ball crossing a boundary line, attributed to the last touch.

    The reported location is the ball clamped onto the field rectangle. The
    touch line is checked first and wins if both lines are crossed at once.
    """

    def __init__(self, field_margin: float = FIELD_MARGIN) -> None:
        self._margin = field_margin

    def check(self, snapshot: WorldSnapshot, state: AutoRefState) -> List[GameEvent]:
        if snapshot.phase is not GamePhase.ACTIVE_PLAY:
            return []

        ball = snapshot.ball
        touch = state.touch
        if ball is None or touch is None:
            return []

        geometry = snapshot.geometry
        crossing = geometry.clamp_to_field(ball.p)
        by_team = side_to_team(touch.team, snapshot.my_team_is_yellow)

        if geometry.is_past_touch_line(ball.p, self._margin):
            return [BallLeftFieldTouchLine(by_team=by_team, by_bot=touch.robot_id, location=crossing)]

        if geometry.is_past_goal_line(ball.p, self._margin):
            return [BallLeftFieldGoalLine(by_team=by_team, by_bot=touch.robot_id, location=crossing)]

        return []
