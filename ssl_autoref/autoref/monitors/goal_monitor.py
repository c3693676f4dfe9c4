"""GoalMonitor: detects the ball fully inside either goal."""

from __future__ import annotations

from typing import List

from ssl_autoref.autoref.events import GameEvent, PossibleGoal
from ssl_autoref.autoref.monitors.base_monitor import BaseMonitor
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.entities.game.team import Team
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.entities.referee.game_phase import GamePhase
from ssl_autoref.global_utils.mapping_utils import side_to_team

# by_team reported for each goal, fixed by the end of the field.
NEGATIVE_GOAL_TEAM = Team.YELLOW
POSITIVE_GOAL_TEAM = Team.BLUE


class GoalMonitor(BaseMonitor):
    """Reports a possible goal once the ball is past the goal line by more than
    the goal depth and between the posts. Balls that merely graze the goal
    line are left to the ``BoundaryMonitor``.
    """

    def check(self, snapshot: WorldSnapshot, state: AutoRefState) -> List[GameEvent]:
        if snapshot.phase is not GamePhase.ACTIVE_PLAY:
            return []

        ball = snapshot.ball
        touch = state.touch
        if ball is None or touch is None:
            return []

        geometry = snapshot.geometry
        if geometry.is_in_negative_goal(ball.p):
            by_team = NEGATIVE_GOAL_TEAM
        elif geometry.is_in_positive_goal(ball.p):
            by_team = POSITIVE_GOAL_TEAM
        else:
            return []

        return [
            PossibleGoal(
                by_team=by_team,
                kicking_team=side_to_team(touch.team, snapshot.my_team_is_yellow),
                kicking_bot=touch.robot_id,
                location=ball.p,
                kick_location=touch.position,
            )
        ]
