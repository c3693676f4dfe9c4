"""DoubleTouchMonitor: detects a robot touching the ball twice during a free kick."""

from __future__ import annotations

from typing import List

from ssl_autoref.autoref.events import AttackerDoubleTouchedBall, GameEvent
from ssl_autoref.autoref.monitors.base_monitor import BaseMonitor, is_touching
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.config.settings import DOUBLE_TOUCH_TIMEOUT, ROBOT_CONTACT_MARGIN
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.global_utils.mapping_utils import side_to_team


class DoubleTouchMonitor(BaseMonitor):
    """Fires when the robot that holds the last-touch record touches the ball
    again within ``double_touch_timeout`` seconds of that record.

    The comparison uses the record as it stood before this tick's touch
    update. Robots of both teams are checked; the event is attributed to
    whichever robot matches the record.
    """

    def __init__(
        self,
        double_touch_timeout: float = DOUBLE_TOUCH_TIMEOUT,
        contact_margin: float = ROBOT_CONTACT_MARGIN,
    ) -> None:
        self._timeout = double_touch_timeout
        self._contact_margin = contact_margin

    def check(self, snapshot: WorldSnapshot, state: AutoRefState) -> List[GameEvent]:
        if not snapshot.phase.is_free_kick:
            return []

        record = state.previous_touch
        if snapshot.ball is None or record is None:
            return []

        if snapshot.ts - record.timestamp >= self._timeout:
            return []

        return [
            AttackerDoubleTouchedBall(
                by_team=side_to_team(robot.side, snapshot.my_team_is_yellow),
                by_bot=robot.id,
                location=record.position,
            )
            for robot in snapshot.robots()
            if robot.key == record.key and is_touching(robot, snapshot, self._contact_margin)
        ]
