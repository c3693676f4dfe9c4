"""TouchTracker: keeps track of which robot last touched the ball."""

from __future__ import annotations

import logging
from typing import Optional

from ssl_autoref.autoref.monitors.base_monitor import is_touching
from ssl_autoref.autoref.state import AutoRefState, TouchRecord
from ssl_autoref.config.settings import ROBOT_CONTACT_MARGIN
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot

logger = logging.getLogger(__name__)


class TouchTracker:
    """Updates ``AutoRefState.touch`` with the robot currently touching the ball.

    Friendly robots are searched before enemy robots, and the first one within
    contact distance wins. When nobody touches the ball the record is kept:
    it means "last known touch", not "current touch". A robot that stays in
    contact keeps the timestamp of the tick its contact began.
    """

    def __init__(self, contact_margin: float = ROBOT_CONTACT_MARGIN) -> None:
        self._contact_margin = contact_margin

    def update(self, snapshot: WorldSnapshot, state: AutoRefState) -> Optional[TouchRecord]:
        """Advance the touch record by one tick.

        Returns the new record if it was overwritten this tick, otherwise None.
        """
        state.previous_touch = state.touch
        was_in_contact = state.in_contact

        ball = snapshot.ball
        if ball is None:
            state.in_contact = frozenset()
            return None

        touching = [r for r in snapshot.robots() if is_touching(r, snapshot, self._contact_margin)]
        state.in_contact = frozenset(r.key for r in touching)
        if not touching:
            return None

        robot = touching[0]
        if state.touch is not None and state.touch.key == robot.key and robot.key in was_in_contact:
            # Same contact as last tick.
            return None

        state.touch = TouchRecord(
            team=robot.side,
            robot_id=robot.id,
            position=ball.p,
            timestamp=snapshot.ts,
        )
        logger.debug("Last touch: %s #%d at t=%.3f", robot.side.name, robot.id, snapshot.ts)
        return state.touch
