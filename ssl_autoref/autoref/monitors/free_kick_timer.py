"""FreeKickTimer: tracks how long an awarded free kick takes to be executed."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from ssl_autoref.autoref.state import AutoRefState, FreeKickSession
from ssl_autoref.config.enums import Division, division_from_str
from ssl_autoref.config.settings import (
    BALL_MOVED_THRESHOLD,
    DEFAULT_DIVISION,
    FREE_KICK_TIMEOUT_DIV_A,
    FREE_KICK_TIMEOUT_DIV_B,
)
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot

logger = logging.getLogger(__name__)


class FreeKickOutcome(Enum):
    STARTED = auto()
    EXECUTED = auto()
    TIMED_OUT = auto()
    CANCELLED = auto()


def free_kick_timeout(
    division: str,
    timeout_div_a: float = FREE_KICK_TIMEOUT_DIV_A,
    timeout_div_b: float = FREE_KICK_TIMEOUT_DIV_B,
) -> float:
    """Time allowed to take a free kick in the given division."""
    return timeout_div_a if division_from_str(division) is Division.A else timeout_div_b


class FreeKickTimer:
    """Two-state machine (idle / active) over ``AutoRefState.free_kick``.

    A session starts when a free kick is awarded and ends when the ball moves
    (executed), when the time limit passes (timed out) or when the referee
    leaves the free kick. A finished session is not restarted until the next
    award. Timeouts are only logged; the game controller enforces them.
    """

    def __init__(
        self,
        division: str = DEFAULT_DIVISION,
        timeout_div_a: float = FREE_KICK_TIMEOUT_DIV_A,
        timeout_div_b: float = FREE_KICK_TIMEOUT_DIV_B,
        ball_moved_threshold: float = BALL_MOVED_THRESHOLD,
    ) -> None:
        self._timeout = free_kick_timeout(division, timeout_div_a, timeout_div_b)
        self._ball_moved_threshold = ball_moved_threshold

    @property
    def timeout(self) -> float:
        return self._timeout

    def update(self, snapshot: WorldSnapshot, state: AutoRefState) -> Optional[FreeKickOutcome]:
        """Advance the session by one tick and return the transition taken, if any."""
        kicking_side = snapshot.phase.free_kick_side
        if kicking_side is None:
            had_session = state.free_kick is not None
            state.free_kick = None
            state.free_kick_award = None
            if had_session:
                logger.info("Free kick session discarded, referee left the free kick")
                return FreeKickOutcome.CANCELLED
            return None

        ball = snapshot.ball
        if ball is None:
            return None

        if state.free_kick_award is not kicking_side:
            state.free_kick_award = kicking_side
            state.free_kick = FreeKickSession(
                team=kicking_side,
                start_time=snapshot.ts,
                ball_position_at_start=ball.p,
            )
            logger.info("Free kick for %s started at t=%.2f", kicking_side.name, snapshot.ts)
            return FreeKickOutcome.STARTED

        session = state.free_kick
        if session is None:
            return None

        if ball.p.distance_to(session.ball_position_at_start) > self._ball_moved_threshold:
            state.free_kick = None
            logger.info("Free kick for %s executed after %.2fs", session.team.name, snapshot.ts - session.start_time)
            return FreeKickOutcome.EXECUTED

        if snapshot.ts - session.start_time > self._timeout:
            state.free_kick = None
            logger.info("Free kick timeout (%.1fs) for %s", self._timeout, session.team.name)
            return FreeKickOutcome.TIMED_OUT

        return None
