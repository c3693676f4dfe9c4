"""AutoRef: runs the touch tracker and every monitor once per tick."""

from __future__ import annotations

import logging
from typing import List, Optional

from ssl_autoref.autoref.emitter import EventEmitter
from ssl_autoref.autoref.events import (
    BallLeftFieldGoalLine,
    BallLeftFieldTouchLine,
    GameEvent,
)
from ssl_autoref.autoref.monitors import (
    BaseMonitor,
    BoundaryMonitor,
    DistanceMonitor,
    DoubleTouchMonitor,
    FreeKickTimer,
    GoalMonitor,
    TouchTracker,
)
from ssl_autoref.autoref.profiles.profile_loader import AutoRefProfile, load_profile
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.config.enums import division_from_str
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.entities.referee.game_phase import GamePhase
from ssl_autoref.team_controller.controllers import (
    AbstractGameControllerClient,
    AbstractSimController,
    UDPGameControllerClient,
    UDPSimController,
)

logger = logging.getLogger(__name__)


class AutoRef:
    """Stateful automatic referee that operates on ``WorldSnapshot`` objects.

    It only detects and reports: events go to the game controller through the
    ``EventEmitter``, which decides nothing.

    Usage::

        autoref = AutoRef.from_profile_name("div_b")
        events = autoref.step(snapshot)
    """

    def __init__(self, profile: AutoRefProfile, emitter: EventEmitter) -> None:
        self._profile = profile
        self._emitter = emitter
        self._state = AutoRefState()
        self._started = False

        th = profile.thresholds
        self._touch_tracker = TouchTracker(contact_margin=th.robot_contact_margin)
        # Evaluated only during active play.
        self._play_monitors: List[BaseMonitor] = [
            BoundaryMonitor(field_margin=th.field_margin),
            GoalMonitor(),
        ]
        # Evaluated only during a free kick for either team.
        self._free_kick_monitors: List[BaseMonitor] = [
            DoubleTouchMonitor(
                double_touch_timeout=th.double_touch_timeout,
                contact_margin=th.robot_contact_margin,
            ),
            DistanceMonitor(min_distance=th.free_kick_min_distance),
        ]
        self._free_kick_timer = FreeKickTimer(
            division=profile.division,
            timeout_div_a=th.free_kick_timeout_div_a,
            timeout_div_b=th.free_kick_timeout_div_b,
            ball_moved_threshold=th.ball_moved_threshold,
        )

    @classmethod
    def from_profile_name(
        cls,
        name: str,
        game_controller: Optional[AbstractGameControllerClient] = None,
        sim_controller: Optional[AbstractSimController] = None,
    ) -> "AutoRef":
        """Convenience constructor: load profile by built-in name or file path.

        Controllers default to UDP clients at the addresses in the profile.
        """
        profile = load_profile(name)
        if game_controller is None:
            game_controller = UDPGameControllerClient(
                profile.network.game_controller_host, profile.network.game_controller_port
            )
        if sim_controller is None:
            sim_controller = UDPSimController(profile.network.sim_control_host, profile.network.sim_control_port)
        return cls(profile, EventEmitter(game_controller, sim_controller))

    # ------------------------------------------------------------------
    # Main loop interface
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Register with the game controller. Called automatically on the first tick."""
        if self._started:
            return
        self._started = True
        self._emitter.register(self._profile.identifier)
        logger.info("AutoRef %s started", self._profile.identifier)
        logger.info("Division: %s", division_from_str(self._profile.division).value)

    def step(self, snapshot: WorldSnapshot) -> List[GameEvent]:
        """Evaluate one tick and return the events that were emitted."""
        self.start()

        self._touch_tracker.update(snapshot, self._state)

        phase = snapshot.phase
        events: List[GameEvent] = []
        if phase is GamePhase.ACTIVE_PLAY:
            for monitor in self._play_monitors:
                events.extend(monitor.check(snapshot, self._state))
        elif phase.is_free_kick:
            for monitor in self._free_kick_monitors:
                events.extend(monitor.check(snapshot, self._state))

        # Runs every tick so that leaving the free kick discards the session.
        self._free_kick_timer.update(snapshot, self._state)

        for event in events:
            self._dispatch(event)
        return events

    def close(self) -> None:
        """Close the game controller and simulator connections."""
        self._emitter.close()

    def _dispatch(self, event: GameEvent) -> None:
        if isinstance(event, (BallLeftFieldTouchLine, BallLeftFieldGoalLine)):
            self._emitter.reposition_ball(event.location)
        self._emitter.emit(event)

    # ------------------------------------------------------------------
    # Properties (read-only access for callers that need to inspect state)
    # ------------------------------------------------------------------

    @property
    def state(self) -> AutoRefState:
        return self._state

    @property
    def profile(self) -> AutoRefProfile:
        return self._profile
