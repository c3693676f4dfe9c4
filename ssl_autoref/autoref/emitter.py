"""EventEmitter: the only place the AutoRef talks to the outside world."""

from __future__ import annotations

import logging
from typing import Optional

from ssl_autoref.autoref.events import GameEvent, to_message
from ssl_autoref.config.settings import BALL_TELEPORT_HEIGHT
from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.global_utils.coordinates import to_vision
from ssl_autoref.team_controller.controllers.game_controller_abstract import (
    AbstractGameControllerClient,
)
from ssl_autoref.team_controller.controllers.sim_controller_abstract import (
    AbstractSimController,
)

logger = logging.getLogger(__name__)


class EventEmitter:
    """Forwards registrations, game events and ball teleports.

    Every send is fire-and-forget: failures are logged and swallowed so that
    a broken connection never interrupts refereeing.
    """

    def __init__(
        self,
        game_controller: AbstractGameControllerClient,
        sim_controller: Optional[AbstractSimController] = None,
    ) -> None:
        self._game_controller = game_controller
        self._sim_controller = sim_controller

    def register(self, identifier: str) -> bool:
        """Connect to the game controller and announce this AutoRef."""
        try:
            connected = self._game_controller.connect()
        except Exception as e:
            logger.error("Could not connect to the game controller: %s", e)
            return False
        if not connected:
            logger.warning("Could not connect to the game controller")
            return False

        try:
            self._game_controller.send_message("AutoRefRegistration", {"identifier": identifier})
        except Exception as e:
            logger.error("Registration failed: %s", e)
            return False
        logger.info("Registered as %s", identifier)
        return True

    def emit(self, event: GameEvent) -> bool:
        try:
            self._game_controller.send_message("AutoRefToController", to_message(event))
        except Exception as e:
            logger.error("Error sending event %s: %s", event.type.name, e)
            return False
        logger.info("Event sent: %s", event.type.name)
        return True

    def reposition_ball(self, pos: Vector2D) -> bool:
        """Teleport the ball to ``pos`` (AutoRef frame) in the simulator."""
        if self._sim_controller is None:
            return False
        x, y = to_vision(pos)
        try:
            self._sim_controller.teleport_ball(x, y, BALL_TELEPORT_HEIGHT, 0, 0, 0)
        except Exception as e:
            logger.error("Error teleporting ball: %s", e)
            return False
        logger.info("Ball teleported to (%.2f, %.2f)", pos.x, pos.y)
        return True

    def close(self) -> None:
        """Release both controller connections."""
        controllers = [self._game_controller, self._sim_controller]
        for controller in controllers:
            if controller is None:
                continue
            try:
                controller.close()
            except Exception as e:
                logger.error("Error closing %s: %s", type(controller).__name__, e)
