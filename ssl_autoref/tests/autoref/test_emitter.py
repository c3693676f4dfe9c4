"""Unit tests for EventEmitter."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from ssl_autoref.autoref.emitter import EventEmitter
from ssl_autoref.autoref.events import BallLeftFieldTouchLine
from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.team import Team
from ssl_autoref.team_controller.controllers import (
    AbstractGameControllerClient,
    AbstractSimController,
)

EVENT = BallLeftFieldTouchLine(by_team=Team.BLUE, by_bot=1, location=Vector2D(3.0, 0.5))


def _game_controller(connected: bool = True) -> MagicMock:
    gc = MagicMock(spec=AbstractGameControllerClient)
    gc.connect.return_value = connected
    return gc


class TestEventEmitter:
    def test_register_sends_identifier(self):
        gc = _game_controller()
        assert EventEmitter(gc).register("my-ref") is True
        gc.send_message.assert_called_once_with("AutoRefRegistration", {"identifier": "my-ref"})

    def test_register_without_connection(self, caplog):
        gc = _game_controller(connected=False)
        with caplog.at_level(logging.WARNING):
            assert EventEmitter(gc).register("my-ref") is False
        gc.send_message.assert_not_called()
        assert "connect" in caplog.text

    def test_register_connect_raises(self):
        gc = _game_controller()
        gc.connect.side_effect = OSError("refused")
        assert EventEmitter(gc).register("my-ref") is False

    def test_register_send_failure_is_logged(self, caplog):
        gc = _game_controller()
        gc.send_message.side_effect = ConnectionError("broken pipe")
        with caplog.at_level(logging.ERROR):
            assert EventEmitter(gc).register("my-ref") is False
        assert "broken pipe" in caplog.text

    def test_emit_wraps_event(self):
        gc = _game_controller()
        assert EventEmitter(gc).emit(EVENT) is True
        message_type, message = gc.send_message.call_args.args
        assert message_type == "AutoRefToController"
        assert message == {
            "game_event": {
                "type": "BALL_LEFT_FIELD_TOUCH_LINE",
                "ball_left_field_touch_line": {
                    "by_team": "BLUE",
                    "by_bot": 1,
                    "location": {"x": 3.0, "y": 0.5},
                },
            }
        }

    def test_emit_failure_is_swallowed(self, caplog):
        gc = _game_controller()
        gc.send_message.side_effect = RuntimeError("boom")
        with caplog.at_level(logging.ERROR):
            assert EventEmitter(gc).emit(EVENT) is False
        assert "BALL_LEFT_FIELD_TOUCH_LINE" in caplog.text

    def test_reposition_converts_to_vision_frame(self):
        sim = MagicMock(spec=AbstractSimController)
        assert EventEmitter(_game_controller(), sim).reposition_ball(Vector2D(-3.0, 2.5)) is True
        x, y, z, vx, vy, vz = sim.teleport_ball.call_args.args
        assert (x, y) == pytest.approx((2500.0, 3000.0))
        assert z == pytest.approx(0.02)
        assert (vx, vy, vz) == (0, 0, 0)

    def test_reposition_without_simulator(self):
        assert EventEmitter(_game_controller()).reposition_ball(Vector2D(0.0, 0.0)) is False

    def test_reposition_failure_is_swallowed(self):
        sim = MagicMock(spec=AbstractSimController)
        sim.teleport_ball.side_effect = OSError("sim gone")
        assert EventEmitter(_game_controller(), sim).reposition_ball(Vector2D(0.0, 0.0)) is False

    def test_close_releases_both_controllers(self):
        gc = _game_controller()
        sim = MagicMock(spec=AbstractSimController)
        EventEmitter(gc, sim).close()
        gc.close.assert_called_once()
        sim.close.assert_called_once()

    def test_close_failure_is_swallowed(self, caplog):
        gc = _game_controller()
        gc.close.side_effect = OSError("already gone")
        with caplog.at_level(logging.ERROR):
            EventEmitter(gc).close()
        assert "already gone" in caplog.text
