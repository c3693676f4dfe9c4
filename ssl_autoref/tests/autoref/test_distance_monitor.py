"""Unit tests for DistanceMonitor."""

from __future__ import annotations

import pytest

from ssl_autoref.autoref.events import DefenderTooCloseToKickPoint
from ssl_autoref.autoref.monitors.distance_monitor import DistanceMonitor
from ssl_autoref.autoref.state import AutoRefState
from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.team import Team
from ssl_autoref.entities.referee.referee_command import RefereeCommand
from ssl_autoref.tests.common.snapshot_builders import (
    make_ball,
    make_robot,
    make_snapshot,
    opponent_free_kick,
    own_free_kick,
)


class TestDistanceMonitor:
    def test_opponent_too_close_on_own_free_kick(self, my_team_is_yellow):
        snapshot = make_snapshot(
            make_ball(0.0, 0.0),
            enemy_robots=[make_robot(5, 0.3, 0.0, is_friendly=False)],
            command=own_free_kick(my_team_is_yellow),
            my_team_is_yellow=my_team_is_yellow,
        )
        events = DistanceMonitor().check(snapshot, AutoRefState())
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, DefenderTooCloseToKickPoint)
        assert event.by_team == (Team.BLUE if my_team_is_yellow else Team.YELLOW)
        assert event.by_bot == 5
        assert event.location == Vector2D(0.3, 0.0)
        assert event.distance == pytest.approx(0.2)

    def test_exactly_min_distance_is_legal(self):
        snapshot = make_snapshot(
            make_ball(0.0, 0.0),
            enemy_robots=[make_robot(5, 0.0, 0.5, is_friendly=False)],
            command=RefereeCommand.DIRECT_FREE_YELLOW,
        )
        assert DistanceMonitor().check(snapshot, AutoRefState()) == []

    def test_own_robots_checked_on_opponent_free_kick(self, my_team_is_yellow):
        snapshot = make_snapshot(
            make_ball(1.0, 1.0),
            friendly_robots=[make_robot(0, 1.1, 1.0), make_robot(1, 1.0, 1.4), make_robot(2, 3.0, 3.0)],
            enemy_robots=[make_robot(0, 1.05, 1.0, is_friendly=False)],
            command=opponent_free_kick(my_team_is_yellow),
            my_team_is_yellow=my_team_is_yellow,
        )
        events = DistanceMonitor().check(snapshot, AutoRefState())
        assert sorted(e.by_bot for e in events) == [0, 1]
        own_team = Team.YELLOW if my_team_is_yellow else Team.BLUE
        assert all(e.by_team == own_team for e in events)

    def test_kicking_team_is_exempt(self):
        snapshot = make_snapshot(
            make_ball(0.0, 0.0),
            friendly_robots=[make_robot(0, 0.1, 0.0)],
            command=RefereeCommand.DIRECT_FREE_YELLOW,
        )
        assert DistanceMonitor().check(snapshot, AutoRefState()) == []

    def test_repeats_every_tick(self):
        monitor = DistanceMonitor()
        for ts in (1.0, 1.1, 1.2):
            snapshot = make_snapshot(
                make_ball(0.0, 0.0),
                enemy_robots=[make_robot(5, 0.3, 0.0, is_friendly=False)],
                command=RefereeCommand.DIRECT_FREE_YELLOW,
                ts=ts,
            )
            assert len(monitor.check(snapshot, AutoRefState())) == 1

    def test_inactive_outside_free_kick(self):
        snapshot = make_snapshot(
            make_ball(0.0, 0.0),
            enemy_robots=[make_robot(5, 0.3, 0.0, is_friendly=False)],
            command=RefereeCommand.NORMAL_START,
        )
        assert DistanceMonitor().check(snapshot, AutoRefState()) == []
