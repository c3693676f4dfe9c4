from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from ssl_autoref.entities.game.ball import Ball
from ssl_autoref.entities.game.field_geometry import FieldGeometry
from ssl_autoref.entities.game.robot import Robot
from ssl_autoref.entities.referee.game_phase import GamePhase, phase_from_command
from ssl_autoref.entities.referee.referee_command import RefereeCommand


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything the AutoRef sees of the world for a single tick."""

    ts: float
    my_team_is_yellow: bool
    ball: Optional[Ball]
    geometry: FieldGeometry
    referee_command: RefereeCommand
    friendly_robots: Dict[int, Robot] = field(default_factory=dict)
    enemy_robots: Dict[int, Robot] = field(default_factory=dict)

    @property
    def phase(self) -> GamePhase:
        return phase_from_command(self.referee_command, self.my_team_is_yellow)

    def robots(self) -> Iterator[Robot]:
        """All robots, friendly team first."""
        yield from self.friendly_robots.values()
        yield from self.enemy_robots.values()
