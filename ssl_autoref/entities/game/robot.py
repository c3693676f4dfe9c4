from dataclasses import dataclass

from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.team import TeamSide


@dataclass(frozen=True)
class Robot:
    id: int
    side: TeamSide
    p: Vector2D

    @property
    def key(self) -> tuple[TeamSide, int]:
        """Identity of the robot across both teams."""
        return (self.side, self.id)
