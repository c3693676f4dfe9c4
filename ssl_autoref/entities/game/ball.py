from dataclasses import dataclass

from ssl_autoref.config.settings import BALL_RADIUS
from ssl_autoref.entities.data.vector import Vector2D


@dataclass(frozen=True)
class Ball:
    p: Vector2D
    radius: float = BALL_RADIUS
