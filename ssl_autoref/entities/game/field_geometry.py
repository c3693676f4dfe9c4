"""FieldGeometry: field dimensions used by the AutoRef monitors."""

from dataclasses import dataclass

import numpy as np

from ssl_autoref.config.settings import GOAL_DEPTH
from ssl_autoref.entities.data.vector import Vector2D


@dataclass(frozen=True)
class FieldGeometry:
    """Immutable field geometry, constant for the whole match.

    All measurements are in metres. The origin is the centre of the field,
    the touch lines run parallel to the y axis at ``x = ±half_width`` and the
    goal lines run parallel to the x axis at ``y = ±half_height``.
    """

    half_width: float
    half_height: float
    goal_width: float
    goal_depth: float = GOAL_DEPTH

    @classmethod
    def from_standard_div_b(cls) -> "FieldGeometry":
        """Return geometry matching the standard SSL Division B field (9m x 6m)."""
        return cls(half_width=3.0, half_height=4.5, goal_width=1.0)

    @classmethod
    def from_standard_div_a(cls) -> "FieldGeometry":
        """Return geometry matching the standard SSL Division A field (12m x 9m)."""
        return cls(half_width=4.5, half_height=6.0, goal_width=1.8)

    @property
    def half_goal_width(self) -> float:
        return self.goal_width / 2

    # ------------------------------------------------------------------
    # Spatial query helpers
    # ------------------------------------------------------------------

    def is_in_field(self, pos: Vector2D) -> bool:
        """True if pos is within the playing field (including boundary)."""
        return abs(pos.x) <= self.half_width and abs(pos.y) <= self.half_height

    def clamp_to_field(self, pos: Vector2D) -> Vector2D:
        """Project pos onto the field rectangle, axis by axis."""
        return Vector2D(
            np.clip(pos.x, -self.half_width, self.half_width),
            np.clip(pos.y, -self.half_height, self.half_height),
        )

    def is_past_touch_line(self, pos: Vector2D, margin: float) -> bool:
        return abs(pos.x) > self.half_width + margin

    def is_past_goal_line(self, pos: Vector2D, margin: float) -> bool:
        return abs(pos.y) > self.half_height + margin

    def is_in_negative_goal(self, pos: Vector2D) -> bool:
        """True if the ball is fully inside the goal behind the negative-y goal line."""
        return pos.y < -self.half_height - self.goal_depth and abs(pos.x) < self.half_goal_width

    def is_in_positive_goal(self, pos: Vector2D) -> bool:
        """True if the ball is fully inside the goal behind the positive-y goal line."""
        return pos.y > self.half_height + self.goal_depth and abs(pos.x) < self.half_goal_width
