from typing import Tuple

from ssl_autoref.config.settings import VISION_UNITS_PER_METRE
from ssl_autoref.entities.data.vector import Vector2D


def to_vision(pos: Vector2D) -> Tuple[float, float]:
    """
    Convert a field position into the simulator's vision frame.

    The AutoRef frame has the goals on the y axis and uses metres; the vision
    frame has the goals on the x axis and uses millimetres.

    Args:
        pos (Vector2D): Position in the AutoRef frame (metres).

    Returns:
        Tuple[float, float]: (x, y) in the vision frame (millimetres).
    """
    return pos.y * VISION_UNITS_PER_METRE, -pos.x * VISION_UNITS_PER_METRE
