import math
from typing import Union

import numpy as np


class Vector2D:
    """Immutable 2D point/vector in field coordinates (metres)."""

    __slots__ = ("_x", "_y")

    def __init__(self, *coords):
        # Handle (1, 2), ((1, 2)), [1, 2], np.array([1, 2])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray, Vector2D)):
                self._x = float(c[0])
                self._y = float(c[1])
            else:
                raise TypeError(f"Invalid single argument type for Vector2D: {type(c)}")
        elif len(coords) == 2:
            self._x = float(coords[0])
            self._y = float(coords[1])
        else:
            raise TypeError(f"Vector2D requires 2 coordinates, got {len(coords)}")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def mag(self) -> float:
        return math.hypot(self._x, self._y)

    def distance_to(self, other: Union["Vector2D", tuple]) -> float:
        """
        Calculate the euclidean distance to another point.
        """
        return math.hypot(other[0] - self._x, other[1] - self._y)

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y])

    def to_dict(self) -> dict:
        return {"x": self._x, "y": self._y}

    def __iter__(self):
        yield self._x
        yield self._y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        raise IndexError("Vector2D index out of range")

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x + other.x, self._y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x - other.x, self._y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self._x * scalar, self._y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self._x, -self._y)

    def __abs__(self) -> float:
        return self.mag()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self._x, other.x, abs_tol=1e-9) and math.isclose(self._y, other.y, abs_tol=1e-9)

    def __array__(self, dtype=None, copy=None):
        return np.array([self._x, self._y], dtype=dtype)

    def __repr__(self):
        return f"Vector2D(x={self._x}, y={self._y})"
