"""
Screen-space travel directions.

Screen coordinates grow downward: UP decreases y, DOWN increases it.

    Screen coordinate system:

                 -y  (up)
                  |
    (left) -x <---+---> +x (right)
                  |
                 +y  (down)
"""

from __future__ import annotations

import math
from enum import Enum, auto


class Direction(Enum):
    """Axis directions for open-ended travel."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def vector(self) -> tuple[float, float]:
        """Unit vector in screen coordinates."""
        return _VECTORS[self]

    @property
    def angle(self) -> float:
        """Travel angle in radians, in [0, 2*pi)."""
        return _ANGLES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @staticmethod
    def from_vector(dx: float, dy: float) -> Direction | None:
        """Dominant axis direction of a movement vector, or None if it is zero."""
        if dx == 0 and dy == 0:
            return None
        if abs(dx) >= abs(dy):
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        return Direction.DOWN if dy > 0 else Direction.UP


_VECTORS = {
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}

_ANGLES = {
    Direction.RIGHT: 0.0,
    Direction.DOWN: math.pi / 2,
    Direction.LEFT: math.pi,
    Direction.UP: 3 * math.pi / 2,
}
