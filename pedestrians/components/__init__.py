"""
Pedestrian components.
"""

from pedestrians.components.direction import Direction
from pedestrians.components.mover import Mover

__all__ = [
    "Direction",
    "Mover",
]
