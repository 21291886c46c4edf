"""
Pedestrian systems.
"""

from pedestrians.systems.movement import MovementSystem, MovementEvent

__all__ = [
    "MovementSystem",
    "MovementEvent",
]
