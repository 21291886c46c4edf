"""
Pedestrians

Moving agents on a 2D plane: target seeking, waypoint following and
open-ended travel, driven one tick at a time.

Quick Start:
    from pedestrians import World, Mover, MovementSystem, WALKING_SPEED

    world = World()
    world.add_system(MovementSystem())

    walker = world.create_entity("walker")
    mover = walker.add(Mover(x=10, y=10))
    mover.head_along_path([(40, 10), (40, 80)], WALKING_SPEED)

    # Once per host tick, dt in seconds:
    world.update(dt)
"""

__version__ = "0.1.0"

from pedestrians.core import (
    Entity,
    Component,
    System,
    World,
    EventBus,
    Event,
)
from pedestrians.components import Direction, Mover
from pedestrians.systems import MovementSystem, MovementEvent
from pedestrians.config import (
    STOP_DISTANCE,
    DEFAULT_COLLISION_RADIUS,
    STOPPED,
    WALKING_SPEED,
    RUNNING_SPEED,
)

__all__ = [
    # Core
    "Entity",
    "Component",
    "System",
    "World",
    "EventBus",
    "Event",
    # Movement
    "Direction",
    "Mover",
    "MovementSystem",
    "MovementEvent",
    # Config
    "STOP_DISTANCE",
    "DEFAULT_COLLISION_RADIUS",
    "STOPPED",
    "WALKING_SPEED",
    "RUNNING_SPEED",
]
