"""
Movement system - advances every Mover once per tick.
"""

from __future__ import annotations

from enum import Enum, auto

from pedestrians.core import System, Entity
from pedestrians.components import Mover


class MovementEvent(Enum):
    """Movement system events."""
    DESTINATION_REACHED = auto()  # entity, point
    WAYPOINT_REACHED = auto()     # entity, index, point
    PATH_COMPLETED = auto()       # entity, point


class MovementSystem(System):
    """
    Drives all entities with a Mover.

    Handles:
    - Converting the engine's seconds into the Mover's milliseconds
    - Publishing arrival, waypoint and path completion events
    """

    required_components = (Mover,)

    def process_entity(self, entity: Entity, dt: float) -> None:
        mover = entity.get(Mover)

        was_on_path = mover.is_on_path
        was_arrived = mover.has_reached_destination()
        previous_index = mover.path_index

        mover.advance(dt * 1000.0)

        event_bus = self.world.event_bus
        if was_on_path and not mover.is_on_path:
            event_bus.publish(
                MovementEvent.PATH_COMPLETED,
                entity=entity,
                point=mover.center,
            )
        elif mover.is_on_path and mover.path_index != previous_index:
            event_bus.publish(
                MovementEvent.WAYPOINT_REACHED,
                entity=entity,
                index=previous_index,
                point=mover.waypoints[previous_index],
            )
        elif not was_arrived and not mover.is_on_path and mover.has_reached_destination():
            event_bus.publish(
                MovementEvent.DESTINATION_REACHED,
                entity=entity,
                point=mover.target,
            )
