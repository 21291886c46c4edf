"""
World - the population of walkers plus the systems that tick them.

Usage:
    world = World()
    world.add_system(MovementSystem())

    walker = world.create_entity("walker", Mover(x=100, y=100))
    walker.get(Mover).head_direction(Direction.RIGHT, WALKING_SPEED)

    # Once per host tick:
    world.update(dt)
"""

from __future__ import annotations

import logging
from typing import Iterator

from pedestrians.core.component import Component
from pedestrians.core.entity import Entity
from pedestrians.core.events import EventBus
from pedestrians.core.system import System

logger = logging.getLogger(__name__)


class World:
    """Owns entities, runs systems in the order they were added."""

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()
        self._entities: dict[int, Entity] = {}
        self._systems: list[System] = []

    def create_entity(self, name: str = "", *components: Component) -> Entity:
        return self.add_entity(Entity(name, *components))

    def add_entity(self, entity: Entity) -> Entity:
        """
        Raises:
            ValueError: If the entity is already in this world
        """
        if entity.id in self._entities:
            raise ValueError(f"{entity.name} is already in the world")
        self._entities[entity.id] = entity
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Take an entity out of the world; safe to call from an event handler."""
        if self._entities.pop(entity.id, None) is not None:
            logger.debug("Removed %s", entity.name)

    def get_entity(self, entity_id: int) -> Entity | None:
        return self._entities.get(entity_id)

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    def query(self, *component_types: type[Component]) -> Iterator[Entity]:
        """Entities carrying every given component type, in creation order."""
        # Snapshot: handlers may remove entities while a system iterates
        for entity in list(self._entities.values()):
            if entity.id in self._entities and entity.has(*component_types):
                yield entity

    def add_system(self, system: System) -> System:
        system.attach(self)
        self._systems.append(system)
        return system

    def update(self, dt: float) -> None:
        """
        Args:
            dt: Delta time in seconds
        """
        for system in self._systems:
            system.update(dt)
