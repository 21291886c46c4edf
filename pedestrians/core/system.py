"""
System base class for per-tick logic.

Usage:
    class MovementSystem(System):
        required_components = (Mover,)

        def process_entity(self, entity: Entity, dt: float) -> None:
            entity.get(Mover).advance(dt * 1000)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pedestrians.core.component import Component

if TYPE_CHECKING:
    from pedestrians.core.entity import Entity
    from pedestrians.core.world import World


class System(ABC):
    """
    Runs process_entity on every active entity that carries all of
    required_components.
    """

    required_components: ClassVar[tuple[type[Component], ...]] = ()

    def __init__(self):
        self._world: World | None = None

    @property
    def world(self) -> World:
        if self._world is None:
            raise RuntimeError(f"{self.__class__.__name__} is not attached to a world")
        return self._world

    def attach(self, world: World) -> None:
        self._world = world

    def update(self, dt: float) -> None:
        """
        Args:
            dt: Delta time in seconds
        """
        for entity in self.world.query(*self.required_components):
            if entity.active:
                self.process_entity(entity, dt)

    @abstractmethod
    def process_entity(self, entity: Entity, dt: float) -> None:
        """Handle one entity for this tick."""
