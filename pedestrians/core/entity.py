"""
Entity - a named holder for at most one component of each type.

Usage:
    walker = Entity("walker", Mover(x=100, y=200))
    walker.get(Mover).head_toward(300, 200, WALKING_SPEED)
"""

from __future__ import annotations

import itertools
from typing import TypeVar, Iterator

from pedestrians.core.component import Component

C = TypeVar('C', bound=Component)


class Entity:
    """
    One agent in the world.

    Attributes:
        id: Unique identifier, assigned in creation order
        name: Label used in logs and events
        active: Inactive entities are skipped by systems
    """

    _ids = itertools.count(1)

    def __init__(self, name: str = "", *components: Component):
        self.id = next(Entity._ids)
        self.name = name or f"walker_{self.id}"
        self.active = True
        self._components: dict[type[Component], Component] = {}
        for component in components:
            self.add(component)

    def add(self, component: C) -> C:
        """
        Attach a component and return it.

        Raises:
            ValueError: If a component of the same type is already attached
        """
        kind = type(component)
        if kind in self._components:
            raise ValueError(f"{self.name} already has a {kind.__name__}")

        component._entity_id = self.id
        self._components[kind] = component
        return component

    def get(self, component_type: type[C]) -> C:
        """
        Raises:
            KeyError: If no component of that type is attached
        """
        try:
            return self._components[component_type]  # type: ignore
        except KeyError:
            raise KeyError(f"{self.name} has no {component_type.__name__}") from None

    def try_get(self, component_type: type[C]) -> C | None:
        return self._components.get(component_type)  # type: ignore

    def has(self, *component_types: type[Component]) -> bool:
        return all(kind in self._components for kind in component_types)

    @property
    def components(self) -> Iterator[Component]:
        return iter(self._components.values())

    def __repr__(self) -> str:
        kinds = ", ".join(kind.__name__ for kind in self._components)
        return f"Entity({self.name}, id={self.id}, components=[{kinds}])"
