"""
Core module: entities, components, systems, world and event bus.
"""

from pedestrians.core.entity import Entity
from pedestrians.core.component import Component
from pedestrians.core.system import System
from pedestrians.core.world import World
from pedestrians.core.events import EventBus, Event

__all__ = [
    "Entity",
    "Component",
    "System",
    "World",
    "EventBus",
    "Event",
]
