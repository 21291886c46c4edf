import pytest

from pedestrians.core.world import World
from pedestrians.components.mover import Mover
from pedestrians.systems.movement import MovementSystem


@pytest.fixture
def world():
    """World with the movement system attached."""
    world = World()
    world.add_system(MovementSystem())
    return world


@pytest.fixture
def walker(world):
    """Entity with a Mover standing at the origin."""
    return world.create_entity("walker", Mover(x=0, y=0))
