"""
Component base class for entity data.

Components are pydantic models attached to an Entity. Systems drive
them once per tick; a component may expose commands that keep its own
fields consistent (the Mover does), but it never reaches outside itself.

Usage:
    class Health(Component):
        current: int
        max: int
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Pydantic provides:
    - Automatic validation (including on assignment)
    - Frozen fields for values fixed at construction
    - Default values
    """

    model_config = ConfigDict(
        # Allow arbitrary types (for references)
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        extra='forbid',
    )

    # Owning entity id (set by Entity.add)
    _entity_id: int | None = None

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to, if any."""
        return self._entity_id
