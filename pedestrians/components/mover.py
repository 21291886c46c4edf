"""
Mover component - position, heading and path following for one pedestrian.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional

import numpy as np
from pydantic import Field, PrivateAttr

from pedestrians.components.direction import Direction
from pedestrians.config import (
    DEFAULT_COLLISION_RADIUS,
    MAX_FLOATING_POINT_PRECISION,
    STOP_DISTANCE,
    STOPPED,
)
from pedestrians.core.component import Component

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class Mover(Component):
    """
    A circle that walks toward a target point, optionally along a path.

    Directions are radians in screen coordinates (y grows downward), so
    a direction of pi/2 moves toward the bottom of the screen.

    The route (target, waypoints, waypoint index, open-ended heading) is
    private and only changes through the commands below, so the current
    target is always the current waypoint and a path is never empty.

    Attributes:
        x: Center X
        y: Center Y
        radius: Collision radius, fixed at construction
        stop_distance: Distance from the target that counts as arrived
        direction: Direction of travel in radians
        speed: Speed of travel in units/second
    """
    x: float = 0.0
    y: float = 0.0
    radius: float = Field(default=DEFAULT_COLLISION_RADIUS, gt=0, frozen=True)
    stop_distance: float = Field(default=STOP_DISTANCE, ge=0, frozen=True)
    direction: float = 0.0
    speed: float = Field(default=STOPPED, ge=0)

    _target_x: float = PrivateAttr(default=0.0)
    _target_y: float = PrivateAttr(default=0.0)
    _path: Optional[list[Point]] = PrivateAttr(default=None)
    _path_index: int = PrivateAttr(default=0)
    _heading: Optional[Direction] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        # A fresh mover has already arrived where it stands
        self._target_x = self.x
        self._target_y = self.y

    # Queries

    @property
    def center(self) -> Point:
        return (self.x, self.y)

    @property
    def target(self) -> Point:
        """
        The point currently being sought.

        During open-ended travel the free axis is reported as +/-inf.
        """
        if self._heading is None:
            return (self._target_x, self._target_y)
        dx, dy = self._heading.vector
        if self._heading.is_horizontal:
            return (math.copysign(math.inf, dx), self._target_y)
        return (self._target_x, math.copysign(math.inf, dy))

    @property
    def heading(self) -> Direction | None:
        """Axis of open-ended travel, or None."""
        return self._heading

    @property
    def is_on_path(self) -> bool:
        """True while following a path, even if currently paused."""
        return self._path is not None

    @property
    def path_index(self) -> int:
        return self._path_index

    @property
    def number_of_points_in_path(self) -> int:
        return len(self._path) if self._path is not None else 0

    @property
    def waypoints(self) -> tuple[Point, ...]:
        return tuple(self._path) if self._path is not None else ()

    @property
    def remaining_waypoints(self) -> tuple[Point, ...]:
        """Waypoints after the one currently targeted."""
        if self._path is None:
            return ()
        return tuple(self._path[self._path_index + 1:])

    @property
    def is_moving(self) -> bool:
        return self.speed > MAX_FLOATING_POINT_PRECISION and not self.has_reached_destination()

    @property
    def facing(self) -> Direction | None:
        """Axis direction closest to the current direction of travel."""
        return Direction.from_vector(math.cos(self.direction), math.sin(self.direction))

    def distance_to_point(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def distance_to_target(self) -> float:
        """
        Distance to the current target only.

        When following a path this is the distance to the next waypoint;
        see distance_to_end_of_path for the whole remaining route.
        """
        if self._heading is not None:
            return math.inf
        return self.distance_to_point(self._target_x, self._target_y)

    def distance_to_end_of_path(self) -> float:
        """
        Distance to the current target plus the length of every path
        segment after it.

        This is an approximation of the distance still to walk: it is exact
        as long as the mover travels in straight lines between waypoints.
        Without a path it equals distance_to_target().
        """
        total = self.distance_to_target()

        if self._path is not None:
            remaining = np.asarray(self._path[self._path_index:], dtype=float)
            if len(remaining) > 1:
                dx, dy = np.diff(remaining, axis=0).T
                total += float(np.hypot(dx, dy).sum())

        return total

    def has_reached_destination(self) -> bool:
        """
        Whether the mover is within stop_distance of its current target.

        While following a path this is checked against each waypoint in
        turn and decides when to head for the next one.
        """
        if self._heading is not None:
            return False
        return self.distance_to_target() <= self.stop_distance

    # Ticking

    def advance(self, elapsed_millis: float) -> None:
        """
        Move according to speed and direction.

        On a tick where the target has already been reached the mover
        stays put instead and heads for the next waypoint, if any. A mover
        that reaches a target with no path behind it stops on that tick.

        Args:
            elapsed_millis: Time since the previous tick, in milliseconds

        Raises:
            ValueError: If elapsed_millis is negative
        """
        if not elapsed_millis >= 0:
            raise ValueError(f"Elapsed time cannot be negative: {elapsed_millis}")

        if self.has_reached_destination():
            if self._path is not None:
                self._advance_waypoint()
            elif self.speed != STOPPED:
                self.speed = STOPPED
            return

        seconds = elapsed_millis / 1000.0
        new_x = self.x + self.speed * math.cos(self.direction) * seconds
        new_y = self.y + self.speed * math.sin(self.direction) * seconds
        self.x = new_x
        self.y = new_y

        if self._path is None and self.has_reached_destination():
            self.speed = STOPPED

    def _advance_waypoint(self) -> None:
        next_index = self._path_index + 1
        if next_index >= len(self._path):
            logger.debug("Mover %s completed its path at %s", self._entity_id, self.center)
            self.stop()
            return

        self._path_index = next_index
        waypoint_x, waypoint_y = self._path[next_index]
        self._seek(waypoint_x, waypoint_y, self.speed)
        logger.debug(
            "Mover %s heading for waypoint %d/%d",
            self._entity_id, next_index, len(self._path) - 1,
        )

    # Commands

    def head_toward(self, x: float, y: float, speed: float) -> None:
        """
        Walk straight toward (x, y), abandoning any path or heading.

        Raises:
            ValueError: If speed is negative or NaN
        """
        _check_speed(speed)
        self._cancel_route()
        self._seek(x, y, speed)

    def set_new_target_point(self, x: float, y: float, speed: float) -> None:
        """Alias of head_toward."""
        self.head_toward(x, y, speed)

    def head_along_path(self, path: Iterable[Point], speed: float) -> None:
        """
        Follow a sequence of waypoints, starting with the first.

        The mover keeps its own copy of the points.

        Raises:
            ValueError: If the path is empty or speed is negative. The
                mover is left untouched.
        """
        points = [(float(px), float(py)) for px, py in path]
        if not points:
            raise ValueError("A path must contain at least one waypoint")
        _check_speed(speed)

        self._heading = None
        self._path = points
        self._path_index = 0
        self._seek(points[0][0], points[0][1], speed)
        logger.debug("Mover %s following path of %d waypoints", self._entity_id, len(points))

    def add_step_to_path(self, x: float, y: float) -> None:
        """
        Append a waypoint.

        Without a current path this starts one and heads for the new point
        at the current speed. Otherwise the point extends the route, unless
        it repeats the last waypoint.
        """
        point = (float(x), float(y))

        if self._path is None:
            self._heading = None
            self._path = [point]
            self._path_index = 0
            self._seek(point[0], point[1], self.speed)
        elif self._path[-1] != point:
            self._path.append(point)

    def head_direction(self, direction: Direction, speed: float) -> None:
        """
        Travel along an axis with no end point.

        The mover never arrives; it keeps going until another command
        replaces the heading.

        Raises:
            ValueError: If direction is not a Direction or speed is invalid
        """
        if not isinstance(direction, Direction):
            raise ValueError(f"Unknown direction: {direction!r}")
        _check_speed(speed)

        self._path = None
        self._path_index = 0
        self.speed = speed
        self._target_x = self.x
        self._target_y = self.y
        self._heading = direction
        self.direction = direction.angle

    def change_speed_to(self, speed: float) -> None:
        """Change speed without changing destination; ignored once arrived."""
        _check_speed(speed)
        if not self.has_reached_destination():
            self.speed = speed

    def pause(self) -> None:
        """Stop moving but remember where we were headed."""
        self.speed = STOPPED

    def resume(self, speed: float) -> None:
        """Continue toward the remembered destination at the given speed."""
        _check_speed(speed)
        self.speed = speed

    def stop(self) -> None:
        """Stop moving and forget the destination, path and heading."""
        self.speed = STOPPED
        self._target_x = self.x
        self._target_y = self.y
        self._path = None
        self._path_index = 0
        self._heading = None

    def _cancel_route(self) -> None:
        if self._path is not None:
            logger.debug("Mover %s abandoned its path at waypoint %d", self._entity_id, self._path_index)
        self._path = None
        self._path_index = 0
        self._heading = None

    def _seek(self, x: float, y: float, speed: float) -> None:
        self.speed = speed
        self._target_x = float(x)
        self._target_y = float(y)

        dx = self._target_x - self.x
        dy = self._target_y - self.y
        # Standing on the target: no meaningful angle, keep the old one
        if dx != 0 or dy != 0:
            self.direction = math.atan2(dy, dx) % (2 * math.pi)


def _check_speed(speed: float) -> None:
    # Written so NaN fails too
    if not speed >= 0:
        raise ValueError(f"Speed must be a non-negative number: {speed}")
