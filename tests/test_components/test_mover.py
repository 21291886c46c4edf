import math

import pytest
from pydantic import ValidationError

from pedestrians.components.direction import Direction
from pedestrians.components.mover import Mover
from pedestrians.config import STOP_DISTANCE, WALKING_SPEED, RUNNING_SPEED


def walk_until(mover, condition, step_ms=100, max_ticks=10_000):
    for tick in range(max_ticks):
        if condition():
            return tick
        mover.advance(step_ms)
    raise AssertionError("condition never held")


def test_fresh_mover_has_arrived():
    m = Mover(x=5, y=7)
    assert m.center == (5.0, 7.0)
    assert m.target == (5.0, 7.0)
    assert m.has_reached_destination()
    assert m.distance_to_target() == 0
    assert m.speed == 0
    assert m.radius == 3.0
    assert not m.is_on_path
    assert not m.is_moving


def test_radius_is_fixed():
    m = Mover(x=0, y=0, radius=8)
    with pytest.raises(ValidationError):
        m.radius = 4
    assert m.radius == 8

    with pytest.raises(ValidationError):
        Mover(x=0, y=0, radius=0)


def test_distance_to_point():
    m = Mover(x=0, y=0)
    assert m.distance_to_point(3, 4) == 5.0


def test_head_toward_closes_distance_then_holds_position():
    m = Mover(x=0, y=0)
    m.head_toward(30, 40, WALKING_SPEED)
    assert m.speed == WALKING_SPEED
    assert m.is_moving

    distances = [m.distance_to_target()]
    while not m.has_reached_destination():
        m.advance(100)
        distances.append(m.distance_to_target())

    assert all(later < earlier for earlier, later in zip(distances, distances[1:]))
    assert distances[-1] <= STOP_DISTANCE

    resting = m.center
    for _ in range(5):
        m.advance(100)
    assert m.center == resting
    assert m.speed == 0


def test_advance_uses_milliseconds():
    m = Mover(x=0, y=0)
    m.head_toward(100, 0, WALKING_SPEED)
    m.advance(1000)
    assert m.x == pytest.approx(15.0)
    assert m.y == pytest.approx(0.0)


def test_advance_rejects_negative_time():
    m = Mover(x=0, y=0)
    m.head_toward(100, 0, WALKING_SPEED)
    with pytest.raises(ValueError):
        m.advance(-1)
    assert m.center == (0.0, 0.0)


@pytest.mark.parametrize("x, y, expected", [
    (10, 0, 0.0),
    (0, 10, math.pi / 2),
    (-10, 0, math.pi),
    (0, -10, 3 * math.pi / 2),
    (10, 10, math.pi / 4),
    (-10, -10, 5 * math.pi / 4),
    (10, -10, 7 * math.pi / 4),
])
def test_direction_covers_all_quadrants(x, y, expected):
    m = Mover(x=0, y=0)
    m.head_toward(x, y, WALKING_SPEED)
    assert m.direction == pytest.approx(expected)


def test_direction_kept_when_target_is_current_position():
    m = Mover(x=0, y=0)
    m.head_toward(0, 10, WALKING_SPEED)
    m.head_toward(0, 0, WALKING_SPEED)
    assert m.direction == pytest.approx(math.pi / 2)
    assert not math.isnan(m.direction)


def test_facing():
    m = Mover(x=0, y=0)
    m.head_toward(0, 10, WALKING_SPEED)
    assert m.facing is Direction.DOWN
    m.head_toward(-10, 1, WALKING_SPEED)
    assert m.facing is Direction.LEFT


def test_change_speed_ignored_after_arrival():
    m = Mover(x=0, y=0)
    m.change_speed_to(RUNNING_SPEED)
    assert m.speed == 0

    m.head_toward(100, 0, WALKING_SPEED)
    m.change_speed_to(RUNNING_SPEED)
    assert m.speed == RUNNING_SPEED


def test_negative_speed_rejected_without_side_effects():
    m = Mover(x=0, y=0)
    with pytest.raises(ValueError):
        m.head_toward(10, 10, -1)
    assert m.target == (0.0, 0.0)
    assert m.speed == 0

    with pytest.raises(ValueError):
        m.resume(-5)


def test_pause_then_resume_keeps_target_and_direction():
    m = Mover(x=0, y=0)
    m.head_toward(100, 0, WALKING_SPEED)
    m.advance(1000)

    m.pause()
    direction = m.direction
    assert m.speed == 0
    m.advance(1000)
    assert m.x == pytest.approx(15.0)

    m.resume(30)
    assert m.target == (100.0, 0.0)
    assert m.direction == direction
    m.advance(1000)
    assert m.x == pytest.approx(45.0)


def test_stop_forgets_destination():
    m = Mover(x=0, y=0)
    m.head_toward(100, 0, WALKING_SPEED)
    m.advance(1000)

    m.stop()

    assert m.speed == 0
    assert m.target == m.center
    assert m.has_reached_destination()
    assert not m.is_on_path
    assert m.path_index == 0


def test_set_new_target_point_matches_head_toward():
    a = Mover(x=0, y=0)
    b = Mover(x=0, y=0)
    a.head_toward(-20, 5, WALKING_SPEED)
    b.set_new_target_point(-20, 5, WALKING_SPEED)
    assert a.target == b.target
    assert a.direction == b.direction
    assert a.speed == b.speed


def test_head_direction_up_travels_open_ended():
    m = Mover(x=5, y=5)
    m.head_direction(Direction.UP, WALKING_SPEED)

    assert m.target == (5.0, -math.inf)
    assert m.heading is Direction.UP
    assert m.direction == pytest.approx(3 * math.pi / 2)
    assert m.distance_to_target() == math.inf
    assert not m.has_reached_destination()
    assert not m.is_on_path

    m.advance(1000)
    assert m.x == pytest.approx(5.0)
    assert m.y == pytest.approx(-10.0)


@pytest.mark.parametrize("direction, target", [
    (Direction.DOWN, (1.0, math.inf)),
    (Direction.LEFT, (-math.inf, 2.0)),
    (Direction.RIGHT, (math.inf, 2.0)),
])
def test_head_direction_targets(direction, target):
    m = Mover(x=1, y=2)
    m.head_direction(direction, RUNNING_SPEED)
    assert m.target == target
    assert m.speed == RUNNING_SPEED


def test_head_direction_rejects_unknown_direction():
    m = Mover(x=0, y=0)
    with pytest.raises(ValueError):
        m.head_direction("up", WALKING_SPEED)
    assert m.heading is None


def test_heading_ends_on_new_command():
    m = Mover(x=0, y=0)
    m.head_direction(Direction.RIGHT, WALKING_SPEED)
    m.change_speed_to(RUNNING_SPEED)
    assert m.speed == RUNNING_SPEED

    m.head_toward(0, 50, WALKING_SPEED)
    assert m.heading is None
    assert m.target == (0.0, 50.0)

    m.head_direction(Direction.LEFT, WALKING_SPEED)
    m.stop()
    assert m.heading is None
    assert m.target == m.center


def test_walk_until_arrival_on_diagonal():
    m = Mover(x=100, y=100)
    m.head_toward(40, 20, RUNNING_SPEED)
    ticks = walk_until(m, m.has_reached_destination, step_ms=50)
    assert ticks > 0
    assert m.distance_to_point(40, 20) <= STOP_DISTANCE


def test_speed_drops_on_arrival_tick():
    m = Mover(x=0, y=0)
    m.head_toward(5, 0, WALKING_SPEED)

    m.advance(100)
    assert not m.has_reached_destination()
    assert m.speed == WALKING_SPEED

    m.advance(100)
    assert m.has_reached_destination()
    assert m.speed == 0


@pytest.mark.parametrize("bad_speed", [-1, math.nan])
def test_invalid_speed_keeps_path(bad_speed):
    m = Mover(x=0, y=0)
    m.head_along_path([(10, 0), (10, 10)], WALKING_SPEED)

    with pytest.raises(ValueError):
        m.head_toward(50, 50, bad_speed)
    with pytest.raises(ValueError):
        m.head_direction(Direction.UP, bad_speed)
    with pytest.raises(ValueError):
        m.change_speed_to(bad_speed)
    with pytest.raises(ValueError):
        m.head_along_path([(0, 30)], bad_speed)

    assert m.is_on_path
    assert m.target == (10.0, 0.0)
    assert m.speed == WALKING_SPEED
    assert m.heading is None


def test_advance_rejects_nan_time():
    m = Mover(x=0, y=0)
    m.head_toward(100, 0, WALKING_SPEED)
    with pytest.raises(ValueError):
        m.advance(math.nan)
    assert m.center == (0.0, 0.0)


def test_facing_on_fresh_mover():
    assert Mover(x=0, y=0).facing is Direction.RIGHT
