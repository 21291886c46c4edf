"""
Movement configuration values.
"""

# Maximum distance from a target at which a mover counts as arrived.
STOP_DISTANCE = 3.0

# Default radius of the collision circle around a mover.
DEFAULT_COLLISION_RADIUS = 3.0

# Speeds, in units/second.
STOPPED = 0.0
WALKING_SPEED = 15.0
RUNNING_SPEED = 45.0

# Smallest speed difference that is treated as real movement.
MAX_FLOATING_POINT_PRECISION = 0.001
