"""Spawning configuration constants.

Ranges used when a new shape is created at a random transform and color.
"""

# =============================================================================
# RATES
# =============================================================================
# Shapes created / destroyed per second by Game.update(). Zero disables it.
DEFAULT_CREATION_SPEED = 0.0
DEFAULT_DESTRUCTION_SPEED = 0.0
MAX_SPAWN_SPEED = 10.0

# =============================================================================
# TRANSFORM
# =============================================================================
SCALE_MIN = 0.1
SCALE_MAX = 1.0

# Default spawn zone dimensions (world units)
DEFAULT_SPAWN_RADIUS = 5.0
DEFAULT_SPAWN_CUBE_SIZE = 10.0

# =============================================================================
# COLOR (HSV ranges)
# =============================================================================
# Saturation and value are kept away from zero so shapes never come out gray
# or black.
HUE_RANGE = (0.0, 1.0)
SATURATION_RANGE = (0.5, 1.0)
VALUE_RANGE = (0.25, 1.0)
ALPHA = 1.0
