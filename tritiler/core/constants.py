"""Shared constants for tritiler.

Centralizes values used across multiple modules to ensure consistency.
"""

# Every triangle has exactly three edges (and so three neighbours)
EDGE_COUNT = 3

# Number of full Initializing -> Solving cycles before giving up
DEFAULT_MAX_ATTEMPTS = 100

# Grid defaults for the command-line entry point
DEFAULT_GRID_WIDTH = 12
DEFAULT_GRID_HEIGHT = 8

# Side length of one triangle in world units (used for projection only)
DEFAULT_TILE_SIZE = 32.0
