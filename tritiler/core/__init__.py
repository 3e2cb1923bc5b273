"""Core domain models for tritiler.

This module contains pure domain models with no I/O. Models are immutable
(NamedTuples and frozen Pydantic models).

Usage:
    from tritiler.core import TriCoord, Pointing, TileDefinition, PlacedTile
"""

from .types import (
    EdgeType,
    Pointing,
    EdgeDirection,
    TriCoord,
)
from .tiles import TileDefinition, PlacedTile
from .constants import (
    EDGE_COUNT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_TILE_SIZE,
)

__all__ = [
    # Types
    "EdgeType",
    "Pointing",
    "EdgeDirection",
    "TriCoord",
    # Tiles
    "TileDefinition",
    "PlacedTile",
    # Constants
    "EDGE_COUNT",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_GRID_WIDTH",
    "DEFAULT_GRID_HEIGHT",
    "DEFAULT_TILE_SIZE",
]
