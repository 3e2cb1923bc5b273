"""Foundational types for tritiler.

This module defines the core types used throughout the system:
- Pointing: Orientation of a triangle (up or down)
- EdgeDirection: The three edge slots of a triangle
- TriCoord: Triangular grid coordinates (q, r, pointing)
- EdgeType: Alias for edge labels
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple

# Edge labels are free-form strings such as "grass" or "road"
EdgeType = str


class Pointing(Enum):
    """Orientation of a triangle in the grid."""

    UP = "up"
    DOWN = "down"


class EdgeDirection(IntEnum):
    """Index of one of the three edges of a triangle.

    Edges are ordered clockwise. The same index is used to look up both
    a tile's edge label and the neighbour across that edge.
    """

    EDGE_0 = 0
    EDGE_1 = 1
    EDGE_2 = 2


class TriCoord(NamedTuple):
    """A triangle in the grid.

    Each (q, r) cell of the underlying rectangle holds two triangles, one
    pointing up and one pointing down. They are adjacent but distinct.
    """

    q: int
    r: int
    pointing: Pointing

    @property
    def is_up(self) -> bool:
        return self.pointing is Pointing.UP

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.pointing.value})"
