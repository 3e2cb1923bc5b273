"""
Triangular grid topology.

The grid is a rectangle of (q, r) cells, each split into an up-pointing
and a down-pointing triangle. Every triangle has three edges, and the
neighbour across edge i is returned at index i of neighbors().

This module is pure: no state, no bounds checking. A neighbour returned
here may lie outside the generated area, so callers look neighbours up
and tolerate a miss.
"""

from __future__ import annotations

import math

from ..core.types import Pointing, TriCoord


def neighbors(coord: TriCoord) -> tuple[TriCoord, TriCoord, TriCoord]:
    """
    Get the three neighbouring triangles, indexed by edge.

    Up triangle:   edge 0 -> (q-1, r, down), edge 1 -> (q, r+1, down),
                   edge 2 -> (q, r-1, up)
    Down triangle: edge 0 -> (q, r-1, down), edge 1 -> (q+1, r, up),
                   edge 2 -> (q, r+1, up)
    """
    q, r = coord.q, coord.r

    if coord.is_up:
        return (
            TriCoord(q - 1, r, Pointing.DOWN),  # left edge
            TriCoord(q, r + 1, Pointing.DOWN),  # right edge
            TriCoord(q, r - 1, Pointing.UP),    # bottom edge
        )

    return (
        TriCoord(q, r - 1, Pointing.DOWN),  # top edge
        TriCoord(q + 1, r, Pointing.UP),    # right edge
        TriCoord(q, r + 1, Pointing.UP),    # left edge
    )


def opposite_edge(edge_index: int) -> int:
    """
    Get the edge of the neighbour that faces back across edge_index.

    With the neighbour ordering above the two sides of a shared edge carry
    the same index, for both orientations. Propagation relies on this.
    """
    return int(edge_index)


def enumerate_grid(width: int, height: int) -> list[TriCoord]:
    """
    List every triangle of a width x height rectangle.

    Row-major over (q, r); each cell yields its up triangle then its down
    triangle, so the result has 2 * width * height entries.
    """
    coords: list[TriCoord] = []
    for r in range(height):
        for q in range(width):
            coords.append(TriCoord(q, r, Pointing.UP))
            coords.append(TriCoord(q, r, Pointing.DOWN))
    return coords


def coord_key(coord: TriCoord) -> str:
    """Encode a coordinate as a map key, e.g. "3,-1,down"."""
    return f"{coord.q},{coord.r},{coord.pointing.value}"


def coord_from_key(key: str) -> TriCoord:
    """
    Parse a key produced by coord_key().

    Raises:
        ValueError: If the key is not of the form "q,r,up|down"
    """
    parts = key.split(",")
    if len(parts) != 3:
        raise ValueError(f"Malformed coordinate key: {key!r}")
    q, r, pointing = parts
    try:
        return TriCoord(int(q), int(r), Pointing(pointing))
    except ValueError as e:
        raise ValueError(f"Malformed coordinate key: {key!r}") from e


def coord_to_position(coord: TriCoord, tile_size: float) -> tuple[float, float]:
    """
    Project a coordinate to world space for rendering.

    Rows are one triangle height apart; down triangles sit half a tile to
    the right of the up triangle in the same cell.
    """
    height = tile_size * math.sqrt(3) / 2
    x = coord.q * tile_size + (0.0 if coord.is_up else tile_size / 2)
    y = coord.r * height
    return (x, y)
