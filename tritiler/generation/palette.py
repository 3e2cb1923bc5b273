"""
Tile palette: rotations and the edge-matching rule.

A base tile is expanded into its three 120 degree rotations. Two tiles
may sit next to each other when the labels on their shared edge are
equal; there is no wildcard edge.
"""

from __future__ import annotations

from typing import Iterable

from ..core.constants import EDGE_COUNT
from ..core.tiles import TileDefinition
from ..core.types import EdgeType
from .errors import InvalidTileError


def rotate(base_tile: TileDefinition) -> list[TileDefinition]:
    """
    Generate the base tile plus its 120 and 240 degree rotations.

    [e0, e1, e2] -> [e2, e0, e1] (rotation 1) and [e1, e2, e0] (rotation 2).
    Rotated ids are "<id>_r1" / "<id>_r2"; name and metadata are inherited.
    """
    check_arity(base_tile)
    e0, e1, e2 = base_tile.edges
    return [
        base_tile,
        base_tile.with_rotation(1, (e2, e0, e1)),
        base_tile.with_rotation(2, (e1, e2, e0)),
    ]


def edges_compatible(edge_a: EdgeType, edge_b: EdgeType) -> bool:
    """Two edges can touch when their labels are identical."""
    return edge_a == edge_b


def build_palette(base_tiles: Iterable[TileDefinition]) -> list[TileDefinition]:
    """
    Expand base tiles into the full palette, in input order.

    Each base tile contributes itself followed by its two rotations.

    Raises:
        InvalidTileError: If a tile id (including synthesized rotation ids)
                          appears twice
    """
    palette: list[TileDefinition] = []
    seen: set[str] = set()

    for base_tile in base_tiles:
        for tile in rotate(base_tile):
            if tile.id in seen:
                raise InvalidTileError(f"Duplicate tile id in palette: {tile.id!r}", tile.id)
            seen.add(tile.id)
            palette.append(tile)

    return palette


def check_arity(tile: TileDefinition) -> None:
    """
    Reject a tile that does not have exactly three edges.

    Models built with model_construct() skip validation, so the solver and
    rotate() check again before relying on the triple.
    """
    if len(tile.edges) != EDGE_COUNT:
        raise InvalidTileError(
            f"Tile {tile.id!r} has {len(tile.edges)} edges, expected {EDGE_COUNT}",
            tile.id,
        )
