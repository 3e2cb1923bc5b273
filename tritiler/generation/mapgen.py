"""
Map generation using Wave Function Collapse.

This module provides the main entry point for filling a rectangle of
triangles with tiles whose edges all match.
"""

from __future__ import annotations

import random
from typing import Callable, Sequence

from ..core.constants import DEFAULT_MAX_ATTEMPTS
from ..core.tiles import PlacedTile, TileDefinition
from .grid import enumerate_grid
from .palette import build_palette
from .solver import WFCSolver
from .tileset import load_base_tiles


def generate_map(
    width: int,
    height: int,
    *,
    seed: int | None = None,
    base_tiles: Sequence[TileDefinition] | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    progress_callback: Callable[[int, int], None] | None = None,
) -> list[PlacedTile]:
    """
    Generate a tiled triangular map.

    Args:
        width: Number of (q) columns; each holds an up and a down triangle
        height: Number of (r) rows
        seed: Random seed for reproducibility (None = random)
        base_tiles: Base tiles to expand into the palette
                    (None = the bundled grass/road catalog)
        max_attempts: Max attempts before giving up (WFC can hit contradictions)
        progress_callback: Optional callback(collapsed, total_cells)

    Returns:
        One PlacedTile per triangle, in grid enumeration order

    Raises:
        GenerationFailed: If every attempt hit a contradiction
        EmptyPaletteError: If base_tiles is empty
    """
    if base_tiles is None:
        base_tiles = load_base_tiles()

    palette = build_palette(base_tiles)
    solver = WFCSolver(palette, rng=random.Random(seed))

    return solver.generate(
        enumerate_grid(width, height),
        max_attempts=max_attempts,
        progress_callback=progress_callback,
    )
