"""Tile generation for tritiler: grid topology, palettes and the WFC solver."""

from .errors import (
    TilerError,
    InvalidTileError,
    EmptyPaletteError,
    Contradiction,
    GenerationFailed,
    GenerationCancelled,
)
from .grid import (
    neighbors,
    opposite_edge,
    enumerate_grid,
    coord_key,
    coord_from_key,
    coord_to_position,
)
from .palette import rotate, edges_compatible, build_palette
from .tileset import load_base_tiles, default_palette, DEFAULT_TILES_PATH
from .solver import WFCSolver, SolverState, Cell, RandomSource
from .mapgen import generate_map

__all__ = [
    # Errors
    "TilerError",
    "InvalidTileError",
    "EmptyPaletteError",
    "Contradiction",
    "GenerationFailed",
    "GenerationCancelled",
    # Grid
    "neighbors",
    "opposite_edge",
    "enumerate_grid",
    "coord_key",
    "coord_from_key",
    "coord_to_position",
    # Palette
    "rotate",
    "edges_compatible",
    "build_palette",
    "load_base_tiles",
    "default_palette",
    "DEFAULT_TILES_PATH",
    # Solver
    "WFCSolver",
    "SolverState",
    "Cell",
    "RandomSource",
    "generate_map",
]
