"""tritiler - Wave Function Collapse tiling of triangular grids."""

__version__ = "0.1.0"

from .core import Pointing, EdgeDirection, TriCoord, TileDefinition, PlacedTile
from .generation import (
    WFCSolver,
    GenerationFailed,
    EmptyPaletteError,
    InvalidTileError,
    build_palette,
    enumerate_grid,
    generate_map,
)

__all__ = [
    "__version__",
    "Pointing",
    "EdgeDirection",
    "TriCoord",
    "TileDefinition",
    "PlacedTile",
    "WFCSolver",
    "GenerationFailed",
    "EmptyPaletteError",
    "InvalidTileError",
    "build_palette",
    "enumerate_grid",
    "generate_map",
]
