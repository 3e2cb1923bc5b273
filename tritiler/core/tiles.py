"""Tile models for tritiler.

A TileDefinition is a candidate triangle with one edge label per side.
Rotated variants are ordinary TileDefinitions that remember which base
tile they came from. A PlacedTile is the solver's output for one cell.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import EdgeType, TriCoord


class TileDefinition(BaseModel):
    """A tile that can occupy one triangle of the grid.

    Attributes:
        id: Unique identifier within a palette (e.g. "road_bend_r1")
        name: Human readable name, shared by all rotations of a tile
        edges: Edge labels in clockwise order (edge 0, 1, 2)
        rotation: Which 120 degree step of the base tile this is (0, 1 or 2)
        base_id: Id of the unrotated source tile, None for base tiles
        metadata: Free-form rendering hints (colour, description, ...)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    edges: tuple[EdgeType, EdgeType, EdgeType]
    rotation: int = Field(default=0, ge=0, le=2)
    base_id: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def family(self) -> str:
        """Id of the base tile this tile belongs to."""
        return self.base_id or self.id

    def edge(self, index: int) -> EdgeType:
        """Get the edge label at the given edge index."""
        return self.edges[index]

    def with_rotation(self, rotation: int, edges: tuple[EdgeType, EdgeType, EdgeType]) -> TileDefinition:
        """Return a rotated variant derived from this tile."""
        return self.model_copy(
            update={
                "id": f"{self.id}_r{rotation}",
                "edges": edges,
                "rotation": rotation,
                "base_id": self.id,
            }
        )


class PlacedTile(BaseModel):
    """A solved cell: a coordinate paired with its resolved tile."""

    model_config = ConfigDict(frozen=True)

    coord: TriCoord
    tile: TileDefinition
