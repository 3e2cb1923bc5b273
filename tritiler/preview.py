"""Text preview of generated maps.

Renders placed tiles as rows of coloured triangles for terminals. This is
a stand-in for a real renderer: it only reads PlacedTiles, never the solver.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from rich.text import Text

from .core.tiles import PlacedTile, TileDefinition
from .core.types import Pointing, TriCoord

# Glyph per orientation; the tile colour carries the tile type
POINTING_RENDER: dict[Pointing, str] = {
    Pointing.UP: "▲",
    Pointing.DOWN: "▼",
}

EMPTY_RENDER = ("·", "bright_black")
FALLBACK_COLORS: dict[str, str] = {
    "grass": "green",
    "road": "bright_black",
}


def get_tile_color(tile: TileDefinition) -> str:
    """Get a rich colour for a tile from its metadata (RGB floats in 0..1)."""
    color = tile.metadata.get("color")
    if isinstance(color, (list, tuple)) and len(color) == 3:
        r, g, b = (max(0, min(255, round(float(c) * 255))) for c in color)
        return f"rgb({r},{g},{b})"

    # No colour hint: fall back on the dominant edge type
    dominant = Counter(tile.edges).most_common(1)[0][0]
    return FALLBACK_COLORS.get(dominant, "white")


def render_map(placed: Sequence[PlacedTile]) -> Text:
    """Render placed tiles as one line of text per grid row."""
    if not placed:
        return Text()

    lookup: dict[TriCoord, TileDefinition] = {p.coord: p.tile for p in placed}
    min_q = min(c.q for c in lookup)
    max_q = max(c.q for c in lookup)
    min_r = min(c.r for c in lookup)
    max_r = max(c.r for c in lookup)

    text = Text()
    for r in range(min_r, max_r + 1):
        for q in range(min_q, max_q + 1):
            for pointing in (Pointing.UP, Pointing.DOWN):
                tile = lookup.get(TriCoord(q, r, pointing))
                if tile is None:
                    text.append(*EMPTY_RENDER)
                else:
                    text.append(POINTING_RENDER[pointing], style=get_tile_color(tile))
        if r != max_r:
            text.append("\n")
    return text


def summarize(placed: Sequence[PlacedTile]) -> dict[str, int]:
    """Count placed tiles per base tile, most common first."""
    counts = Counter(p.tile.family for p in placed)
    return dict(counts.most_common())
