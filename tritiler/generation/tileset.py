"""
Tile catalog loading.

Base tiles live in YAML so new tilesets can be added without code. The
default grass/road catalog ships with the package:

    grass       [grass, grass, grass]
    road_cross  [road,  road,  road ]
    road_bend   [road,  road,  grass]
    road_end    [road,  grass, grass]

With the crossroad present, any road edge can always be continued, and
grass can always be continued by the grass tile.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.tiles import TileDefinition
from .errors import InvalidTileError
from .palette import build_palette

logger = logging.getLogger(__name__)

DEFAULT_TILES_PATH = Path(__file__).parent.parent / "config" / "tiles.yaml"


def load_base_tiles(path: Path | str | None = None) -> list[TileDefinition]:
    """
    Load base tile definitions from a YAML catalog.

    Args:
        path: Path to a tiles.yaml file. If None, uses the bundled catalog.

    Returns:
        Base tiles in file order (rotations are not included)

    Raises:
        FileNotFoundError: If the catalog does not exist
        InvalidTileError: If the file is not valid UTF-8 YAML, an entry is
                          malformed, or an id is repeated
    """
    tiles_path = Path(path) if path is not None else DEFAULT_TILES_PATH

    try:
        with open(tiles_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise InvalidTileError(f"{tiles_path}: unreadable catalog: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("tiles"), list):
        raise InvalidTileError(f"{tiles_path}: expected a top-level 'tiles' list")

    tiles: list[TileDefinition] = []
    seen: set[str] = set()

    for index, entry in enumerate(data["tiles"]):
        tile = _parse_tile(entry, index, tiles_path)
        if tile.id in seen:
            raise InvalidTileError(f"{tiles_path}: duplicate tile id {tile.id!r}", tile.id)
        seen.add(tile.id)
        tiles.append(tile)

    logger.debug(f"Loaded {len(tiles)} base tiles from {tiles_path}")
    return tiles


def default_palette() -> list[TileDefinition]:
    """Build the full palette (with rotations) from the bundled catalog."""
    return build_palette(load_base_tiles())


def _parse_tile(entry: object, index: int, source: Path) -> TileDefinition:
    """Validate one catalog entry into a TileDefinition."""
    if not isinstance(entry, dict):
        raise InvalidTileError(f"{source}: tile #{index} is not a mapping")

    tile_id = entry.get("id")
    data = dict(entry)
    data.setdefault("name", tile_id or "")
    # YAML gives lists; the model wants an exact triple
    if isinstance(data.get("edges"), list):
        data["edges"] = tuple(data["edges"])

    try:
        return TileDefinition.model_validate(data)
    except ValidationError as e:
        label = repr(tile_id) if tile_id else f"#{index}"
        raise InvalidTileError(f"{source}: invalid tile {label}: {e}", tile_id) from e
