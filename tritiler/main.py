"""tritiler - fill a triangular grid with matching tiles."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from tqdm import tqdm

from .core.constants import (
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TILE_SIZE,
)
from .core.tiles import PlacedTile
from .generation import (
    GenerationFailed,
    InvalidTileError,
    coord_key,
    coord_to_position,
    generate_map,
    load_base_tiles,
)
from .logging_config import get_logger, setup_logging
from .preview import render_map, summarize

logger = get_logger(__name__)


def placed_to_json(placed: list[PlacedTile], tile_size: float) -> list[dict]:
    """Serialize placed tiles with their projected world positions."""
    rows = []
    for p in placed:
        x, y = coord_to_position(p.coord, tile_size)
        rows.append({
            "key": coord_key(p.coord),
            "q": p.coord.q,
            "r": p.coord.r,
            "pointing": p.coord.pointing.value,
            "x": x,
            "y": y,
            "tile": p.tile.model_dump(),
        })
    return rows


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser (environment supplies some defaults)."""
    env_data = os.environ.get("TRITILER_DATA_DIR", "data")

    parser = argparse.ArgumentParser(
        description="tritiler - Wave Function Collapse on a triangular grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tritiler                          # 12x8 map with the bundled grass/road tiles
  tritiler --width 30 --seed 7      # Reproducible wider map
  tritiler --tiles my_tiles.yaml    # Use a custom tile catalog
  tritiler --json > map.json        # Dump tiles with world positions
        """,
    )
    parser.add_argument("--width", type=int, default=DEFAULT_GRID_WIDTH, help="Grid columns")
    parser.add_argument("--height", type=int, default=DEFAULT_GRID_HEIGHT, help="Grid rows")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: $TRITILER_SEED or random)",
    )
    parser.add_argument("--tiles", type=Path, help="YAML tile catalog (default: bundled)")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help=f"Restarts allowed on contradiction (default: {DEFAULT_MAX_ATTEMPTS})",
    )
    parser.add_argument(
        "--tile-size",
        type=float,
        default=DEFAULT_TILE_SIZE,
        help="Triangle side length for --json positions",
    )
    parser.add_argument("--json", action="store_true", help="Print placed tiles as JSON")
    parser.add_argument(
        "--data",
        type=Path,
        default=Path(env_data),
        help="Log directory (default: $TRITILER_DATA_DIR or data/)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging to console")

    env_seed = os.environ.get("TRITILER_SEED")
    if env_seed:
        try:
            parser.set_defaults(seed=int(env_seed))
        except ValueError:
            parser.error(f"TRITILER_SEED must be an integer, got {env_seed!r}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for tritiler."""
    # Load environment variables first
    load_dotenv()

    args = build_parser().parse_args(argv)

    console_level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(
        args.data,
        console_level=console_level,
        run_info={
            "width": args.width,
            "height": args.height,
            "seed": args.seed,
            "tiles": args.tiles or "bundled",
        },
    )

    err = Console(stderr=True)

    if args.width < 0 or args.height < 0:
        err.print("[red]Error:[/red] width and height must be non-negative")
        return 1

    try:
        base_tiles = load_base_tiles(args.tiles)
    except (InvalidTileError, FileNotFoundError) as e:
        logger.info(f"Tile catalog rejected: {e}")
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    total = 2 * args.width * args.height
    pbar = tqdm(total=total, desc="Collapsing", unit="cells", disable=args.json, file=sys.stderr)
    last_progress = [0]

    def update_progress(current: int, _total: int) -> None:
        if current < last_progress[0]:
            # A contradiction restarted the attempt
            pbar.reset(total=total)
            last_progress[0] = 0
        delta = current - last_progress[0]
        if delta > 0:
            pbar.update(delta)
            last_progress[0] = current

    try:
        placed = generate_map(
            args.width,
            args.height,
            seed=args.seed,
            base_tiles=base_tiles,
            max_attempts=args.max_attempts,
            progress_callback=update_progress,
        )
    except (GenerationFailed, InvalidTileError) as e:
        logger.info(f"Generation aborted: {e}")
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    finally:
        pbar.close()

    if args.json:
        print(json.dumps(placed_to_json(placed, args.tile_size), indent=2))
        return 0

    console = Console()
    console.print(render_map(placed))
    console.print()
    for family, count in summarize(placed).items():
        console.print(f"  {family}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
