"""
Wave Function Collapse solver for triangular tiles.

This is the heart of WFC - the algorithm that observes (collapses) cells
and propagates constraints until every triangle holds one tile.

The algorithm, per attempt:
1. Find the uncollapsed cell with lowest entropy (random among ties)
2. Collapse it to one of its remaining tiles (uniform random choice)
3. Propagate: narrow neighbours until nothing changes
4. Repeat until complete, or until some cell runs out of tiles

A contradiction abandons the attempt; generate() then starts over from
scratch with fresh cells, up to max_attempts times.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterable, Protocol, Sequence, TypeVar

from ..core.constants import DEFAULT_MAX_ATTEMPTS
from ..core.tiles import PlacedTile, TileDefinition
from ..core.types import TriCoord
from ..logging_config import log_attempt, log_contradiction, log_generation
from .errors import (
    Contradiction,
    EmptyPaletteError,
    GenerationCancelled,
    GenerationFailed,
    InvalidTileError,
)
from .grid import coord_key, neighbors, opposite_edge
from .palette import check_arity, edges_compatible

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SolverState(Enum):
    """Where the current attempt is in its lifecycle."""
    INITIALIZING = auto()  # Cells being (re)built
    SOLVING = auto()       # Still collapsing, more steps needed
    SOLVED = auto()        # Every cell collapsed
    CONTRADICTED = auto()  # Some cell has 0 possibilities


class RandomSource(Protocol):
    """
    The randomness the solver needs.

    random.Random satisfies this; pass one with a fixed seed to make
    generation reproducible.
    """

    def choice(self, seq: Sequence[T]) -> T:
        ...


@dataclass
class Cell:
    """
    Solver state for one triangle.

    Before collapse: holds the set of tile ids still consistent with
    everything propagated so far. After collapse: holds exactly one.
    The set only ever shrinks within an attempt.
    """
    coord: TriCoord
    possible: set[str] = field(default_factory=set)
    collapsed: bool = False
    tile: TileDefinition | None = None

    @property
    def entropy(self) -> int:
        """Number of tiles this cell could still be."""
        return len(self.possible)

    def collapse_to(self, tile: TileDefinition) -> None:
        """Commit this cell to a single tile."""
        self.tile = tile
        self.collapsed = True
        self.possible = {tile.id}

    def constrain_to(self, allowed: set[str] | frozenset[str]) -> bool:
        """
        Keep only the possibilities in allowed.

        Returns True if the cell lost possibilities.
        """
        old_count = len(self.possible)
        self.possible &= allowed
        return len(self.possible) < old_count


# (other cell key, edge index on this cell, edge index on the other cell)
Link = tuple[str, int, int]


class WFCSolver:
    """
    The WFC algorithm over an arbitrary set of triangle coordinates.

    Usage:
        solver = WFCSolver(build_palette(base_tiles))
        placed = solver.generate(enumerate_grid(8, 6), rng=random.Random(7))

    Or step by step, for one attempt:
        solver.reset(coords, rng)
        while solver.step() is SolverState.SOLVING:
            pass

    The palette is read-only and may be shared across calls; cell state is
    rebuilt for every attempt.
    """

    def __init__(
        self,
        palette: Iterable[TileDefinition],
        rng: RandomSource | None = None,
    ):
        """
        Initialize the solver.

        Args:
            palette: Every tile the solver may place, rotations included
            rng: Default random source for generate() (None = unseeded)

        Raises:
            EmptyPaletteError: If the palette has no tiles
            InvalidTileError: If a tile has the wrong number of edges or
                              two tiles share an id
        """
        self._palette: tuple[TileDefinition, ...] = tuple(palette)
        if not self._palette:
            raise EmptyPaletteError()

        self._tiles: dict[str, TileDefinition] = {}
        for tile in self._palette:
            check_arity(tile)
            if tile.id in self._tiles:
                raise InvalidTileError(f"Duplicate tile id in palette: {tile.id!r}", tile.id)
            self._tiles[tile.id] = tile

        self._rng = rng
        self._active_rng: RandomSource = rng if rng is not None else random.Random()

        # (edge index, label) -> ids of tiles whose edge at that index accepts the label
        self._matching: dict[tuple[int, str], frozenset[str]] = {}

        self._cells: dict[str, Cell] = {}
        self._links: dict[str, list[Link]] = {}
        self._collapsed_count = 0
        self._should_cancel: Callable[[], bool] | None = None

        self.state = SolverState.INITIALIZING
        self.attempts = 0
        self.last_contradiction: Contradiction | None = None

    @property
    def palette(self) -> tuple[TileDefinition, ...]:
        """All tiles available to the solver, in palette order."""
        return self._palette

    @property
    def tile_ids(self) -> list[str]:
        """Tile ids in palette order."""
        return [tile.id for tile in self._palette]

    def tile(self, tile_id: str) -> TileDefinition:
        """Look up a palette tile by id."""
        return self._tiles[tile_id]

    @property
    def cells(self) -> dict[str, Cell]:
        """Cells of the current attempt, keyed by coord_key()."""
        return self._cells

    @property
    def collapsed_count(self) -> int:
        """Number of cells collapsed in the current attempt."""
        return self._collapsed_count

    # -------------------------------------------------------------------------
    # Attempt lifecycle
    # -------------------------------------------------------------------------

    def reset(self, coords: Iterable[TriCoord], rng: RandomSource | None = None) -> None:
        """
        Start a fresh attempt: every cell can be any tile.

        Duplicate coordinates collapse into one cell (last one wins).
        """
        self.state = SolverState.INITIALIZING
        if rng is not None:
            self._active_rng = rng

        all_ids = self.tile_ids
        self._cells = {}
        for coord in coords:
            self._cells[coord_key(coord)] = Cell(coord=coord, possible=set(all_ids))

        self._links = self._build_links()
        self._collapsed_count = 0
        self.state = SolverState.SOLVING

    def _build_links(self) -> dict[str, list[Link]]:
        """
        Record every neighbour relation between present cells.

        A relation found from either side constrains both cells, so it is
        stored on both of them.
        """
        links: dict[str, list[Link]] = {key: [] for key in self._cells}
        seen: set[tuple[str, str, int]] = set()

        for key, cell in self._cells.items():
            for edge_idx, neighbor_coord in enumerate(neighbors(cell.coord)):
                neighbor_key = coord_key(neighbor_coord)
                if neighbor_key not in self._cells:
                    continue
                back_edge = opposite_edge(edge_idx)

                if (key, neighbor_key, edge_idx) not in seen:
                    seen.add((key, neighbor_key, edge_idx))
                    links[key].append((neighbor_key, edge_idx, back_edge))
                if (neighbor_key, key, back_edge) not in seen:
                    seen.add((neighbor_key, key, back_edge))
                    links[neighbor_key].append((key, back_edge, edge_idx))

        return links

    def step(self) -> SolverState:
        """
        Perform one select / collapse / propagate round.

        Returns the solver state after this step. A contradiction ends the
        attempt and is kept in last_contradiction.
        """
        if self.state is not SolverState.SOLVING:
            return self.state

        try:
            self._check_cancelled()
            cell = self._select()
            if cell is None:
                self.state = SolverState.SOLVED
                return self.state

            self._check_cancelled()
            self._collapse(cell)

            self._check_cancelled()
            self._propagate(cell)
        except Contradiction as e:
            self.last_contradiction = e
            self.state = SolverState.CONTRADICTED

        return self.state

    def solve(self) -> bool:
        """
        Run the current attempt to completion.

        Returns True if solved, False on contradiction.
        """
        while self.step() is SolverState.SOLVING:
            pass
        return self.state is SolverState.SOLVED

    def placed_tiles(self) -> list[PlacedTile]:
        """Collapsed cells as PlacedTiles, in coordinate insertion order."""
        return [
            PlacedTile(coord=cell.coord, tile=cell.tile)
            for cell in self._cells.values()
            if cell.collapsed and cell.tile is not None
        ]

    def generate(
        self,
        coords: Sequence[TriCoord],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: RandomSource | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> list[PlacedTile]:
        """
        Fill every coordinate with a tile whose edges match its neighbours.

        Args:
            coords: Triangles to fill
            max_attempts: Full restarts allowed before giving up
            rng: Random source for this call (defaults to the solver's)
            progress_callback: Optional callback(collapsed, total_cells),
                               called after every collapse
            should_cancel: Optional check, polled between solver phases

        Returns:
            One PlacedTile per distinct coordinate, in input order

        Raises:
            GenerationFailed: If every attempt hit a contradiction
            GenerationCancelled: If should_cancel returned True
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        # Every attempt re-reads the coordinates
        coords = list(coords)

        if rng is not None:
            self._active_rng = rng
        elif self._rng is not None:
            self._active_rng = self._rng
        else:
            self._active_rng = random.Random()

        self.attempts = 0
        self.last_contradiction = None
        self._should_cancel = should_cancel
        started = time.perf_counter()
        total = 0

        try:
            for attempt in range(1, max_attempts + 1):
                self.attempts = attempt
                self.reset(coords)
                total = len(self._cells)
                log_attempt(logger, attempt, max_attempts, total)

                while self.step() is SolverState.SOLVING:
                    if progress_callback is not None:
                        progress_callback(self._collapsed_count, total)

                if self.state is SolverState.SOLVED:
                    placed = self.placed_tiles()
                    duration_ms = int((time.perf_counter() - started) * 1000)
                    log_generation(logger, "OK", attempt, total, duration_ms)
                    return placed

                cause = self.last_contradiction
                log_contradiction(
                    logger,
                    attempt,
                    coord_key(cause.coord),
                    cause.reason,
                    collapsed=self._collapsed_count,
                )
        except GenerationCancelled:
            log_generation(logger, "CANCELLED", self.attempts, total)
            raise
        finally:
            # Cells never outlive the attempt that built them
            self._cells = {}
            self._links = {}
            self._should_cancel = None

        cause = self.last_contradiction
        log_generation(logger, "FAILED", max_attempts, total, details=str(cause))
        raise GenerationFailed(max_attempts, cause) from cause

    # -------------------------------------------------------------------------
    # Select / collapse / propagate
    # -------------------------------------------------------------------------

    def _check_cancelled(self) -> None:
        if self._should_cancel is not None and self._should_cancel():
            raise GenerationCancelled(self.attempts)

    def _select(self) -> Cell | None:
        """
        Find the uncollapsed cell with minimum entropy.

        Returns None if all cells are collapsed. Ties are broken uniformly
        at random.

        Raises:
            Contradiction: If an uncollapsed cell has no possibilities left
        """
        min_entropy = float("inf")
        candidates: list[Cell] = []

        for cell in self._cells.values():
            if cell.collapsed:
                continue

            entropy = cell.entropy
            if entropy == 0:
                raise Contradiction(cell.coord, "no valid tiles remain")

            if entropy < min_entropy:
                min_entropy = entropy
                candidates = [cell]
            elif entropy == min_entropy:
                candidates.append(cell)

        if not candidates:
            return None  # All collapsed

        return self._active_rng.choice(candidates)

    def _collapse(self, cell: Cell) -> None:
        """Collapse a cell to one of its possibilities, uniformly at random."""
        # Palette order keeps the draw reproducible for a seeded source
        options = [tile.id for tile in self._palette if tile.id in cell.possible]
        chosen = self._active_rng.choice(options)
        cell.collapse_to(self._tiles[chosen])
        self._collapsed_count += 1

    def _propagate(self, start_cell: Cell) -> None:
        """
        Narrow neighbours until every link is consistent again.

        Depth-first over an explicit stack. A cell already handled in this
        sweep is skipped unless it lost possibilities since then.

        Raises:
            Contradiction: As soon as a neighbour is left with no tiles
        """
        stack: list[Cell] = [start_cell]
        visited: set[str] = set()

        while stack:
            cell = stack.pop()
            key = coord_key(cell.coord)
            if key in visited:
                continue
            visited.add(key)

            for neighbor_key, edge_idx, back_edge in self._links.get(key, ()):
                neighbor = self._cells[neighbor_key]
                if neighbor.collapsed:
                    continue

                allowed = self._valid_neighbor_tiles(cell, edge_idx, back_edge)
                if neighbor.constrain_to(allowed):
                    if neighbor.entropy == 0:
                        raise Contradiction(
                            neighbor.coord,
                            f"no tile matches edge {back_edge} facing {cell.coord}",
                        )
                    visited.discard(neighbor_key)
                    stack.append(neighbor)

    def _valid_neighbor_tiles(self, cell: Cell, edge_idx: int, back_edge: int) -> set[str]:
        """
        Get every tile id the neighbour across edge_idx may still be.

        A tile is valid when its back_edge label is compatible with the
        edge_idx label of at least one tile this cell could still be.
        """
        labels = {self._tiles[tile_id].edge(edge_idx) for tile_id in cell.possible}

        valid: set[str] = set()
        for label in labels:
            valid |= self._tiles_matching(back_edge, label)
        return valid

    def _tiles_matching(self, edge_idx: int, label: str) -> frozenset[str]:
        """Ids of tiles whose edge at edge_idx accepts the given label (cached)."""
        cache_key = (edge_idx, label)
        matching = self._matching.get(cache_key)
        if matching is None:
            matching = frozenset(
                tile.id for tile in self._palette if edges_compatible(label, tile.edge(edge_idx))
            )
            self._matching[cache_key] = matching
        return matching
