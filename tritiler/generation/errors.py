"""Exceptions raised by tile generation.

Only Contradiction is recoverable: the solver catches it inside its retry
loop. Everything else is surfaced to the caller unchanged.
"""

from __future__ import annotations

from ..core.types import TriCoord


class TilerError(Exception):
    """Base exception for tritiler errors."""

    pass


class InvalidTileError(TilerError, ValueError):
    """A tile or palette is malformed (wrong edge arity, missing or duplicate id)."""

    def __init__(self, message: str, tile_id: str | None = None):
        super().__init__(message)
        self.tile_id = tile_id


class EmptyPaletteError(InvalidTileError):
    """The solver was given no tiles to place."""

    def __init__(self, message: str = "Palette must contain at least one tile"):
        super().__init__(message)


class Contradiction(TilerError):
    """A cell ran out of possible tiles during an attempt."""

    def __init__(self, coord: TriCoord, reason: str):
        super().__init__(f"Contradiction at {coord}: {reason}")
        self.coord = coord
        self.reason = reason


class GenerationFailed(TilerError):
    """Every attempt ended in a contradiction."""

    def __init__(self, attempts: int, last_cause: Contradiction):
        super().__init__(
            f"Generation failed after {attempts} attempt(s); last cause: {last_cause}"
        )
        self.attempts = attempts
        self.last_cause = last_cause


class GenerationCancelled(TilerError):
    """The caller asked the solver to stop mid-attempt."""

    def __init__(self, attempt: int):
        super().__init__(f"Generation cancelled during attempt {attempt}")
        self.attempt = attempt
