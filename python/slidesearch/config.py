"""Run configuration for the command-line solver."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

MIN_SIZE = 2
MAX_SIZE = 5
DEFAULT_SIZE = 3
DEFAULT_MOVES = 20
DEFAULT_SEED = 0


@dataclass
class SearchConfig:
    """Options for one CLI run.  An explicit ``board`` overrides ``size``."""

    size: int = DEFAULT_SIZE
    moves: int = DEFAULT_MOVES
    seed: int = DEFAULT_SEED
    board: list[int] | None = None
    max_expansions: int | None = None
    dot_path: Path | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.board is not None:
            side = math.isqrt(len(self.board))
            if side * side != len(self.board):
                raise ValueError(
                    f"board has {len(self.board)} tiles, which is not a square grid"
                )
            self.size = side
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ValueError(
                f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {self.size}"
            )
        if self.moves < 0:
            raise ValueError(f"moves must be non-negative, got {self.moves}")
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError(
                f"max_expansions must be positive, got {self.max_expansions}"
            )

    @staticmethod
    def parse_board(raw: str) -> list[int]:
        """Parse ``"1,2,3,4,5,6,7,8,0"`` (commas or whitespace) into a flat list."""
        parts = raw.replace(",", " ").split()
        try:
            return [int(p) for p in parts]
        except ValueError as exc:
            raise ValueError(f"board must be a list of integers: {raw!r}") from exc
