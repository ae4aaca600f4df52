"""Board model for the sliding puzzle search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations
from enum import StrEnum

from slidesearch.engine.heuristic import manhattan_cost, solved_position, tile_distance
from slidesearch.errors import InvalidBoardError

BLANK_GLYPH = "·"


class Direction(StrEnum):
    """Where the *blank* moves: ``UP`` swaps it with the tile above it."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass
class Board:
    """Represents an N×N sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    ``cost`` is the Manhattan heuristic of ``tiles`` and is kept in sync by
    every constructor and by :meth:`slide`.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]
    cost: int = field(init=False)

    def __post_init__(self) -> None:
        br, bc = self.blank_pos
        if self.tiles[br][bc] != 0:
            raise InvalidBoardError(
                f"blank_pos {self.blank_pos} does not hold the blank "
                f"(found {self.tiles[br][bc]})."
            )
        self.cost = self.compute_cost()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        flat = list(range(1, size * size)) + [0]
        return cls.from_flat(size, flat)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = list(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidBoardError("Board rows must form a square grid.")
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def solved_position(self, value: int) -> tuple[int, int]:
        return solved_position(value, self.size)

    def compute_cost(self) -> int:
        return manhattan_cost(self.tiles, self.size)

    def is_solved(self) -> bool:
        return self.cost == 0

    def flat(self) -> list[int]:
        """Return the tiles in row-major order."""
        return [v for row in self.tiles for v in row]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.solved_position(self.tiles[row][col]) == (row, col)

    def fingerprint(self) -> int:
        """Pack the grid row-major into an int, one base-``radix`` digit per cell.

        The radix is 16 up to 4×4 and N² beyond, so every cell value fits in
        one digit and distinct grids never share a fingerprint.
        """
        radix = max(16, self.size * self.size)
        value = 0
        for v in self.flat():
            value = value * radix + v
        return value

    def is_solvable(self) -> bool:
        """Return True if the goal is reachable (inversion parity test)."""
        numbered = [v for v in self.flat() if v != 0]
        inversions = sum(1 for a, b in combinations(numbered, 2) if a > b)
        if self.size % 2 == 1:
            return inversions % 2 == 0
        # Even widths: each vertical slide also flips the blank-row parity.
        return (inversions + self.size - 1 - self.blank_pos[0]) % 2 == 0

    # -- mutation -------------------------------------------------------------

    def slide(self, direction: Direction) -> bool:
        """Move the blank one step in *direction*.

        Returns False, leaving the board untouched, if the blank would leave
        the grid.
        """
        br, bc = self.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return False

        n = self.size
        tile = self.tiles[tr][tc]
        # Only the blank and the swapped tile change cells.
        self.cost += (
            tile_distance(tile, br, bc, n) - tile_distance(tile, tr, tc, n)
            + tile_distance(0, tr, tc, n) - tile_distance(0, br, bc, n)
        )
        self.tiles[br][bc] = tile
        self.tiles[tr][tc] = 0
        self.blank_pos = (tr, tc)
        return True

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    # -- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the grid as padded text, one line per row."""
        width = len(str(self.size * self.size - 1))
        lines: list[str] = []
        for row in self.tiles:
            cells = [
                f"{BLANK_GLYPH:>{width}}" if v == 0 else f"{v:>{width}}"
                for v in row
            ]
            lines.append(" ".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
