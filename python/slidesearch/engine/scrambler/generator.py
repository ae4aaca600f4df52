"""Generates scrambled boards by random walks from the solved state."""

from __future__ import annotations

import random

import structlog

from slidesearch.models.board import Board, Direction

log = structlog.get_logger(__name__)


class Scrambler:
    """Creates solvable puzzles by shuffling from the solved state.

    The random source is always passed in, so a seed fully determines the
    scramble.
    """

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    @classmethod
    def seeded(cls, seed: int) -> Scrambler:
        return cls(random.Random(seed))

    def scramble(self, board: Board, moves: int) -> list[Direction]:
        """Scramble *board* in-place with *moves* random legal slides.

        The walk never immediately undoes its previous slide unless that is
        the only legal move.  Returns the directions applied, in order.
        """
        applied: list[Direction] = []
        previous: Direction | None = None

        for _ in range(moves):
            candidates = self._legal_directions(board)
            if previous is not None and len(candidates) > 1:
                candidates.remove(previous.opposite)
            direction = self.rng.choice(candidates)
            board.slide(direction)
            applied.append(direction)
            previous = direction

        return applied

    def generate(self, size: int, moves: int) -> Board:
        """Return a scrambled copy of the solved board of the given size."""
        board = Board.solved(size)
        self.scramble(board, moves)
        log.debug("scramble.generated", size=size, moves=moves, cost=board.cost)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _legal_directions(board: Board) -> list[Direction]:
        br, bc = board.blank_pos
        legal: list[Direction] = []
        for direction in Direction:
            dr, dc = direction.offset
            if 0 <= br + dr < board.size and 0 <= bc + dc < board.size:
                legal.append(direction)
        return legal
