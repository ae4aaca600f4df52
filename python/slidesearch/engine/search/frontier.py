"""Priority queue of boards awaiting expansion."""

from __future__ import annotations

import heapq
import itertools

from slidesearch.models.board import Board


class Frontier:
    """Min-heap of boards: lowest cost first, ties by fingerprint ascending.

    An insertion counter is the last key so two entries never fall through
    to comparing ``Board`` objects.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, Board]] = []
        self._counter = itertools.count()

    def push(self, board: Board) -> None:
        heapq.heappush(
            self._heap, (board.cost, board.fingerprint(), next(self._counter), board)
        )

    def pop(self) -> Board:
        """Remove and return the best board.  Raises IndexError when empty."""
        return heapq.heappop(self._heap)[3]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
