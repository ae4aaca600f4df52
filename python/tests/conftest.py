from __future__ import annotations

import pytest
import structlog

from slidesearch.models.board import Board, Direction


@pytest.fixture(autouse=True)
def _reset_structlog():
    # The CLI binds structlog to the runner's stderr; undo that between tests.
    yield
    structlog.reset_defaults()


def scrambled(size: int, *directions: Direction) -> Board:
    """Solved board with the given blank slides applied, all of which must be legal."""
    board = Board.solved(size)
    for direction in directions:
        assert board.slide(direction), f"{direction.value} is illegal here"
    return board
