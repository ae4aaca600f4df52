from __future__ import annotations

import pytest

from conftest import scrambled
from slidesearch.engine.search import Frontier
from slidesearch.models.board import Board, Direction


def test_pops_lowest_cost_first() -> None:
    frontier = Frontier()
    far = scrambled(3, Direction.UP, Direction.LEFT, Direction.LEFT)
    near = scrambled(3, Direction.LEFT)
    solved = Board.solved(3)
    for board in (far, solved, near):
        frontier.push(board)

    popped = [frontier.pop() for _ in range(len(frontier))]

    assert popped == [solved, near, far]
    assert [b.cost for b in popped] == sorted(b.cost for b in popped)


@pytest.mark.parametrize("order", [(0, 1), (1, 0)])
def test_equal_cost_ties_break_by_fingerprint(order: tuple[int, int]) -> None:
    boards = [scrambled(3, Direction.LEFT), scrambled(3, Direction.UP)]
    assert boards[0].cost == boards[1].cost

    frontier = Frontier()
    for i in order:
        frontier.push(boards[i])

    first, second = frontier.pop(), frontier.pop()
    assert first.fingerprint() < second.fingerprint()
    assert first == boards[1]


def test_len_and_truthiness() -> None:
    frontier = Frontier()
    assert not frontier
    assert len(frontier) == 0

    frontier.push(Board.solved(2))
    assert frontier
    assert len(frontier) == 1


def test_pop_empty_raises() -> None:
    with pytest.raises(IndexError):
        Frontier().pop()
