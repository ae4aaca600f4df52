from __future__ import annotations

import random

import pytest

from slidesearch.engine.scrambler import Scrambler
from slidesearch.models.board import Board


def test_same_seed_same_board() -> None:
    a = Scrambler.seeded(42).generate(4, 50)
    b = Scrambler(random.Random(42)).generate(4, 50)

    assert a == b


def test_different_seeds_differ() -> None:
    boards = {Scrambler.seeded(seed).generate(4, 50).fingerprint() for seed in range(5)}
    assert len(boards) > 1


def test_zero_moves_is_solved() -> None:
    assert Scrambler.seeded(0).generate(3, 0).is_solved()


@pytest.mark.parametrize("size", [2, 3, 4])
def test_scramble_never_backtracks(size: int) -> None:
    board = Board.solved(size)
    applied = Scrambler.seeded(size).scramble(board, 100)

    assert len(applied) == 100
    for prev, nxt in zip(applied, applied[1:]):
        assert nxt != prev.opposite


def test_undoing_scramble_solves_board() -> None:
    board = Board.solved(4)
    applied = Scrambler.seeded(9).scramble(board, 60)

    assert board.cost == board.compute_cost()
    for direction in reversed(applied):
        assert board.slide(direction.opposite)
    assert board.is_solved()
