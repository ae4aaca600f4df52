"""Manhattan-distance cost heuristic.

The cost of a grid is the sum, over every cell including the blank, of the
distance between where the value sits and where it belongs.  It is zero
exactly at the solved grid, and a single slide changes it by -2, 0 or +2
(two values each move one step).
"""

from __future__ import annotations


def solved_position(value: int, size: int) -> tuple[int, int]:
    """Return the goal ``(row, col)`` of *value*; the blank (0) goes bottom-right."""
    if value == 0:
        return size - 1, size - 1
    return (value - 1) // size, (value - 1) % size


def tile_distance(value: int, row: int, col: int, size: int) -> int:
    gr, gc = solved_position(value, size)
    return abs(row - gr) + abs(col - gc)


def manhattan_cost(tiles: list[list[int]], size: int) -> int:
    total = 0
    for r in range(size):
        for c in range(size):
            total += tile_distance(tiles[r][c], r, c, size)
    return total
