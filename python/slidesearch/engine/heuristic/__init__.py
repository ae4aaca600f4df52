from slidesearch.engine.heuristic.manhattan import (
    manhattan_cost,
    solved_position,
    tile_distance,
)

__all__ = ["manhattan_cost", "solved_position", "tile_distance"]
