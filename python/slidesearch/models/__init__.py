from slidesearch.models.board import Board, Direction
from slidesearch.models.visited import Predecessor, VisitedEntry

__all__ = ["Board", "Direction", "Predecessor", "VisitedEntry"]
