from slidesearch.engine.search.frontier import Frontier
from slidesearch.engine.search.solver import SearchOutcome, SearchResult, Solver, Step

__all__ = ["Frontier", "SearchOutcome", "SearchResult", "Solver", "Step"]
