"""Greedy best-first search over sliding puzzle boards.

The frontier is ordered by heuristic cost alone, with no moves-so-far term,
so the first solution found is not necessarily the shortest one.  When a
shorter route to an already discovered state turns up, its visited entry is
rewritten but the state is not queued again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from slidesearch.engine.search.frontier import Frontier
from slidesearch.engine.trace import NullTrace, TraceListener
from slidesearch.errors import SearchInvariantError
from slidesearch.models.board import Board, Direction
from slidesearch.models.visited import Predecessor, VisitedEntry

log = structlog.get_logger(__name__)


class SearchOutcome(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass(frozen=True)
class Step:
    """One move of a solution: the blank moved *direction* from source to target."""

    source: int
    target: int
    direction: Direction


@dataclass
class SearchResult:
    outcome: SearchOutcome
    steps: list[Step] = field(default_factory=list)
    visited: dict[int, VisitedEntry] = field(default_factory=dict)
    expansions: int = 0

    @property
    def solved(self) -> bool:
        return self.outcome is SearchOutcome.SOLVED

    @property
    def moves(self) -> list[Direction]:
        return [step.direction for step in self.steps]

    def __bool__(self) -> bool:
        return self.solved


class Solver:
    """Runs one search per :meth:`search` call; nothing is shared between runs."""

    def __init__(
        self,
        trace: TraceListener | None = None,
        max_expansions: int | None = None,
    ) -> None:
        self.trace: TraceListener = trace if trace is not None else NullTrace()
        self.max_expansions = max_expansions

    # -- public API -----------------------------------------------------------

    def search(self, root: Board) -> SearchResult:
        """Search from *root* until a solved board is discovered.

        *root* is not modified.  A falsy result means no solution was found,
        either because every reachable state was expanded or because
        ``max_expansions`` ran out.
        """
        root = root.copy()
        root_fp = root.fingerprint()
        visited: dict[int, VisitedEntry] = {root_fp: VisitedEntry(depth=0)}
        log.info("search.start", size=root.size, cost=root.cost)

        self.trace.node_discovered(
            root_fp, root.render(), root.is_solved(), is_root=True
        )
        if root.is_solved():
            log.info("search.solved", moves=0, expansions=0, visited=1)
            return SearchResult(SearchOutcome.SOLVED, [], visited, 0)

        frontier = Frontier()
        frontier.push(root)
        expansions = 0

        while frontier:
            if self.max_expansions is not None and expansions >= self.max_expansions:
                log.info(
                    "search.budget_exceeded",
                    expansions=expansions,
                    visited=len(visited),
                )
                return SearchResult(
                    SearchOutcome.BUDGET_EXCEEDED, [], visited, expansions
                )

            p = frontier.pop()
            expansions += 1
            source = p.fingerprint()
            entry = visited.get(source)
            if entry is None:
                raise SearchInvariantError(
                    f"Expanded state {source:#x} has no visited entry."
                )
            next_depth = entry.depth + 1

            for direction in Direction:
                if not p.slide(direction):
                    continue

                target = p.fingerprint()
                self.trace.edge_observed(source, target)

                known = visited.get(target)
                if known is None or known.depth > next_depth:
                    visited[target] = VisitedEntry(
                        depth=next_depth,
                        predecessor=Predecessor(source, direction),
                    )

                if known is None:
                    solved = p.is_solved()
                    self.trace.node_discovered(target, p.render(), solved)
                    if solved:
                        steps = self._reconstruct(visited, target)
                        for step in steps:
                            self.trace.solution_edge(
                                step.source, step.target, step.direction
                            )
                        log.info(
                            "search.solved",
                            moves=len(steps),
                            expansions=expansions,
                            visited=len(visited),
                        )
                        return SearchResult(
                            SearchOutcome.SOLVED, steps, visited, expansions
                        )
                    frontier.push(p.copy())

                p.slide(direction.opposite)

        log.info("search.exhausted", expansions=expansions, visited=len(visited))
        return SearchResult(SearchOutcome.EXHAUSTED, [], visited, expansions)

    @staticmethod
    def solve(board: Board) -> list[Direction] | None:
        """Return a move sequence that solves *board*, or ``None`` if none was found."""
        result = Solver().search(board)
        return result.moves if result else None

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(visited: dict[int, VisitedEntry], goal: int) -> list[Step]:
        """Walk predecessor links from *goal* back to the root."""
        steps: list[Step] = []
        current = goal
        while True:
            entry = visited.get(current)
            if entry is None:
                raise SearchInvariantError(
                    f"No visited entry for {current:#x} during reconstruction."
                )
            if entry.predecessor is None:
                break
            if len(steps) > len(visited):
                raise SearchInvariantError("Predecessor links form a cycle.")
            pred = entry.predecessor
            steps.append(Step(pred.fingerprint, current, pred.direction))
            current = pred.fingerprint
        steps.reverse()
        return steps
