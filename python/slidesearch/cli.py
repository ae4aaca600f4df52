"""Sliding puzzle search.

Usage::

    slidesearch                        # scramble a 3×3 with seed 0 and solve it
    slidesearch -s 4 -m 40 --seed 7    # 4×4, 40 scramble moves
    slidesearch --board 1,2,3,4,5,6,0,7,8
    slidesearch --dot trace.dot        # also write the search graph
"""

from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

from slidesearch.config import (
    DEFAULT_MOVES,
    DEFAULT_SEED,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    SearchConfig,
)
from slidesearch.engine.scrambler import Scrambler
from slidesearch.engine.search import Solver
from slidesearch.engine.trace import DotTrace, NullTrace, TraceListener
from slidesearch.errors import InvalidBoardError
from slidesearch.frontend.rich_view import show_replay, show_result
from slidesearch.logconfig import configure_logging
from slidesearch.models.board import Board

log = structlog.get_logger(__name__)
console = Console()

app = typer.Typer(add_completion=False)


# -- helpers ------------------------------------------------------------------


def _initial_board(config: SearchConfig) -> Board:
    if config.board is not None:
        return Board.from_flat(config.size, config.board)
    return Scrambler.seeded(config.seed).generate(config.size, config.moves)


def run(config: SearchConfig, replay: bool = False) -> bool:
    """Build the initial board, search it and print the result."""
    root = _initial_board(config)
    if not root.is_solvable():
        log.warning("board.unsolvable", board=root.fingerprint())

    dot = DotTrace() if config.dot_path is not None else None
    trace: TraceListener = dot if dot is not None else NullTrace()
    result = Solver(trace=trace, max_expansions=config.max_expansions).search(root)

    show_result(console, root, result)
    if replay and result:
        show_replay(console, root, result.moves)

    if dot is not None and config.dot_path is not None:
        dot.write(config.dot_path)
        log.info("trace.written", path=str(config.dot_path))

    return result.solved


# -- CLI entry point ----------------------------------------------------------


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDESEARCH_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    moves: int = typer.Option(
        DEFAULT_MOVES, "-m", "--moves",
        min=0,
        envvar="SLIDESEARCH_MOVES",
        help="Number of random slides used to scramble the board.",
    ),
    seed: int = typer.Option(
        DEFAULT_SEED, "--seed",
        envvar="SLIDESEARCH_SEED",
        help="Seed for the scrambler.",
    ),
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        envvar="SLIDESEARCH_BOARD",
        help="Explicit row-major board, e.g. '1,2,3,4,5,6,7,0,8'. Skips scrambling.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        envvar="SLIDESEARCH_MAX_EXPANSIONS",
        help="Give up after expanding this many states.",
    ),
    dot: Optional[Path] = typer.Option(
        None, "--dot",
        envvar="SLIDESEARCH_DOT",
        help="Write the search trace as a Graphviz DOT file.",
    ),
    replay: bool = typer.Option(
        False, "--replay",
        envvar="SLIDESEARCH_REPLAY",
        help="Print every board along the solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        envvar="SLIDESEARCH_VERBOSE",
        help="Enable debug logging.",
    ),
) -> None:
    """Scramble (or read) a sliding puzzle and search for a solution."""
    configure_logging(verbose)
    try:
        config = SearchConfig(
            size=size,
            moves=moves,
            seed=seed,
            board=SearchConfig.parse_board(board) if board is not None else None,
            max_expansions=max_expansions,
            dot_path=dot,
            verbose=verbose,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        solved = run(config, replay=replay)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="--board") from exc

    if not solved:
        raise typer.Exit(code=1)
