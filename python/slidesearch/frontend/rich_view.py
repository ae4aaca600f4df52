"""Rich terminal rendering of boards and search results."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidesearch.engine.heuristic import tile_distance
from slidesearch.engine.search import SearchOutcome, SearchResult
from slidesearch.models.board import BLANK_GLYPH, Board, Direction

_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

_DISTANCE_STYLE = {
    0: "bold green",
    1: "bold yellow",
}

_OUTCOME_STYLE = {
    SearchOutcome.SOLVED: "bold green",
    SearchOutcome.EXHAUSTED: "bold red",
    SearchOutcome.BUDGET_EXCEEDED: "bold yellow",
}


# -- board rendering ----------------------------------------------------------


def _cell(board: Board, row: int, col: int, width: int, moved: bool) -> str:
    val = board.tiles[row][col]
    if val == 0:
        return f"[dim]{BLANK_GLYPH:>{width}}[/dim]"
    distance = tile_distance(val, row, col, board.size)
    style = _DISTANCE_STYLE.get(distance, "bold white")
    if moved:
        style = f"{style} reverse"
    return f"[{style}]{val:>{width}}[/]"


def render_board(board: Board, moved: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table of the grid, shaded by each tile's distance from home.

    *moved* marks the cell of the tile that the last slide displaced.  The
    caption shows the board's heuristic cost.
    """
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="green" if board.is_solved() else "bright_blue",
        padding=(0, 1),
        caption=f"cost {board.cost}",
        caption_style="dim",
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        table.add_row(
            *(_cell(board, r, c, width, (r, c) == moved) for c in range(board.size))
        )

    return table


# -- result rendering ---------------------------------------------------------


def _render_moves(moves: list[Direction]) -> Text:
    text = Text()
    if not moves:
        text.append("  (already solved)", style="dim")
        return text
    for i, direction in enumerate(moves):
        if i:
            text.append(" ")
        text.append(_ARROWS[direction], style="bold cyan")
    return text


def _render_stats(root: Board, result: SearchResult) -> Table:
    stats = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    stats.add_column(style="dim")
    stats.add_column(justify="right", style="yellow")
    stats.add_row("Outcome", f"[{_OUTCOME_STYLE[result.outcome]}]{result.outcome.value}[/]")
    stats.add_row("Initial cost", str(root.cost))
    stats.add_row("Moves", str(len(result.steps)) if result else "-")
    stats.add_row("Expansions", str(result.expansions))
    stats.add_row("States seen", str(len(result.visited)))
    return stats


def show_result(console: Console, root: Board, result: SearchResult) -> None:
    """Print the initial board, the solution moves and the search statistics."""
    size = root.size
    panel = Panel(
        Align.center(render_board(root)),
        title=f"[bold cyan]Initial board  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    parts = [Align.center(panel)]
    if result:
        parts.append(Align.center(_render_moves(result.moves)))
    parts.append(Align.center(_render_stats(root, result)))

    console.print()
    console.print(Group(*parts))


def show_replay(console: Console, root: Board, moves: list[Direction]) -> None:
    """Print every intermediate board of *moves* applied to a copy of *root*."""
    board = root.copy()
    for i, direction in enumerate(moves, 1):
        # The displaced tile lands where the blank was.
        moved = board.blank_pos
        board.slide(direction)
        title = f"[cyan]{i}/{len(moves)}  {direction.value}[/cyan]"
        console.print(
            Align.center(
                Panel(render_board(board, moved), title=title, border_style="dim")
            )
        )
