from __future__ import annotations

from pathlib import Path

from conftest import scrambled
from slidesearch.engine.search import Solver
from slidesearch.engine.trace import DotTrace, NullTrace
from slidesearch.models.board import Board, Direction


def _traced(board: Board) -> str:
    trace = DotTrace()
    Solver(trace=trace).search(board)
    return trace.render()


def test_dot_trace_for_one_move_search() -> None:
    dot = _traced(scrambled(3, Direction.LEFT))
    lines = dot.splitlines()

    assert lines[0] == "digraph search {"
    assert lines[-1] == "}"
    assert dot.count("color=blue") == 1
    assert dot.count("color=red") == 1
    assert dot.count("color=black") == 2
    assert dot.count("color=green") == 1
    assert 'label="right"' in dot
    # Three probes plus one solution edge.
    assert sum(1 for line in lines if "->" in line) == 4


def test_dot_labels_escape_newlines() -> None:
    trace = DotTrace()
    trace.node_discovered(0x1230, Board.solved(2).render(), True, is_root=True)

    assert 's1230 [label="1 2\\n3 ·", color=red];' in trace.render()


def test_dot_solved_root_is_red() -> None:
    dot = _traced(Board.solved(3))

    assert "color=red" in dot
    assert "color=blue" not in dot
    assert "->" not in dot


def test_dot_write(tmp_path: Path) -> None:
    trace = DotTrace(name="demo")
    trace.edge_observed(1, 2)
    out = tmp_path / "nested" / "trace.dot"

    trace.write(out)

    assert out.read_text() == trace.render()
    assert "s1 -> s2;" in out.read_text()


def test_null_trace_accepts_everything() -> None:
    trace = NullTrace()
    trace.node_discovered(1, "x", False)
    trace.edge_observed(1, 2)
    trace.solution_edge(1, 2, Direction.UP)
