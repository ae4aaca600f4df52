"""Graphviz DOT rendering of a search trace."""

from __future__ import annotations

from pathlib import Path

from slidesearch.models.board import Direction


def _node_id(fingerprint: int) -> str:
    return f"s{fingerprint:x}"


def _escape(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class DotTrace:
    """Accumulates trace events as statements of a directed graph.

    Nodes are coloured red when solved, blue for the root and black
    otherwise.  Solution steps are drawn as extra green edges labelled with
    the blank move.
    """

    def __init__(self, name: str = "search") -> None:
        self.name = name
        self._lines: list[str] = []

    def node_discovered(
        self, fingerprint: int, label: str, is_solved: bool, is_root: bool = False
    ) -> None:
        if is_solved:
            color = "red"
        elif is_root:
            color = "blue"
        else:
            color = "black"
        self._lines.append(
            f'  {_node_id(fingerprint)} [label="{_escape(label)}", color={color}];'
        )

    def edge_observed(self, source: int, target: int) -> None:
        self._lines.append(f"  {_node_id(source)} -> {_node_id(target)};")

    def solution_edge(self, source: int, target: int, direction: Direction) -> None:
        self._lines.append(
            f"  {_node_id(source)} -> {_node_id(target)} "
            f'[color=green, penwidth=2, label="{direction.value}"];'
        )

    # -- output ---------------------------------------------------------------

    def render(self) -> str:
        header = [
            f"digraph {self.name} {{",
            '  node [shape=box, fontname="monospace"];',
        ]
        return "\n".join(header + self._lines + ["}"]) + "\n"

    def write(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render())
