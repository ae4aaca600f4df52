"""Search trace events.

The solver reports what it does through a :class:`TraceListener`:

- ``node_discovered`` once per newly seen state (the root first),
- ``edge_observed`` for every legal probe, seen or not,
- ``solution_edge`` for each step of the reconstructed path, root to goal.
"""

from __future__ import annotations

from typing import Protocol

from slidesearch.models.board import Direction


class TraceListener(Protocol):
    def node_discovered(
        self, fingerprint: int, label: str, is_solved: bool, is_root: bool = False
    ) -> None: ...

    def edge_observed(self, source: int, target: int) -> None: ...

    def solution_edge(self, source: int, target: int, direction: Direction) -> None: ...


class NullTrace:
    """Discards every event."""

    def node_discovered(
        self, fingerprint: int, label: str, is_solved: bool, is_root: bool = False
    ) -> None:
        pass

    def edge_observed(self, source: int, target: int) -> None:
        pass

    def solution_edge(self, source: int, target: int, direction: Direction) -> None:
        pass


class RecordingTrace:
    """Keeps every event as a tuple, in emission order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def node_discovered(
        self, fingerprint: int, label: str, is_solved: bool, is_root: bool = False
    ) -> None:
        self.events.append(("node", fingerprint, label, is_solved, is_root))

    def edge_observed(self, source: int, target: int) -> None:
        self.events.append(("edge", source, target))

    def solution_edge(self, source: int, target: int, direction: Direction) -> None:
        self.events.append(("solution", source, target, direction))

    # -- queries --------------------------------------------------------------

    def of_kind(self, kind: str) -> list[tuple]:
        return [e for e in self.events if e[0] == kind]

    @property
    def nodes(self) -> list[tuple]:
        return self.of_kind("node")

    @property
    def edges(self) -> list[tuple]:
        return self.of_kind("edge")

    @property
    def solution(self) -> list[tuple]:
        return self.of_kind("solution")
