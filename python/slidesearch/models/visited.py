"""Visited-table records kept by the search engine."""

from __future__ import annotations

from dataclasses import dataclass

from slidesearch.models.board import Direction


@dataclass(frozen=True)
class Predecessor:
    """The state a board was reached from, and the blank move taken."""

    fingerprint: int
    direction: Direction


@dataclass
class VisitedEntry:
    depth: int
    predecessor: Predecessor | None = None

    @property
    def is_root(self) -> bool:
        return self.predecessor is None
