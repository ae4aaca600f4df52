"""Exception hierarchy."""

from __future__ import annotations


class SlideSearchError(Exception):
    """Base class for every error raised by this package."""


class InvalidBoardError(SlideSearchError, ValueError):
    """A board description is not a permutation of 0..N²-1 on an N×N grid."""


class SearchInvariantError(SlideSearchError, RuntimeError):
    """The visited table is inconsistent, so the search result cannot be trusted."""
