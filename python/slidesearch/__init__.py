"""Greedy best-first search engine for the N-puzzle."""

__version__ = "0.1.0"
