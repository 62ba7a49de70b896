"""Frontier ordering for the destination pathfinder.

The same order ranks the frontier and decides whether a new path to a cell
beats the recorded one.  Because the key carries the heuristic, a path that
is cheaper so far but sits worse against the destination can be evicted by a
dearer one; the search is therefore not guaranteed to return the cheapest
route.
"""

from __future__ import annotations

from typing import Tuple

from .interfaces import Cell, Cost, GridQuery
from .path import Path

OrderKey = Tuple[Cost, int]


class AStarOrdering:
    """Ranks paths by ``total cost + heuristic``, then by hexes moved."""

    def __init__(self, board: GridQuery, destination: Cell) -> None:
        self.board = board
        self.destination = destination

    def heuristic(self, path: Path) -> Cost:
        d = self.destination
        return (
            self.board.distance(path.cell, d)
            + self.board.facing_penalty(path, d)
            + self.board.level_diff_penalty(path, d)
            + self.board.elevation_diff_penalty(path, d)
        )

    def score(self, path: Path) -> Cost:
        return self.key(path)[0]

    def key(self, path: Path) -> OrderKey:
        return (path.total_cost + self.heuristic(path), path.hexes_moved)

    def compare(self, first: Path, second: Path) -> Cost:
        """Negative if ``first`` ranks ahead of ``second``, zero on a tie."""
        (f1, hexes1), (f2, hexes2) = self.key(first), self.key(second)
        dd = f1 - f2
        if dd != 0:
            return dd
        return hexes1 - hexes2

    def precedes(self, first: Path, second: Path) -> bool:
        return self.compare(first, second) < 0

    def sort(self, frontier: list[Path]) -> None:
        """Sort ``frontier`` in place, best first; equal keys keep their order."""
        frontier.sort(key=self.key)


__all__ = ["AStarOrdering", "OrderKey"]
