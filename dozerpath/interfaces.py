"""Collaborator protocols consumed by the destination pathfinder.

The search never inspects terrain directly.  Everything it knows about the
board and the moving unit arrives through these two query surfaces, which
keeps the board an injected, read-only dependency rather than global state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Protocol, TypeAlias

from .hexpath import Facing

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .path import Move, Path

Cell: TypeAlias = Hashable
Cost: TypeAlias = int


class GridQuery(Protocol):
    """Board geometry and terrain queries."""

    def distance(self, a: Cell, b: Cell) -> Cost: ...

    def within_bounds(self, cell: Cell) -> bool: ...

    def neighbor(self, cell: Cell, facing: Facing) -> Cell: ...

    def facing_penalty(self, path: Path, destination: Cell) -> Cost: ...

    def level_diff_penalty(self, path: Path, destination: Cell) -> Cost: ...

    def elevation_diff_penalty(self, path: Path, destination: Cell) -> Cost: ...


class MovementProfile(Protocol):
    """Per-unit step legality, step cost and leveling capability."""

    def is_legal_step(self, path: Path, move: Move) -> bool: ...

    def is_legal_once_leveled(self, path: Path, move: Move) -> bool: ...

    def step_cost(self, path: Path, move: Move) -> Cost: ...

    def needs_leveling(self, cell: Cell) -> bool: ...

    def leveling_cost(self, cell: Cell) -> Cost: ...


__all__ = ["Cell", "Cost", "GridQuery", "MovementProfile"]
