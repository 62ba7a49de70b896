"""Persistent move paths with movement and leveling costs.

A :class:`Path` is an append-only value.  ``append`` never touches the
receiver; it returns a new node that links back to its parent, so the
frontier and the per-cell table can share ancestors safely.

Usage:
    path = Path.start(board, unit, Axial(0, 0), Facing.N)
    path = path.append(Move.TURN_RIGHT).append(Move.FORWARD)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from .hexpath import Facing
from .interfaces import Cell, Cost, GridQuery, MovementProfile


class Move(str, Enum):
    """The closed set of single moves a path is built from."""

    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    FORWARD = "forward"


@dataclass(frozen=True, eq=False)
class Path:
    """A route from a fixed start cell and facing to ``cell``/``facing``.

    Paths compare by identity.  Use :class:`~dozerpath.ordering.AStarOrdering`
    to rank them.
    """

    board: GridQuery = field(repr=False)
    unit: MovementProfile = field(repr=False)
    start_cell: Cell
    start_facing: Facing
    cell: Cell
    facing: Facing
    mp_used: Cost = 0
    leveling_cost: Cost = 0
    hexes_moved: int = 0
    move: Move | None = None
    parent: Path | None = field(default=None, repr=False)
    # Cells this path has already paid to level.
    leveled: frozenset[Any] = field(default=frozenset(), repr=False)

    @classmethod
    def start(
        cls, board: GridQuery, unit: MovementProfile, cell: Cell, facing: Facing
    ) -> Path:
        return cls(
            board=board,
            unit=unit,
            start_cell=cell,
            start_facing=facing,
            cell=cell,
            facing=facing,
        )

    # --------- Costs ---------

    @property
    def total_cost(self) -> Cost:
        return self.mp_used + self.leveling_cost

    @property
    def is_empty(self) -> bool:
        """True for the zero-move path, which callers read as "no route"."""
        return self.parent is None

    # --------- Extension ---------

    def append(self, move: Move) -> Path:
        """Return a new path with ``move`` added; ``self`` is left untouched.

        Turns only change facing and are free.  A forward step into an
        off-board cell is recorded without cost; legality is for the caller
        to decide.
        """
        if move is Move.TURN_LEFT:
            return self._extend(move, facing=self.facing.left())
        if move is Move.TURN_RIGHT:
            return self._extend(move, facing=self.facing.right())

        target = self.board.neighbor(self.cell, self.facing)
        hexes_moved = self.hexes_moved + 1
        if not self.board.within_bounds(target):
            return self._extend(move, cell=target, hexes_moved=hexes_moved)

        mp_used = self.mp_used + self.unit.step_cost(self, move)
        leveling_cost = self.leveling_cost
        leveled = self.leveled
        if (
            target not in leveled
            and not self.unit.is_legal_step(self, move)
            and self.unit.needs_leveling(target)
            and self.unit.is_legal_once_leveled(self, move)
        ):
            leveling_cost += self.unit.leveling_cost(target)
            leveled = leveled | {target}

        return self._extend(
            move,
            cell=target,
            hexes_moved=hexes_moved,
            mp_used=mp_used,
            leveling_cost=leveling_cost,
            leveled=leveled,
        )

    def extend(self, moves: Iterable[Move]) -> Path:
        path = self
        for move in moves:
            path = path.append(move)
        return path

    def _extend(self, move: Move, **changes: Any) -> Path:
        return replace(self, move=move, parent=self, **changes)

    # --------- Replay ---------

    def lineage(self) -> list[Path]:
        """Every node from the start path to ``self``, in order."""
        out: list[Path] = []
        node: Path | None = self
        while node is not None:
            out.append(node)
            node = node.parent
        out.reverse()
        return out

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(node.move for node in self.lineage()[1:] if node.move is not None)

    @property
    def step_count(self) -> int:
        return len(self.lineage()) - 1

    @property
    def cells(self) -> list[Cell]:
        """Cells occupied along the path, starting with ``start_cell``."""
        out = [self.start_cell]
        for node in self.lineage()[1:]:
            if node.move is Move.FORWARD:
                out.append(node.cell)
        return out

    @property
    def previous_cell(self) -> Cell | None:
        """Cell occupied before the last forward move, or None for the start path."""
        cells = self.cells
        return cells[-2] if len(cells) > 1 else None


__all__ = ["Move", "Path"]
