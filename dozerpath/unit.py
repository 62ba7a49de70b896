"""Movement profile for a ground unit that can level obstacles."""

from __future__ import annotations

from dataclasses import dataclass

from .board import HexBoard
from .hexpath import Axial
from .path import Move, Path


@dataclass(frozen=True)
class GroundUnit:
    """
    Walks hex to hex, climbing at most ``max_climb`` levels per step.

    Entering a hex costs ``base_cost`` plus the hex's terrain cost plus
    ``climb_cost`` for every level climbed.  Turning is free.  Hexes holding
    an obstacle are illegal to enter as-is; when ``can_level`` is set they can
    be leveled for the obstacle's cost instead, as long as the step would be
    legal once the obstacle is gone.
    """

    board: HexBoard
    base_cost: int = 1
    climb_cost: int = 1
    max_climb: int = 2
    can_level: bool = True

    def __post_init__(self) -> None:
        if self.base_cost < 0 or self.climb_cost < 0:
            raise ValueError("step costs cannot be negative")
        if self.max_climb < 0:
            raise ValueError("max_climb cannot be negative")

    def _target(self, path: Path) -> Axial:
        return self.board.neighbor(path.cell, path.facing)

    def is_legal_step(self, path: Path, move: Move) -> bool:
        return self._can_enter(path, move, cleared=False)

    def is_legal_once_leveled(self, path: Path, move: Move) -> bool:
        """Legality of the step with the target's obstacle cleared.

        Leveling removes the obstacle only; impassable terrain and the climb
        limit still apply.
        """
        return self._can_enter(path, move, cleared=True)

    def _can_enter(self, path: Path, move: Move, *, cleared: bool) -> bool:
        if move is not Move.FORWARD:
            return True
        target = self._target(path)
        if not self.board.within_bounds(target):
            return False
        if self.board.is_impassable(target):
            return False
        if not cleared and self.board.obstacle(target) > 0:
            return False
        climb = self.board.level(target) - self.board.level(path.cell)
        return abs(climb) <= self.max_climb

    def step_cost(self, path: Path, move: Move) -> int:
        if move is not Move.FORWARD:
            return 0
        target = self._target(path)
        climb = max(0, self.board.level(target) - self.board.level(path.cell))
        return self.base_cost + self.board.terrain_cost(target) + self.climb_cost * climb

    def needs_leveling(self, cell: Axial) -> bool:
        return (
            self.can_level
            and not self.board.is_impassable(cell)
            and self.board.obstacle(cell) > 0
        )

    def leveling_cost(self, cell: Axial) -> int:
        return self.board.obstacle(cell)


__all__ = ["GroundUnit"]
