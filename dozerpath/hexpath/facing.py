from __future__ import annotations

from enum import IntEnum

from .coords import Axial
from .distance import hex_distance


class Facing(IntEnum):
    """Hex facing (0..5), clockwise from north on a flat-topped board.

    Axial direction vectors (dq, dr):
      N : ( 0, -1)
      NE: ( 1, -1)
      SE: ( 1,  0)
      S : ( 0,  1)
      SW: (-1,  1)
      NW: (-1,  0)
    """

    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5

    def left(self, steps: int = 1) -> Facing:
        """Rotate left (counter-clockwise) by `steps`."""
        return Facing((int(self) - (steps % 6)) % 6)

    def right(self, steps: int = 1) -> Facing:
        """Rotate right (clockwise) by `steps`."""
        return Facing((int(self) + (steps % 6)) % 6)

    def turns_to(self, other: Facing) -> int:
        """Fewest single turns needed to face `other` (0..3)."""
        diff = (int(other) - int(self)) % 6
        return min(diff, 6 - diff)

    @staticmethod
    def from_int(value: int) -> Facing:
        """Explicit constructor for clarity at boundaries (serialization/config)."""
        if value < 0 or value > 5:
            raise ValueError(f"Facing must be in 0..5, got {value}")
        return Facing(value)


FACING_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),   # N
    (1, -1),   # NE
    (1, 0),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
    (-1, 0),   # NW
)


def forward_neighbor(cell: Axial, facing: Facing) -> Axial:
    """Return the hex directly in front of `cell` given `facing`."""
    dq, dr = FACING_OFFSETS[int(facing)]
    return cell.translate(dq, dr)


def neighbors(cell: Axial) -> list[Axial]:
    return [forward_neighbor(cell, facing) for facing in Facing]


def direction_to(origin: Axial, target: Axial) -> Facing:
    """Facing whose forward neighbour gets closest to `target`; lowest index wins ties."""
    return min(Facing, key=lambda f: hex_distance(forward_neighbor(origin, f), target))
