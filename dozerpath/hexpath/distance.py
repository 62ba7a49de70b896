from __future__ import annotations

from .coords import Axial


def hex_distance(a: Axial, b: Axial) -> int:
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))
