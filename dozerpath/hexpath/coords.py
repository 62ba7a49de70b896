from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def translate(self, dq: int, dr: int) -> Axial:
        return Axial(self.q + dq, self.r + dr)


class Layout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int
    row: int
    layout: Layout


def axial_to_offset(a: Axial, layout: Layout) -> Offset:
    q, r = a.q, a.r
    if layout == Layout.EVEN_Q:
        return Offset(q, r + (q + (q & 1)) // 2, layout)
    if layout == Layout.ODD_Q:
        return Offset(q, r + (q - (q & 1)) // 2, layout)
    if layout == Layout.EVEN_R:
        return Offset(q + (r + (r & 1)) // 2, r, layout)
    if layout == Layout.ODD_R:
        return Offset(q + (r - (r & 1)) // 2, r, layout)
    raise ValueError("Unknown layout")


def offset_to_axial(o: Offset) -> Axial:
    col, row = o.col, o.row
    if o.layout == Layout.EVEN_Q:
        return Axial(col, row - (col + (col & 1)) // 2)
    if o.layout == Layout.ODD_Q:
        return Axial(col, row - (col - (col & 1)) // 2)
    if o.layout == Layout.EVEN_R:
        return Axial(col - (row + (row & 1)) // 2, row)
    if o.layout == Layout.ODD_R:
        return Axial(col - (row - (row & 1)) // 2, row)
    raise ValueError("Unknown layout")
