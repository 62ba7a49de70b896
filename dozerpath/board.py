"""
Rectangular hex board backed by numpy terrain layers.

Cells are axial coordinates; the board itself is a ``width x height`` block of
offset coordinates (flat-topped, even-q columns by default).  Layers:

- ``levels``: ground level of each hex;
- ``feature_heights``: height of whatever stands on the hex (woods, buildings);
- ``terrain_costs``: extra movement points needed to enter;
- ``obstacles``: cost to level the hex, 0 when it is already clear;
- ``impassable``: hexes no unit may enter and nobody can level (water, chasms).

All layers are indexed ``[row, col]``.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from .hexpath import (
    Axial,
    Facing,
    Layout,
    Offset,
    axial_to_offset,
    direction_to,
    forward_neighbor,
    hex_distance,
    offset_to_axial,
)
from .path import Path


class HexBoard:
    """Terrain layers plus the geometry queries the pathfinder consumes."""

    def __init__(self, width: int, height: int, *, layout: Layout = Layout.EVEN_Q) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.layout = layout
        shape = (height, width)
        self.levels = np.zeros(shape, dtype=np.int64)
        self.feature_heights = np.zeros(shape, dtype=np.int64)
        self.terrain_costs = np.zeros(shape, dtype=np.int64)
        self.obstacles = np.zeros(shape, dtype=np.int64)
        self.impassable = np.zeros(shape, dtype=bool)

    # --------- Geometry ---------

    def within_bounds(self, cell: Axial) -> bool:
        o = axial_to_offset(cell, self.layout)
        return 0 <= o.col < self.width and 0 <= o.row < self.height

    def cell_at(self, col: int, row: int) -> Axial:
        return offset_to_axial(Offset(col, row, self.layout))

    def cells(self) -> Iterator[Axial]:
        for row in range(self.height):
            for col in range(self.width):
                yield self.cell_at(col, row)

    def distance(self, a: Axial, b: Axial) -> int:
        return hex_distance(a, b)

    def neighbor(self, cell: Axial, facing: Facing) -> Axial:
        return forward_neighbor(cell, facing)

    def _index(self, cell: Axial) -> Tuple[int, int]:
        o = axial_to_offset(cell, self.layout)
        if not (0 <= o.col < self.width and 0 <= o.row < self.height):
            raise ValueError(f"cell {cell} is outside the board")
        return o.row, o.col

    # --------- Terrain reads ---------

    def level(self, cell: Axial) -> int:
        return int(self.levels[self._index(cell)])

    def feature_height(self, cell: Axial) -> int:
        return int(self.feature_heights[self._index(cell)])

    def terrain_cost(self, cell: Axial) -> int:
        return int(self.terrain_costs[self._index(cell)])

    def obstacle(self, cell: Axial) -> int:
        return int(self.obstacles[self._index(cell)])

    def is_impassable(self, cell: Axial) -> bool:
        return bool(self.impassable[self._index(cell)])

    # --------- Terrain writes ---------

    def set_level(self, cell: Axial, level: int) -> None:
        self.levels[self._index(cell)] = level

    def set_terrain_cost(self, cell: Axial, cost: int) -> None:
        if cost < 0:
            raise ValueError("terrain cost cannot be negative")
        self.terrain_costs[self._index(cell)] = cost

    def set_obstacle(self, cell: Axial, leveling_cost: int, *, height: int = 0) -> None:
        if leveling_cost < 0:
            raise ValueError("leveling cost cannot be negative")
        index = self._index(cell)
        self.obstacles[index] = leveling_cost
        self.feature_heights[index] = height

    def set_impassable(self, cell: Axial, impassable: bool = True) -> None:
        self.impassable[self._index(cell)] = impassable

    def clear(self, cell: Axial) -> None:
        """Remove obstacles and impassable terrain from ``cell``."""
        index = self._index(cell)
        self.obstacles[index] = 0
        self.feature_heights[index] = 0
        self.impassable[index] = False

    # --------- Heuristic terms ---------

    def facing_penalty(self, path: Path, destination: Axial) -> int:
        """Turns needed to point at ``destination``; nothing once there."""
        if path.cell == destination:
            return 0
        return path.facing.turns_to(direction_to(path.cell, destination))

    def level_diff_penalty(self, path: Path, destination: Axial) -> int:
        return abs(self.level(path.cell) - self.level(destination))

    def elevation_diff_penalty(self, path: Path, destination: Axial) -> int:
        return abs(self.feature_height(path.cell) - self.feature_height(destination))


__all__ = ["HexBoard"]
