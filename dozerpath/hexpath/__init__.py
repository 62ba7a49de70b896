from .coords import Axial, Layout, Offset, axial_to_offset, offset_to_axial
from .distance import hex_distance
from .facing import FACING_OFFSETS, Facing, direction_to, forward_neighbor, neighbors

__all__ = [
    "Axial",
    "Layout",
    "Offset",
    "axial_to_offset",
    "offset_to_axial",
    "hex_distance",
    "FACING_OFFSETS",
    "Facing",
    "direction_to",
    "forward_neighbor",
    "neighbors",
]
