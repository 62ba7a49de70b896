"""Destination-aware hex pathfinding with terrain leveling."""

from .board import HexBoard
from .config import BoardSettings, SearchSettings
from .errors import InvalidDestination, InvalidStart, PathfindingError
from .generate import generate_board
from .hexpath import Axial, Facing, Layout
from .ordering import AStarOrdering
from .path import Move, Path
from .search import DestinationPathfinder, expand, find_path
from .trace import Rejection, SearchTrace
from .unit import GroundUnit

__version__ = "0.1.0"

__all__ = [
    "AStarOrdering",
    "Axial",
    "BoardSettings",
    "DestinationPathfinder",
    "Facing",
    "GroundUnit",
    "HexBoard",
    "InvalidDestination",
    "InvalidStart",
    "Layout",
    "Move",
    "Path",
    "PathfindingError",
    "Rejection",
    "SearchSettings",
    "SearchTrace",
    "expand",
    "find_path",
    "generate_board",
]
