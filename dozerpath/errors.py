"""Exceptions raised by the destination pathfinder."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for malformed pathfinding requests."""


class InvalidDestination(PathfindingError, ValueError):
    """The requested destination lies outside the board."""

    def __init__(self, destination: object) -> None:
        super().__init__(f"destination {destination!r} is outside the board")
        self.destination = destination


class InvalidStart(PathfindingError, ValueError):
    """The requested start cell lies outside the board."""

    def __init__(self, start: object) -> None:
        super().__init__(f"start {start!r} is outside the board")
        self.start = start


__all__ = ["InvalidDestination", "InvalidStart", "PathfindingError"]
