"""
Destination-aware hex pathfinding with leveling as a fallback.

The search is best-first over :class:`~dozerpath.path.Path` values:

- every expansion tries all six facings, each followed by one step forward;
- a per-cell table keeps only the best-ranked path known to reach a cell;
- cells that are illegal to enter as-is may still be entered by paying their
  leveling cost;
- once the destination is reached, its total cost becomes a bound and any
  candidate that is not strictly cheaper is dropped.

The frontier is exhausted before returning.  The ranking used for the
per-cell table includes the heuristic, so the result is a good route rather
than a provably cheapest one.

Usage:
    board = HexBoard(12, 12)
    unit = GroundUnit(board)
    path = find_path(board, unit, Axial(0, 0), Facing.S, Axial(4, 5))
    if path.is_empty:
        ...  # no route
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List

from .config import SearchSettings
from .errors import InvalidDestination, InvalidStart
from .hexpath import Facing
from .interfaces import Cell, GridQuery, MovementProfile
from .ordering import AStarOrdering
from .path import Move, Path
from .trace import Rejection, SearchTrace

logger = logging.getLogger(__name__)

# Turns taken before the single forward step of each child.  Together they
# reach all six facings; the about-face appears once.
CHILD_TURNS: tuple[tuple[Move, ...], ...] = (
    (Move.TURN_LEFT,),
    (Move.TURN_LEFT, Move.TURN_LEFT),
    (),
    (Move.TURN_RIGHT,),
    (Move.TURN_RIGHT, Move.TURN_RIGHT),
    (Move.TURN_RIGHT, Move.TURN_RIGHT, Move.TURN_RIGHT),
)


def expand(parent: Path) -> List[Path]:
    """Return the six turn-then-forward continuations of ``parent``."""
    return [parent.extend(turns).append(Move.FORWARD) for turns in CHILD_TURNS]


class _Search:
    """State of one search invocation; never shared between calls."""

    def __init__(
        self,
        board: GridQuery,
        unit: MovementProfile,
        destination: Cell,
        settings: SearchSettings,
        trace: SearchTrace | None,
    ) -> None:
        self.board = board
        self.unit = unit
        self.destination = destination
        self.settings = settings
        self.trace = trace
        self.ordering = AStarOrdering(board, destination)
        self.table: Dict[Cell, Path] = {}
        self.frontier: List[Path] = []
        self.best: Path | None = None
        self.maximum_cost: float = math.inf

    # --------- Dominance filter ---------

    def admit(self, child: Path) -> bool:
        """Record ``child`` in the table and frontier if it earns a place."""
        reason = self._rejection(child)
        if reason is not None:
            if self.trace is not None:
                self.trace.record_rejection(reason)
            return False

        replaced = self.table.get(child.cell)
        self.table[child.cell] = child
        self.frontier.append(child)
        if self.trace is not None:
            self.trace.record_admission(child, replaced)
        return True

    def _rejection(self, child: Path) -> Rejection | None:
        if not self.board.within_bounds(child.cell):
            return Rejection.OFF_BOARD
        # ``child.parent`` is the path just before the forward step.
        step_from = child.parent
        if step_from is None or child.move is not Move.FORWARD:
            return Rejection.INFEASIBLE
        if not (
            self.unit.is_legal_step(step_from, child.move)
            or (
                self.unit.needs_leveling(child.cell)
                and self.unit.is_legal_once_leveled(step_from, child.move)
            )
        ):
            return Rejection.INFEASIBLE
        if not child.total_cost < self.maximum_cost:
            return Rejection.OVER_BOUND
        recorded = self.table.get(child.cell)
        if recorded is not None and not self.ordering.precedes(child, recorded):
            return Rejection.DOMINATED
        return None

    # --------- Loop ---------

    def run(self, start: Path) -> Path:
        self.table[start.cell] = start
        self.frontier.append(start)
        cap = self.settings.max_expansions
        expansions = 0
        capped = False

        while self.frontier:
            if cap is not None and expansions >= cap:
                logger.warning(
                    "Stopped after %d expansions with %d paths unexplored",
                    expansions,
                    len(self.frontier),
                )
                capped = True
                break

            current = self.frontier.pop(0)
            expansions += 1
            if self.trace is not None:
                self.trace.record_expansion(current)

            for child in expand(current):
                self.admit(child)

            if current.cell == self.destination and (
                self.best is None or self.ordering.precedes(current, self.best)
            ):
                self.best = current
                self.maximum_cost = current.total_cost
                logger.info(
                    "New best route: %d moves, mp=%s leveling=%s",
                    current.step_count,
                    current.mp_used,
                    current.leveling_cost,
                )
                if self.trace is not None:
                    self.trace.record_solution(current)

            self.ordering.sort(self.frontier)

        logger.debug(
            "Search finished after %d expansions, %d cells visited",
            expansions,
            len(self.table),
        )
        if self.trace is not None:
            self.trace.finish(self.table, capped=capped)
        return self.best if self.best is not None else start


class DestinationPathfinder:
    """
    Finds a route for one unit to a destination cell.

    The board and the unit's movement profile are injected; the pathfinder
    keeps no state between calls.
    """

    def __init__(
        self,
        board: GridQuery,
        unit: MovementProfile,
        *,
        settings: SearchSettings | None = None,
    ) -> None:
        self.board = board
        self.unit = unit
        self.settings = settings if settings is not None else SearchSettings()

    def find_path(
        self,
        start: Cell,
        facing: Facing,
        destination: Cell,
        *,
        trace: SearchTrace | None = None,
    ) -> Path:
        """
        Search from ``start``/``facing`` to ``destination``.

        Returns the best route found, or the zero-move path at ``start`` when
        the destination cannot be reached (check ``Path.is_empty``).  Raises
        :class:`InvalidDestination` or :class:`InvalidStart` for off-board
        cells.
        """
        if not self.board.within_bounds(destination):
            raise InvalidDestination(destination)
        if not self.board.within_bounds(start):
            raise InvalidStart(start)

        logger.debug("Searching from %s facing %s to %s", start, facing.name, destination)
        search = _Search(self.board, self.unit, destination, self.settings, trace)
        return search.run(Path.start(self.board, self.unit, start, facing))


def find_path(
    board: GridQuery,
    unit: MovementProfile,
    start: Cell,
    facing: Facing,
    destination: Cell,
    *,
    settings: SearchSettings | None = None,
    trace: SearchTrace | None = None,
) -> Path:
    """Functional form of :meth:`DestinationPathfinder.find_path`."""
    pathfinder = DestinationPathfinder(board, unit, settings=settings)
    return pathfinder.find_path(start, facing, destination, trace=trace)


__all__ = ["CHILD_TURNS", "DestinationPathfinder", "expand", "find_path"]
