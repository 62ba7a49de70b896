"""Optional observer that records what a destination search did.

Pass a :class:`SearchTrace` to :func:`dozerpath.search.find_path` to collect
expansion counts, admissions with the entries they replaced, rejection
reasons and every tightening of the cost bound.  The final per-cell table is
kept as well and can be exported as a ``networkx`` graph.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, TypeAlias

import networkx as nx

from .interfaces import Cell, Cost
from .path import Path

if TYPE_CHECKING:  # pragma: no cover - typing only
    SearchGraph: TypeAlias = nx.DiGraph[Any]
else:  # pragma: no cover - runtime alias without subscripting
    SearchGraph: TypeAlias = nx.DiGraph


class Rejection(str, Enum):
    """Why a candidate child was discarded."""

    OFF_BOARD = "off_board"
    INFEASIBLE = "infeasible"
    OVER_BOUND = "over_bound"
    DOMINATED = "dominated"


@dataclass(frozen=True)
class Admission:
    cell: Cell
    path: Path
    replaced: Path | None


@dataclass
class SearchTrace:
    expansions: int = 0
    admissions: list[Admission] = field(default_factory=list)
    rejections: Counter[Rejection] = field(default_factory=Counter)
    bounds: list[Cost] = field(default_factory=list)
    solutions: list[Path] = field(default_factory=list)
    table: dict[Cell, Path] = field(default_factory=dict)
    capped: bool = False

    def record_expansion(self, path: Path) -> None:
        self.expansions += 1

    def record_admission(self, path: Path, replaced: Path | None) -> None:
        self.admissions.append(Admission(cell=path.cell, path=path, replaced=replaced))

    def record_rejection(self, reason: Rejection) -> None:
        self.rejections[reason] += 1

    def record_solution(self, path: Path) -> None:
        self.solutions.append(path)
        self.bounds.append(path.total_cost)

    def finish(self, table: Mapping[Cell, Path], *, capped: bool = False) -> None:
        self.table = dict(table)
        self.capped = capped

    @property
    def replacements(self) -> list[Admission]:
        return [a for a in self.admissions if a.replaced is not None]

    def to_graph(self) -> SearchGraph:
        """Return the best-known predecessor graph of the final table.

        Each node is a visited cell annotated with the costs of its table
        entry; each edge runs from the cell that entry stepped out of.
        """

        graph: SearchGraph = nx.DiGraph()
        for cell, path in self.table.items():
            graph.add_node(
                cell,
                mp_used=path.mp_used,
                leveling_cost=path.leveling_cost,
                total_cost=path.total_cost,
                facing=path.facing,
            )
        for cell, path in self.table.items():
            previous = path.previous_cell
            if previous is None:
                continue
            graph.add_edge(
                previous,
                cell,
                mp_used=path.mp_used,
                leveling_cost=path.leveling_cost,
            )
        return graph


__all__ = ["Admission", "Rejection", "SearchGraph", "SearchTrace"]
