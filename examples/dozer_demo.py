from dozerpath import (
    Axial,
    DestinationPathfinder,
    Facing,
    GroundUnit,
    HexBoard,
    SearchSettings,
    SearchTrace,
)
from dozerpath.log import setup_logging

board = HexBoard(10, 10)
start = Axial(0, 0)
goal = Axial(5, 2)  # keep within demo bounds

# A wall of rubble across the direct route, with one river hex.
for cell in (Axial(2, 0), Axial(2, 1), Axial(2, 2), Axial(2, 3)):
    board.set_obstacle(cell, 3, height=1)
board.set_impassable(Axial(2, -1))

unit = GroundUnit(board)


if __name__ == "__main__":
    settings = SearchSettings.load()
    setup_logging(settings.log_level)
    trace = SearchTrace()
    path = DestinationPathfinder(board, unit, settings=settings).find_path(
        start, Facing.SE, goal, trace=trace
    )
    if path.is_empty:
        print("no route")
    else:
        print("cells:", path.cells)
        print("moves:", [move.value for move in path.moves])
        print("mp:", path.mp_used, "leveling:", path.leveling_cost)
        print("expansions:", trace.expansions, "bounds:", trace.bounds)
