from dozerpath import Axial, Facing, GroundUnit, HexBoard, Move, Path


def _corridor(length: int = 5) -> HexBoard:
    # One column wide: cells Axial(0, r) for r in range(length), joined N-S.
    return HexBoard(1, length)


def test_append_leaves_parent_untouched():
    board = HexBoard(4, 4)
    unit = GroundUnit(board)
    start = Path.start(board, unit, Axial(0, 0), Facing.S)

    turned = start.append(Move.TURN_LEFT)
    moved = turned.append(Move.FORWARD)

    assert start.step_count == 0
    assert start.is_empty
    assert start.facing is Facing.S
    assert turned.facing is Facing.SE
    assert turned.cell == Axial(0, 0)
    assert turned.total_cost == 0
    assert moved.cell == Axial(1, 0)
    assert moved.moves == (Move.TURN_LEFT, Move.FORWARD)
    assert moved.hexes_moved == 1
    assert moved.mp_used == 1
    assert moved.parent is turned


def test_forward_cost_includes_terrain_and_climb():
    board = _corridor()
    board.set_terrain_cost(Axial(0, 1), 2)
    board.set_level(Axial(0, 1), 1)
    unit = GroundUnit(board, climb_cost=1)

    path = Path.start(board, unit, Axial(0, 0), Facing.S).append(Move.FORWARD)

    assert path.mp_used == 1 + 2 + 1
    assert path.leveling_cost == 0


def test_descending_is_not_charged_as_climb():
    board = _corridor()
    board.set_level(Axial(0, 0), 2)
    unit = GroundUnit(board)

    path = Path.start(board, unit, Axial(0, 0), Facing.S).append(Move.FORWARD)

    assert path.mp_used == 1


def test_leveling_is_charged_once_per_cell():
    board = _corridor()
    board.set_obstacle(Axial(0, 2), 3)
    unit = GroundUnit(board)

    path = Path.start(board, unit, Axial(0, 1), Facing.S).append(Move.FORWARD)
    assert path.leveling_cost == 3

    path = path.append(Move.FORWARD)
    path = path.extend([Move.TURN_RIGHT] * 3).append(Move.FORWARD)

    assert path.cell == Axial(0, 2)
    assert path.leveling_cost == 3
    assert path.mp_used == 3
    assert path.total_cost == 6
    assert path.cells == [Axial(0, 1), Axial(0, 2), Axial(0, 3), Axial(0, 2)]
    assert path.previous_cell == Axial(0, 3)


def test_unlevelable_obstacle_adds_no_leveling_cost():
    board = _corridor()
    board.set_obstacle(Axial(0, 1), 3)
    unit = GroundUnit(board, can_level=False)

    path = Path.start(board, unit, Axial(0, 0), Facing.S).append(Move.FORWARD)

    assert path.leveling_cost == 0


def test_forward_off_board_is_free():
    board = _corridor()
    unit = GroundUnit(board)

    path = Path.start(board, unit, Axial(0, 0), Facing.N).append(Move.FORWARD)

    assert path.cell == Axial(0, -1)
    assert not board.within_bounds(path.cell)
    assert path.total_cost == 0
    assert path.hexes_moved == 1


def test_start_path_has_no_previous_cell():
    board = _corridor()
    path = Path.start(board, GroundUnit(board), Axial(0, 0), Facing.S)
    assert path.previous_cell is None
    assert path.cells == [Axial(0, 0)]
    assert path.moves == ()
