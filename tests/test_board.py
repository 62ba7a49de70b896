import pytest

from dozerpath import Axial, Facing, GroundUnit, HexBoard, Layout, Move, Path


def test_board_bounds_follow_offset_layout():
    board = HexBoard(4, 3)
    assert board.within_bounds(Axial(0, 0))
    assert board.within_bounds(board.cell_at(3, 2))
    assert board.within_bounds(Axial(3, -1))
    assert not board.within_bounds(Axial(0, 3))
    assert not board.within_bounds(Axial(-1, 0))
    assert len(list(board.cells())) == 12
    assert all(board.within_bounds(cell) for cell in board.cells())


def test_board_rejects_bad_dimensions_and_off_board_writes():
    with pytest.raises(ValueError):
        HexBoard(0, 3)
    board = HexBoard(3, 3, layout=Layout.ODD_R)
    with pytest.raises(ValueError):
        board.set_level(Axial(5, 5), 1)
    with pytest.raises(ValueError):
        board.set_terrain_cost(Axial(0, 0), -1)
    with pytest.raises(ValueError):
        board.set_obstacle(Axial(0, 0), -2)


def test_clear_removes_obstacles():
    board = HexBoard(3, 3)
    board.set_obstacle(Axial(1, 0), 5, height=2)
    board.set_impassable(Axial(2, 0))
    board.clear(Axial(1, 0))
    board.clear(Axial(2, 0))
    assert board.obstacle(Axial(1, 0)) == 0
    assert board.feature_height(Axial(1, 0)) == 0
    assert not board.is_impassable(Axial(2, 0))


def test_heuristic_terms():
    board = HexBoard(5, 5)
    destination = Axial(0, 3)
    board.set_level(destination, 2)
    board.set_obstacle(destination, 1, height=3)
    unit = GroundUnit(board)

    facing_away = Path.start(board, unit, Axial(0, 0), Facing.N)
    assert board.facing_penalty(facing_away, destination) == 3
    assert board.level_diff_penalty(facing_away, destination) == 2
    assert board.elevation_diff_penalty(facing_away, destination) == 3

    facing_toward = facing_away.extend([Move.TURN_RIGHT] * 3)
    assert board.facing_penalty(facing_toward, destination) == 0

    there = Path.start(board, unit, destination, Facing.N)
    assert board.facing_penalty(there, destination) == 0
    assert board.level_diff_penalty(there, destination) == 0


def test_ground_unit_legality():
    board = HexBoard(1, 5)
    board.set_level(Axial(0, 1), 3)
    board.set_obstacle(Axial(0, 3), 2)
    board.set_impassable(Axial(0, 4))
    unit = GroundUnit(board, max_climb=2)

    at_top = Path.start(board, unit, Axial(0, 0), Facing.S)
    assert not unit.is_legal_step(at_top, Move.FORWARD)
    assert unit.is_legal_step(at_top, Move.TURN_LEFT)

    facing_off = Path.start(board, unit, Axial(0, 0), Facing.N)
    assert not unit.is_legal_step(facing_off, Move.FORWARD)

    before_obstacle = Path.start(board, unit, Axial(0, 2), Facing.S)
    assert not unit.is_legal_step(before_obstacle, Move.FORWARD)
    assert unit.needs_leveling(Axial(0, 3))
    assert unit.leveling_cost(Axial(0, 3)) == 2

    assert not unit.needs_leveling(Axial(0, 4))
    assert not unit.needs_leveling(Axial(0, 2))
    assert not GroundUnit(board, can_level=False).needs_leveling(Axial(0, 3))


def test_ground_unit_validates_costs():
    board = HexBoard(2, 2)
    with pytest.raises(ValueError):
        GroundUnit(board, base_cost=-1)
    with pytest.raises(ValueError):
        GroundUnit(board, max_climb=-1)


def test_leveling_clears_obstacle_but_not_cliff_or_water():
    board = HexBoard(1, 5)
    board.set_obstacle(Axial(0, 1), 2)
    board.set_level(Axial(0, 2), 4)
    board.set_obstacle(Axial(0, 2), 2)
    board.set_impassable(Axial(0, 4))
    unit = GroundUnit(board, max_climb=2)

    into_rubble = Path.start(board, unit, Axial(0, 0), Facing.S)
    assert not unit.is_legal_step(into_rubble, Move.FORWARD)
    assert unit.is_legal_once_leveled(into_rubble, Move.FORWARD)

    up_the_cliff = Path.start(board, unit, Axial(0, 1), Facing.S)
    assert unit.needs_leveling(Axial(0, 2))
    assert not unit.is_legal_once_leveled(up_the_cliff, Move.FORWARD)
    assert up_the_cliff.append(Move.FORWARD).leveling_cost == 0

    into_water = Path.start(board, unit, Axial(0, 3), Facing.S)
    assert not unit.is_legal_once_leveled(into_water, Move.FORWARD)
