import pytest

from path_engine.app.controllers.grid_board import GridBoard
from path_engine.domain.entities.geography import Cell
from path_engine.domain.errors import UnknownNodeError


def test_defaults_match_canvas_layout():
    board = GridBoard.for_canvas(800, 600)
    assert (board.rows, board.cols) == (20, 26)
    assert board.player == Cell(19, 13)
    assert board.cell_size == pytest.approx(800 / 26)
    assert board.cell_at(0, 0) == Cell(0, 0)
    assert board.cell_at(799, 599) == Cell(19, 25)


def test_click_queues_route_and_walks_it():
    board = GridBoard(move_delay_ms=600)
    res = board.click(Cell(15, 13))
    assert len(res.path) == 5
    assert list(board.route) == [Cell(18, 13), Cell(17, 13), Cell(16, 13), Cell(15, 13)]
    assert board.on_path == set(res.path)

    assert board.step(599) is None
    assert board.step(1) == Cell(18, 13)
    assert Cell(19, 13) not in board.on_path

    for _ in range(3):
        board.step(600)
    assert board.player == Cell(15, 13)
    assert not board.walking
    assert board.step(600) is None


def test_click_on_own_cell_is_trivial_path():
    board = GridBoard(5, 5)
    res = board.click(board.player)
    assert res.path == (Cell(4, 2),)
    assert not board.walking


def test_unreachable_target_gives_empty_route():
    # (0, 0) is walled off by (0, 1) and (1, 0)
    board = GridBoard(3, 3, blocked=[Cell(0, 1), Cell(1, 0)])
    res = board.click(Cell(0, 0))
    assert not res.found
    assert not board.walking
    assert board.on_path == set()


def test_clicking_off_the_board_raises():
    board = GridBoard(3, 3, blocked=[Cell(0, 1)])
    with pytest.raises(UnknownNodeError):
        board.click(Cell(3, 0))
    with pytest.raises(UnknownNodeError):
        board.click(Cell(0, 1))


def test_manual_moves_clamp_and_cancel_route():
    board = GridBoard(3, 3, blocked=[Cell(1, 1)])
    assert board.player == Cell(2, 1)
    board.click(Cell(0, 0))
    assert board.walking
    assert board.move_in_direction("down") == Cell(2, 1)  # bottom edge
    assert board.walking
    assert board.move_in_direction("up") == Cell(2, 1)  # blocked
    assert board.move_in_direction("left") == Cell(2, 0)
    assert not board.walking
    assert board.on_path == set()


def test_bad_board_fails_at_construction():
    with pytest.raises(ValueError):
        GridBoard(3, 3, blocked=[Cell(3, 3)])
    with pytest.raises(ValueError):
        GridBoard(0, 5)
    board = GridBoard(3, 3, blocked=[Cell(0, 0)])
    assert board.snapshot() is board.graph
    assert Cell(0, 0) not in board.graph
