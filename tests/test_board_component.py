import pytest

from clearcell.components.board import Board
from clearcell.components.cell import BoardCell
from clearcell.events.bus import EventBus
from clearcell.systems.board_ops import get_board
from clearcell.world import create_world


def test_board_component_exists():
    bus = EventBus(); world = create_world(bus, 6, 7)
    board = get_board(world)
    assert board.rows == 6 and board.cols == 7
    assert board.filled_count() == 0
    assert all(board.row_is_empty(r) for r in range(board.rows))


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Board.empty(0, 3)
    with pytest.raises(ValueError):
        Board.empty(3, -1)


def test_from_rows_parses_symbols():
    board = Board.from_rows(["RG*", "by*"])
    assert board.rows == 2 and board.cols == 3
    assert board.at(0, 1) is BoardCell.GREEN
    assert board.at(1, 0) is BoardCell.BLUE
    assert board.at(1, 1) is BoardCell.YELLOW
    assert board.at(1, 2) is BoardCell.EMPTY
    assert board.to_rows() == ["RG*", "BY*"]


def test_from_rows_rejects_ragged_and_unknown():
    with pytest.raises(ValueError):
        Board.from_rows(["RR", "R"])
    with pytest.raises(ValueError):
        Board.from_rows(["RX"])
    with pytest.raises(ValueError):
        Board.from_rows([])


def test_bounds_and_snapshot():
    board = Board.from_rows(["RG", "**"])
    assert board.in_bounds(0, 0) and board.in_bounds(1, 1)
    assert not board.in_bounds(2, 0)
    assert not board.in_bounds(0, -1)
    snap = board.snapshot()
    board.put(0, 0, BoardCell.EMPTY)
    assert snap[0][0] is BoardCell.RED
    assert board.pretty() == "* G\n* *"


def test_filled_cells_exclude_empty():
    assert BoardCell.EMPTY not in BoardCell.filled()
    assert BoardCell.EMPTY.is_empty
    assert not BoardCell.RED.is_empty
