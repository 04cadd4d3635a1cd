from __future__ import annotations

from typing import List, Tuple

from esper import World

from clearcell.components.board import Board
from clearcell.components.cell import BoardCell
from clearcell.components.game_state import GameState
from clearcell.components.score import Score
from clearcell.errors import InvalidGeneratorValue
from clearcell.generators import CellGenerator

Position = Tuple[int, int]

# (row delta, col delta) for the eight rays scanned from a selected cell.
RAY_DIRECTIONS: Tuple[Position, ...] = (
    (0, 1),    # right
    (0, -1),   # left
    (1, 0),    # down
    (-1, 0),   # up
    (1, 1),    # down-right
    (1, -1),   # down-left
    (-1, 1),   # up-right
    (-1, -1),  # up-left
)


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise RuntimeError("Score component not found")


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState component not found")


def is_terminal(board: Board) -> bool:
    """True when any cell of the bottom row is filled."""
    return any(not cell.is_empty for cell in board.cells[board.last_row])


def advance(board: Board, generator: CellGenerator) -> bool:
    """Push every row down by one and fill row 0 with fresh cells.

    Does nothing on a terminal board. The new top row is drawn in full
    before the board changes, so a failing generator leaves it untouched.
    Returns True when the board moved.
    """
    if is_terminal(board):
        return False
    top_row: List[BoardCell] = []
    for _ in range(board.cols):
        cell = generator.next()
        if not isinstance(cell, BoardCell) or cell.is_empty:
            raise InvalidGeneratorValue(f"Generator produced {cell!r}; expected a filled BoardCell")
        top_row.append(cell)
    # The old last row is dropped; is_terminal guarantees it was empty.
    board.cells = [top_row] + board.cells[:board.last_row]
    return True


def _erase_ray(board: Board, row: int, col: int, d_row: int, d_col: int, color: BoardCell) -> int:
    erased = 0
    r, c = row + d_row, col + d_col
    while board.in_bounds(r, c) and board.at(r, c) is color:
        board.put(r, c, BoardCell.EMPTY)
        erased += 1
        r += d_row
        c += d_col
    return erased


def erase_runs(board: Board, row: int, col: int, color: BoardCell) -> int:
    """Erase same-colored runs along the eight rays leaving (row, col).

    Each ray starts next to the origin and stops at the first cell that
    does not hold ``color`` or at the board edge. Rays compare against the
    original color, so clearing along one ray never affects another. The
    origin itself is left alone. Returns the number of cells erased.
    """
    if color.is_empty:
        return 0
    return sum(_erase_ray(board, row, col, d_row, d_col, color) for d_row, d_col in RAY_DIRECTIONS)


def collapse_empty_rows(board: Board) -> int:
    """Remove fully empty rows that sit above non-empty content.

    Rows above a removed row keep their index, rows below move up by one,
    and an empty row is appended at the bottom. The scan re-checks the same
    index after each removal because a new row now occupies it. Returns the
    number of rows removed.
    """
    removed = 0
    current = 0
    while current < board.last_row:
        if not board.row_is_empty(current):
            current += 1
            continue
        if all(board.row_is_empty(r) for r in range(current, board.rows)):
            break
        board.cells = board.cells[:current] + board.cells[current + 1:] + [board.empty_row()]
        removed += 1
    return removed
