from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from clearcell.components.cell import BoardCell


@dataclass(slots=True)
class Board:
    """Fixed-size grid of BoardCell values; row 0 is the top row.

    Dimensions never change after construction. Operations that shift rows
    install a rebuilt ``cells`` list instead of resizing.
    """
    rows: int
    cols: int
    cells: List[List[BoardCell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [self.empty_row() for _ in range(self.rows)]
        elif len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise ValueError("Board cells do not match declared dimensions")

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        return cls(rows=rows, cols=cols)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from symbol strings such as ``["RRR", "G*G", "***"]``."""
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        parsed: List[List[BoardCell]] = []
        for text in rows:
            if len(text) != width:
                raise ValueError("All rows must have the same width")
            parsed.append([BoardCell.from_symbol(ch) for ch in text])
        return cls(rows=len(parsed), cols=width, cells=parsed)

    def empty_row(self) -> List[BoardCell]:
        return [BoardCell.EMPTY] * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, row: int, col: int) -> BoardCell:
        return self.cells[row][col]

    def put(self, row: int, col: int, cell: BoardCell) -> None:
        self.cells[row][col] = cell

    @property
    def last_row(self) -> int:
        return self.rows - 1

    def row_is_empty(self, row: int) -> bool:
        return all(cell is BoardCell.EMPTY for cell in self.cells[row])

    def positions(self) -> Iterable[Tuple[int, int]]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def filled_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if not cell.is_empty)

    def to_rows(self) -> List[str]:
        return ["".join(cell.symbol for cell in row) for row in self.cells]

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [list(row) for row in self.cells])

    def snapshot(self) -> Tuple[Tuple[BoardCell, ...], ...]:
        """Immutable copy of the grid for renderers and callers outside the engine."""
        return tuple(tuple(row) for row in self.cells)

    def pretty(self) -> str:
        return "\n".join(" ".join(cell.symbol for cell in row) for row in self.cells)
