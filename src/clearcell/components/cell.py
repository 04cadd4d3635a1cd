from __future__ import annotations

from enum import Enum
from typing import List


class BoardCell(Enum):
    """Value held by one board position.

    EMPTY is the only value that means "no cell"; every other member is a
    color. The member value doubles as the one-letter symbol used by text
    dumps and test fixtures.
    """

    EMPTY = "*"
    RED = "R"
    GREEN = "G"
    BLUE = "B"
    YELLOW = "Y"

    @property
    def is_empty(self) -> bool:
        return self is BoardCell.EMPTY

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def filled(cls) -> List["BoardCell"]:
        return [cell for cell in cls if cell is not cls.EMPTY]

    @classmethod
    def from_symbol(cls, symbol: str) -> "BoardCell":
        try:
            return cls(symbol.upper())
        except ValueError as exc:
            raise ValueError(f"Unknown cell symbol '{symbol}'") from exc
