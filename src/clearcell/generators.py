"""Sources of fresh cells for row injection."""
from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable, List, Protocol, Sequence

from clearcell.components.cell import BoardCell


class CellGenerator(Protocol):
    def next(self) -> BoardCell:
        ...


class RandomCellGenerator:
    """Draws cells uniformly from a palette of filled colors."""

    def __init__(self, rng: random.Random | None = None, palette: Iterable[BoardCell] | None = None):
        self.rng = rng or random.Random()
        self.palette = self._validate_palette(palette if palette is not None else BoardCell.filled())

    @staticmethod
    def _validate_palette(palette: Iterable[BoardCell]) -> List[BoardCell]:
        seen: set[BoardCell] = set()
        filtered: List[BoardCell] = []
        for cell in palette:
            if cell is BoardCell.EMPTY:
                raise ValueError("Palette may not contain the empty cell")
            if cell not in seen:
                filtered.append(cell)
                seen.add(cell)
        if not filtered:
            raise ValueError("Palette must contain at least one color")
        return filtered

    def set_palette(self, palette: Iterable[BoardCell]) -> None:
        self.palette = self._validate_palette(palette)

    def next(self) -> BoardCell:
        return self.rng.choice(self.palette)


class SequenceCellGenerator:
    """Replays a fixed sequence of cells forever. Handy for demos and tests."""

    def __init__(self, cells: Sequence[BoardCell]):
        if not cells:
            raise ValueError("Sequence must contain at least one cell")
        self._cells = cycle(list(cells))

    def next(self) -> BoardCell:
        return next(self._cells)
