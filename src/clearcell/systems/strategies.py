from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from clearcell.components.board import Board
from clearcell.systems.board_ops import collapse_empty_rows, erase_runs
from clearcell.components.cell import BoardCell


@dataclass(frozen=True, slots=True)
class ClearOutcome:
    """Result of one selection: cells cleared (origin included) and rows collapsed."""

    color: BoardCell
    cleared: int
    collapsed: int


ClearFn = Callable[[Board, int, int], ClearOutcome]


@dataclass(frozen=True, slots=True)
class ClearStrategy:
    strategy_id: int
    name: str
    apply: ClearFn


class StrategyRegistry:
    """In-memory collection of clearing strategies keyed by id."""

    def __init__(self) -> None:
        self._strategies: dict[int, ClearStrategy] = {}

    def register(self, strategy: ClearStrategy) -> None:
        if strategy.strategy_id in self._strategies:
            raise ValueError(f"Strategy {strategy.strategy_id} already registered")
        self._strategies[strategy.strategy_id] = strategy

    def get(self, strategy_id: int) -> ClearStrategy:
        try:
            return self._strategies[strategy_id]
        except KeyError as exc:
            raise ValueError(f"Unknown clearing strategy {strategy_id}") from exc

    def has(self, strategy_id: int) -> bool:
        return strategy_id in self._strategies


def clear_directional_runs(board: Board, row: int, col: int) -> ClearOutcome:
    color = board.at(row, col)
    cleared = erase_runs(board, row, col, color)
    board.put(row, col, BoardCell.EMPTY)
    # The origin always scores, even when it was already empty.
    cleared += 1
    collapsed = collapse_empty_rows(board)
    return ClearOutcome(color=color, cleared=cleared, collapsed=collapsed)


default_strategy_registry = StrategyRegistry()
default_strategy_registry.register(ClearStrategy(1, "directional_runs", clear_directional_runs))
