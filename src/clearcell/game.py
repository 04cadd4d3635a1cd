"""Library-level facade bundling the world, event bus and board systems.

Callers that do not need the event plumbing can drive a game entirely
through ``ClearCellGame``: construct it, call ``next_animation_step`` on a
timer, ``process_cell`` on selections, and read ``board``/``get_score``.
"""
from __future__ import annotations

from typing import Tuple

from clearcell.components.board import Board
from clearcell.components.cell import BoardCell
from clearcell.constants import DEFAULT_STRATEGY
from clearcell.events.bus import EventBus
from clearcell.generators import CellGenerator, RandomCellGenerator
from clearcell.systems.board_ops import get_board, get_score, is_terminal
from clearcell.systems.clear_cell import ClearCellSystem
from clearcell.systems.injection import InjectionSystem
from clearcell.world import create_world


class ClearCellGame:
    def __init__(
        self,
        rows: int,
        cols: int,
        generator: CellGenerator | None = None,
        strategy: int = DEFAULT_STRATEGY,
        *,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, rows, cols, strategy=strategy)
        self.generator = generator or RandomCellGenerator(getattr(self.world, "random", None))
        self.clear_cell_system = ClearCellSystem(self.world, self.event_bus)
        self.injection_system = InjectionSystem(self.world, self.event_bus, self.generator)

    @property
    def board(self) -> Board:
        """Detached copy of the grid; edits to it do not reach the game."""
        return get_board(self.world).copy()

    def rows_snapshot(self) -> Tuple[Tuple[BoardCell, ...], ...]:
        return get_board(self.world).snapshot()

    def get_score(self) -> int:
        return get_score(self.world).value

    def is_game_over(self) -> bool:
        return is_terminal(get_board(self.world))

    def process_cell(self, row: int, col: int) -> None:
        self.clear_cell_system.process_cell(row, col)

    def next_animation_step(self) -> None:
        self.injection_system.next_animation_step()
