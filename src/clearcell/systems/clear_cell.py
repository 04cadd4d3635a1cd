from esper import World

from clearcell.events.bus import (
    EventBus,
    EVENT_TILE_CLICK,
    EVENT_CELLS_CLEARED,
    EVENT_ROWS_COLLAPSED,
    EVENT_SCORE_CHANGED,
    EVENT_SELECTION_IGNORED,
)
from clearcell.errors import InvalidCoordinate
from clearcell.systems.board_ops import get_board, get_game_state, get_score, is_terminal
from clearcell.systems.strategies import StrategyRegistry, default_strategy_registry


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ClearCellSystem:
    """Resolves a player's selection: erase runs, clear the origin, score, collapse."""

    def __init__(self, world: World, event_bus: EventBus, registry: StrategyRegistry | None = None):
        self.world = world
        self.event_bus = event_bus
        self.registry = registry or default_strategy_registry
        # Fail at setup rather than on the first click.
        self.strategy = self.registry.get(get_game_state(world).strategy)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.process_cell(row, col)

    def process_cell(self, row: int, col: int) -> int:
        """Clear from (row, col) and return the score gained.

        Raises InvalidCoordinate for non-int or off-board positions. Once the game is
        over selections are ignored and nothing changes.
        """
        board = get_board(self.world)
        if not (_is_index(row) and _is_index(col)):
            raise InvalidCoordinate(row, col, board.rows, board.cols)
        if not board.in_bounds(row, col):
            raise InvalidCoordinate(row, col, board.rows, board.cols)
        if is_terminal(board):
            self.event_bus.emit(EVENT_SELECTION_IGNORED, row=row, col=col, reason='game_over')
            return 0
        outcome = self.strategy.apply(board, row, col)
        score = get_score(self.world)
        score.value += outcome.cleared
        self.event_bus.emit(EVENT_CELLS_CLEARED, row=row, col=col, color=outcome.color, cleared=outcome.cleared)
        if outcome.collapsed:
            self.event_bus.emit(EVENT_ROWS_COLLAPSED, count=outcome.collapsed)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.value, delta=outcome.cleared)
        return outcome.cleared
