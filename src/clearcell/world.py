import random

from esper import World
from .events.bus import EventBus
from clearcell.components.board import Board
from clearcell.components.score import Score
from clearcell.components.game_state import GameState
from clearcell.constants import GRID_ROWS, GRID_COLS, DEFAULT_STRATEGY


def create_world(
    event_bus: EventBus,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    *,
    strategy: int = DEFAULT_STRATEGY,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding a single game entity with an empty board and zero score."""
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(
        Board.empty(rows, cols),
        Score(),
        GameState(strategy=strategy),
    )
    return world
