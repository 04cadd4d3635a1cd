"""Per-game settings shared by the board systems."""
from dataclasses import dataclass


@dataclass(slots=True)
class GameState:
    """Singleton component holding the clearing strategy and game-over bookkeeping.

    Whether the game is over is always derived from the board; ``game_over_announced``
    only records that the game_over event has already been emitted.
    """
    strategy: int = 1
    steps: int = 0
    game_over_announced: bool = False
