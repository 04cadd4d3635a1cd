from esper import World

from clearcell.events.bus import EventBus, EVENT_ANIMATION_STEP, EVENT_ROW_INJECTED, EVENT_GAME_OVER
from clearcell.generators import CellGenerator
from clearcell.systems.board_ops import advance, get_board, get_game_state, get_score, is_terminal


class InjectionSystem:
    """Feeds a new row of cells in at the top on every animation step."""

    def __init__(self, world: World, event_bus: EventBus, generator: CellGenerator):
        self.world = world
        self.event_bus = event_bus
        self.generator = generator
        self.event_bus.subscribe(EVENT_ANIMATION_STEP, self.on_animation_step)

    def on_animation_step(self, sender, **kwargs):
        self.next_animation_step()

    def next_animation_step(self) -> bool:
        board = get_board(self.world)
        if not advance(board, self.generator):
            return False
        state = get_game_state(self.world)
        state.steps += 1
        self.event_bus.emit(EVENT_ROW_INJECTED, cells=tuple(board.cells[0]))
        if is_terminal(board) and not state.game_over_announced:
            state.game_over_announced = True
            self.event_bus.emit(EVENT_GAME_OVER, score=get_score(self.world).value)
        return True
