from esper import World

from clearcell.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from clearcell.systems.board_ops import get_board
from clearcell.ui.layout import compute_board_geometry

# arcade.MOUSE_BUTTON_LEFT
LEFT_BUTTON = 1


class InputSystem:
    """Maps left clicks inside the board to tile_click events."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        cell = self.cell_at(x, y)
        if cell is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, row=cell[0], col=cell[1])

    def cell_at(self, x: float, y: float):
        board = get_board(self.world)
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        if x < start_x or x >= start_x + board.cols * tile_size:
            return None
        if y < start_y or y >= start_y + board.rows * tile_size:
            return None
        col = int((x - start_x) // tile_size)
        # Row 0 is drawn at the top, so count rows down from the board's top edge.
        row = board.rows - 1 - int((y - start_y) // tile_size)
        if board.in_bounds(row, col):
            return row, col
        return None
