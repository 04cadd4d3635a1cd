from typing import Dict, Tuple

from esper import World

from clearcell.components.cell import BoardCell
from clearcell.events.bus import EventBus, EVENT_TICK, EVENT_CELLS_CLEARED
from clearcell.systems.board_ops import get_board, get_score, is_terminal
from clearcell.ui.layout import compute_board_geometry

PADDING = 2

CELL_COLORS: Dict[BoardCell, Tuple[int, int, int]] = {
    BoardCell.RED: (190, 60, 60),
    BoardCell.GREEN: (80, 170, 80),
    BoardCell.BLUE: (70, 90, 190),
    BoardCell.YELLOW: (210, 195, 80),
}
GRID_LINE_COLOR = (45, 45, 45)
TEXT_COLOR = (235, 235, 235)
GAME_OVER_COLOR = (230, 80, 80)


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_CELLS_CLEARED, self.on_cells_cleared)
        self.last_selection = None
        self.flash_remaining = 0.0

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        if self.flash_remaining > 0.0:
            self.flash_remaining = max(0.0, self.flash_remaining - float(dt))

    def on_cells_cleared(self, sender, **kwargs):
        self.last_selection = (kwargs.get('row'), kwargs.get('col'))
        self.flash_remaining = 0.25

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active Arcade window (unit tests) there is nothing to draw on.
        try:
            arcade.get_window()
        except Exception:
            return
        board = get_board(self.world)
        tile_size, board_left, board_bottom = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        board_top = board_bottom + board.rows * tile_size
        board_right = board_left + board.cols * tile_size
        for row in range(board.rows):
            for col in range(board.cols):
                cell = board.at(row, col)
                if cell.is_empty:
                    continue
                left = board_left + col * tile_size + PADDING
                bottom = board_top - (row + 1) * tile_size + PADDING
                size = tile_size - 2 * PADDING
                color = CELL_COLORS[cell]
                arcade.draw_lrbt_rectangle_filled(left, left + size, bottom, bottom + size, color)
        arcade.draw_lrbt_rectangle_outline(board_left, board_right, board_bottom, board_top, GRID_LINE_COLOR, 2)
        if self.flash_remaining > 0.0 and self.last_selection is not None:
            row, col = self.last_selection
            left = board_left + col * tile_size
            bottom = board_top - (row + 1) * tile_size
            arcade.draw_lrbt_rectangle_outline(left, left + tile_size, bottom, bottom + tile_size, TEXT_COLOR, 2)
        score = get_score(self.world).value
        arcade.draw_text(f"Score {score}", board_left, board_top + 16, TEXT_COLOR, 16)
        if is_terminal(board):
            arcade.draw_text(
                "GAME OVER",
                self.window.width / 2,
                self.window.height / 2,
                GAME_OVER_COLOR,
                32,
                anchor_x="center",
            )
