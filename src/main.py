"""Entry point for the Clear Cell puzzle.

Sets up the game world, event bus, systems, and Arcade window.
"""
import argparse
import random

from arcade import Window, run, set_background_color, color
from clearcell.constants import (
    GRID_ROWS, GRID_COLS, STEP_INTERVAL, DEFAULT_STRATEGY,
    WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE,
)
from clearcell.events.bus import EventBus, EVENT_TICK, EVENT_MOUSE_PRESS
from clearcell.game import ClearCellGame
from clearcell.generators import RandomCellGenerator
from clearcell.systems.input import InputSystem
from clearcell.systems.render import RenderSystem
from clearcell.systems.step_timer import StepTimerSystem


class ClearCellWindow(Window):
    def __init__(self, rows: int, cols: int, *, interval: float, strategy: int, seed: int | None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        generator = RandomCellGenerator(random.Random(seed))
        self.game = ClearCellGame(rows, cols, generator, strategy, event_bus=self.event_bus)
        self.world = self.game.world

        self.step_timer_system = StepTimerSystem(self.event_bus, interval=interval)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Clear Cell puzzle')
    parser.add_argument('--rows', type=int, default=GRID_ROWS, help='Board rows')
    parser.add_argument('--cols', type=int, default=GRID_COLS, help='Board columns')
    parser.add_argument('--interval', type=float, default=STEP_INTERVAL, help='Seconds between new rows')
    parser.add_argument('--strategy', type=int, default=DEFAULT_STRATEGY, help='Clearing strategy id')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for new rows')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    ClearCellWindow(args.rows, args.cols, interval=args.interval, strategy=args.strategy, seed=args.seed)
    run()

if __name__ == "__main__":
    main()
