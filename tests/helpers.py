from __future__ import annotations

from typing import Sequence

from esper import World

from clearcell.components.board import Board
from clearcell.events.bus import EventBus


def install_board(world: World, rows: Sequence[str]) -> Board:
    """Replace the world's board with one parsed from symbol rows (``R``, ``G``, ``B``, ``Y``, ``*``)."""

    board = Board.from_rows(rows)
    entity = next(ent for ent, _ in world.get_component(Board))
    world.add_component(entity, board)
    return board


class EventCapture:
    """Records the payloads emitted for one event name."""

    def __init__(self, bus: EventBus, name: str):
        self.received: list[dict] = []
        bus.subscribe(name, self.on_event)

    def on_event(self, sender, **payload):
        self.received.append(payload)

    def __len__(self):
        return len(self.received)
