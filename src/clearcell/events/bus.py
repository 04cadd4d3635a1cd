from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods alive for systems nobody holds a reference to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)
EVENT_ANIMATION_STEP = "animation_step"            # payload: step=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_CELLS_CLEARED = "cells_cleared"              # payload: row, col, color=BoardCell, cleared=int
EVENT_ROWS_COLLAPSED = "rows_collapsed"            # payload: count=int
EVENT_SELECTION_IGNORED = "selection_ignored"      # payload: row, col, reason=str
EVENT_ROW_INJECTED = "row_injected"                # payload: cells=tuple[BoardCell, ...]


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_GAME_OVER = "game_over"                      # payload: score=int
