from __future__ import annotations

from typing import Any

from clearcell.constants import STEP_INTERVAL
from clearcell.events.bus import EventBus, EVENT_TICK, EVENT_ANIMATION_STEP


class StepTimerSystem:
    """Turns frame ticks into animation steps at an adjustable cadence."""

    def __init__(self, event_bus: EventBus, *, interval: float = STEP_INTERVAL) -> None:
        self.event_bus = event_bus
        self._interval = self._validate(interval)
        self._elapsed = 0.0
        self._steps = 0
        self.paused = False
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @staticmethod
    def _validate(interval: float) -> float:
        value = float(interval)
        if value <= 0.0:
            raise ValueError(f"Step interval must be positive, got {interval}")
        return value

    @property
    def interval(self) -> float:
        return self._interval

    def set_interval(self, interval: float) -> None:
        self._interval = self._validate(interval)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def on_tick(self, sender: Any, **payload: Any) -> None:
        if self.paused:
            return
        dt = payload.get('dt')
        if dt is None:
            return
        try:
            self._elapsed += float(dt)
        except (TypeError, ValueError):
            return
        # A long frame may owe several steps.
        while self._elapsed >= self._interval:
            self._elapsed -= self._interval
            self._steps += 1
            self.event_bus.emit(EVENT_ANIMATION_STEP, step=self._steps)
