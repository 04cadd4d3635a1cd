import pytest

from clearcell.events.bus import EventBus, EVENT_TICK, EVENT_ANIMATION_STEP
from clearcell.systems.step_timer import StepTimerSystem
from tests.helpers import EventCapture


def drive_ticks(bus, count, dt):
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def test_steps_emitted_at_interval():
    bus = EventBus()
    StepTimerSystem(bus, interval=1.0)
    steps = EventCapture(bus, EVENT_ANIMATION_STEP)
    drive_ticks(bus, 1, 0.5)
    assert len(steps) == 0
    drive_ticks(bus, 1, 0.5)
    assert steps.received == [{"step": 1}]


def test_long_frame_emits_multiple_steps():
    bus = EventBus()
    StepTimerSystem(bus, interval=0.5)
    steps = EventCapture(bus, EVENT_ANIMATION_STEP)
    drive_ticks(bus, 1, 1.25)
    assert [p["step"] for p in steps.received] == [1, 2]
    drive_ticks(bus, 1, 0.25)
    assert len(steps) == 3


def test_pause_and_resume():
    bus = EventBus()
    timer = StepTimerSystem(bus, interval=0.5)
    steps = EventCapture(bus, EVENT_ANIMATION_STEP)
    timer.pause()
    drive_ticks(bus, 4, 0.5)
    assert len(steps) == 0
    timer.resume()
    drive_ticks(bus, 1, 0.5)
    assert len(steps) == 1


def test_interval_adjustable_and_validated():
    bus = EventBus()
    timer = StepTimerSystem(bus, interval=2.0)
    steps = EventCapture(bus, EVENT_ANIMATION_STEP)
    timer.set_interval(0.25)
    assert timer.interval == 0.25
    drive_ticks(bus, 1, 0.5)
    assert len(steps) == 2
    with pytest.raises(ValueError):
        timer.set_interval(0)
    with pytest.raises(ValueError):
        StepTimerSystem(bus, interval=-1)


def test_tick_without_dt_ignored():
    bus = EventBus()
    StepTimerSystem(bus, interval=0.5)
    steps = EventCapture(bus, EVENT_ANIMATION_STEP)
    bus.emit(EVENT_TICK)
    bus.emit(EVENT_TICK, dt="soon")
    assert len(steps) == 0
