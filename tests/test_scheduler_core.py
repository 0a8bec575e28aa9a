from __future__ import annotations

from dataclasses import dataclass

import pytest

from stroop_trainer.scheduler import ClockScheduler


@dataclass
class FakeClock:
    t: float = 0.0

    def now(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += float(dt)


def test_callbacks_fire_only_when_due_and_in_order() -> None:
    clock = FakeClock()
    sched = ClockScheduler(clock)
    fired: list[str] = []

    sched.call_later(1.0, lambda: fired.append("b"))
    sched.call_later(0.5, lambda: fired.append("a"))
    sched.call_at(1.0, lambda: fired.append("c"))

    assert sched.run_due() == 0
    clock.advance(0.5)
    assert sched.run_due() == 1
    clock.advance(0.5)
    assert sched.run_due() == 2

    # Equal due times keep scheduling order.
    assert fired == ["a", "b", "c"]
    assert sched.pending() == 0


def test_cancelled_callback_never_fires() -> None:
    clock = FakeClock()
    sched = ClockScheduler(clock)
    fired: list[int] = []

    handle = sched.call_later(0.5, lambda: fired.append(1))
    handle.cancel()
    clock.advance(1.0)

    assert sched.run_due() == 0
    assert fired == []
    assert handle.cancelled is True
    assert handle.fired is False


def test_rescheduled_callbacks_catch_up_in_one_pump() -> None:
    clock = FakeClock()
    sched = ClockScheduler(clock)
    ticks: list[float] = []

    def tick() -> None:
        ticks.append(clock.now())
        if len(ticks) < 10:
            sched.call_at(float(len(ticks) + 1), tick)

    sched.call_at(1.0, tick)
    clock.advance(3.5)

    assert sched.run_due() == 3
    assert len(ticks) == 3
    assert sched.pending() == 1


def test_negative_delay_is_rejected() -> None:
    sched = ClockScheduler(FakeClock())
    with pytest.raises(ValueError):
        sched.call_later(-0.1, lambda: None)
