from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from typing import Protocol

from .clock import Clock


class TimerHandle:
    """Handle for one deferred callback."""

    __slots__ = ("when_s", "_callback", "_cancelled", "_fired")

    def __init__(self, when_s: float, callback: Callable[[], None]) -> None:
        self.when_s = float(when_s)
        self._callback = callback
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    def cancel(self) -> None:
        self._cancelled = True

    def _run(self) -> None:
        self._fired = True
        self._callback()


class Scheduler(Protocol):
    def call_at(self, when_s: float, callback: Callable[[], None]) -> TimerHandle: ...
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle: ...
    def run_due(self) -> int: ...


class ClockScheduler:
    """Deferred callbacks pumped from the host loop.

    Nothing runs on its own: the owner calls ``run_due()`` once per frame and
    every callback whose due time has passed runs to completion, in due-time
    order. Callbacks may schedule further callbacks; any that are already due
    run in the same pump, so a stalled frame still catches up.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_at(self, when_s: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(when_s, callback)
        heapq.heappush(self._queue, (handle.when_s, next(self._seq), handle))
        return handle

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        return self.call_at(self._clock.now() + float(delay_s), callback)

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def run_due(self) -> int:
        now = self._clock.now()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle._run()
            fired += 1
        return fired
