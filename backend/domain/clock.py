"""
SimulationClock - a fixed-interval polling gate for simulation ticks.
"""

import time
from typing import Callable

from .constants import TICK_INTERVAL_MS


class SimulationClock:
    """
    Decides whether a tick's worth of simulation should run.

    The surrounding loop polls try_tick() every frame. The gate opens once
    more than interval_ms has passed since the last executed tick; opening it
    resets the timer to "now". Polls that don't open the gate leave the timer
    alone. Nothing here sleeps.

    Attributes:
        interval_ms: tick length in milliseconds
        time_source: callable returning seconds (time.monotonic by default)
        last_tick: time_source() value of the last executed tick
    """

    def __init__(
        self,
        interval_ms: int = TICK_INTERVAL_MS,
        time_source: Callable[[], float] = time.monotonic
    ):
        self.interval_ms = interval_ms
        self.time_source = time_source
        self.last_tick = self.time_source()

    def elapsed_ms(self) -> float:
        return (self.time_source() - self.last_tick) * 1000.0

    def ready(self) -> bool:
        """True when the interval has been exceeded. Does not reset."""
        return self.elapsed_ms() > self.interval_ms

    def try_tick(self) -> bool:
        """Open the gate if ready, resetting the timer. Returns whether it opened."""
        now = self.time_source()
        if (now - self.last_tick) * 1000.0 > self.interval_ms:
            self.last_tick = now
            return True
        return False

    def reset(self):
        self.last_tick = self.time_source()


class ManualClock:
    """
    A time source that only moves when told to.

    Used by the headless runner and tests in place of time.monotonic so
    ticks can be driven without sleeping.
    """

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float):
        self.now += ms / 1000.0
