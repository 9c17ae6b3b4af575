"""IntervalTimer - the tick source: fixed cadence, pausable, subscribable."""

import logging
import os
import random
import time

from gridwave_clock.types import LifecycleHook, TickContext, TickHandler

logger = logging.getLogger(__name__)


class IntervalTimer:
    """Delivers one "interval elapsed" notification per tick.

    No tick is delivered while the timer is paused; ``step`` and ``run``
    return without invoking handlers and ``run_forever`` idles until
    resumed or stopped.
    """

    def __init__(self, interval: float = 2.0, seed: int | None = None) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._tick_number = 0
        self._handlers: list[TickHandler] = []
        self._start_hooks: list[LifecycleHook] = []
        self._stop_hooks: list[LifecycleHook] = []
        self._paused = False
        self._stop_requested = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._rng = random.Random(seed)

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def random(self) -> random.Random:
        return self._rng

    def subscribe(self, handler: TickHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: TickHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def on_start(self, hook: LifecycleHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: LifecycleHook) -> None:
        self._stop_hooks.append(hook)

    def pause(self) -> None:
        if not self._paused:
            logger.debug("Timer paused at tick %d", self._tick_number)
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            logger.debug("Timer resumed at tick %d", self._tick_number)
        self._paused = False

    def stop(self) -> None:
        self._stop_requested = True

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._interval,
            elapsed=self._tick_number * self._interval,
            request_stop=self.stop,
            random=self._rng,
        )

    def _tick(self) -> None:
        self._tick_number += 1
        ctx = self.context()
        # Copy: handlers may unsubscribe themselves mid-tick.
        for handler in list(self._handlers):
            handler(ctx)
            if self._stop_requested:
                break

    def step(self) -> bool:
        """Deliver one tick. Returns False when paused."""
        if self._paused:
            return False
        self._stop_requested = False
        self._tick()
        return True

    def run(self, n: int) -> int:
        """Deliver up to ``n`` ticks; stops early on pause or stop request.

        Returns the number of ticks delivered.
        """
        self._stop_requested = False
        self._fire(self._start_hooks)

        delivered = 0
        for _ in range(n):
            if self._paused:
                break
            self._tick()
            delivered += 1
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)
        return delivered

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        while not self._stop_requested:
            start = time.monotonic()
            if not self._paused:
                self._tick()
                if self._stop_requested:
                    break
            elapsed = time.monotonic() - start
            sleep_time = self._interval - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)

    def _fire(self, hooks: list[LifecycleHook]) -> None:
        ctx = self.context()
        for hook in hooks:
            hook(ctx)

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
