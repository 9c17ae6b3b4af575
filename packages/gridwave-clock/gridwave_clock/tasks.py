"""TimedTask - a wall-clock task whose progress a render loop samples."""
from __future__ import annotations

from typing import Callable

from gridwave_clock.easing import EASINGS


class TimedTask:
    """Runs for ``duration`` seconds of advanced time, then completes once.

    Nothing drives the task by itself: the owner calls ``advance(dt)``
    from its frame loop and reads ``progress``/``eased`` to animate.
    """

    def __init__(
        self,
        duration: float,
        easing: str = "ease_out",
        on_complete: Callable[[TimedTask], None] | None = None,
    ) -> None:
        if duration < 0:
            raise ValueError("duration must be >= 0")
        if easing not in EASINGS:
            raise ValueError(f"Unknown easing {easing!r}")
        self._duration = duration
        self._easing = easing
        self._elapsed = 0.0
        self._done = False
        self._on_complete = on_complete

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def done(self) -> bool:
        return self._done

    @property
    def progress(self) -> float:
        if self._done or self._duration == 0:
            return 1.0
        return min(self._elapsed / self._duration, 1.0)

    @property
    def eased(self) -> float:
        return EASINGS[self._easing](self.progress)

    def advance(self, dt: float) -> bool:
        """Advance by ``dt`` seconds. Returns True once the task is done."""
        if self._done:
            return True
        self._elapsed += max(dt, 0.0)
        if self._elapsed >= self._duration:
            self.finish()
        return self._done

    def finish(self) -> None:
        if self._done:
            return
        self._elapsed = self._duration
        self._done = True
        if self._on_complete is not None:
            self._on_complete(self)
