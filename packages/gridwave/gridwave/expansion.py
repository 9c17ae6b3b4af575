"""GridExpansion - milestone-driven, atomic grid + fog resizes."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gridwave_clock import TimedTask
from gridwave_grid import FogField, GridTopology
from gridwave_signal import SignalBus, Subscription

from gridwave.config import GameConfig
from gridwave.director import WAVE_COMPLETE

if TYPE_CHECKING:
    from gridwave_clock import IntervalTimer

    from gridwave.director import WaveDirector

logger = logging.getLogger(__name__)

GRID_RESIZED = "grid_resized"
EXPANSION_COMPLETE = "expansion_complete"


class GridExpansion:
    """Grows topology and fog together, pausing the timer meanwhile.

    An expansion resizes both grids in one call with a single centring
    offset, pauses the tick source, and starts a ``TimedTask`` whose
    progress the presentation layer samples. The timer resumes only
    when that task completes; an expansion cannot be cancelled.
    """

    def __init__(
        self,
        topology: GridTopology,
        fog: FogField,
        timer: IntervalTimer,
        config: GameConfig | None = None,
    ) -> None:
        self._topology = topology
        self._fog = fog
        self._timer = timer
        self._config = config or GameConfig()
        self._milestones = dict(self._config.milestones)
        self._task: TimedTask | None = None
        self._subscriptions: list[Subscription] = []
        self.signals = SignalBus("expansion", (GRID_RESIZED, EXPANSION_COMPLETE))

    @property
    def in_progress(self) -> bool:
        return self._task is not None

    @property
    def task(self) -> TimedTask | None:
        """The running presentation task, for render loops to sample."""
        return self._task

    @property
    def is_at_max_size(self) -> bool:
        size = self._config.max_size
        return self._topology.width >= size and self._topology.height >= size

    @property
    def milestones(self) -> dict[int, int]:
        return dict(self._milestones)

    def watch(self, director: WaveDirector) -> None:
        """Expand on milestone wave completions and guard the director."""
        self._subscriptions.append(
            director.signals.subscribe(WAVE_COMPLETE, self._on_wave_complete)
        )
        director.set_resize_guard(lambda: self.in_progress)

    def _on_wave_complete(self, signal_name: str, data: dict[str, Any]) -> None:
        target = self._milestones.get(data["wave_number"])
        if target is None or self.is_at_max_size:
            return
        self.expand_to(target, target)

    def expand_after_tutorial(self) -> bool:
        """Grow the tutorial grid to the regular starting size."""
        size = self._config.tutorial_size
        if self._topology.size != (size, size):
            return False
        return self.expand_to(self._config.initial_width, self._config.initial_height)

    def expand_to(self, width: int, height: int) -> bool:
        """Start an expansion. Returns False, changing nothing, when one is
        already running or the target is not strictly larger."""
        if self._task is not None:
            logger.debug("Expansion to %dx%d ignored: already expanding", width, height)
            return False
        old_w, old_h = self._topology.size
        offset = self._topology.resize(width, height)
        if offset is None:
            return False

        self._timer.pause()
        self._fog.resize(width, height, offset)
        self._task = TimedTask(
            self._config.expansion_duration, easing="ease_out", on_complete=self._finish
        )
        logger.info(
            "Expanding grid %dx%d -> %dx%d (offset %s)", old_w, old_h, width, height, offset
        )
        self.signals.publish(
            GRID_RESIZED,
            width=width,
            height=height,
            old_width=old_w,
            old_height=old_h,
            offset=offset,
        )
        if self._config.expansion_duration == 0:
            self._task.finish()
        return True

    def advance(self, dt: float) -> bool:
        """Advance the running task by *dt* seconds. Returns True if an
        expansion finished during this call."""
        if self._task is None:
            return False
        return self._task.advance(dt)

    def _finish(self, task: TimedTask) -> None:
        self._task = None
        width, height = self._topology.size
        self._timer.resume()
        logger.info("Grid expanded to %dx%d", width, height)
        self.signals.publish(EXPANSION_COMPLETE, width=width, height=height)

    def close(self) -> None:
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        self.signals.close()
