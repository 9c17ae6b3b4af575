"""gridwave-clock - Tick source and timed tasks for gridwave."""
from __future__ import annotations

from gridwave_clock.easing import EASINGS, lerp
from gridwave_clock.tasks import TimedTask
from gridwave_clock.timer import IntervalTimer
from gridwave_clock.types import TickContext, TickHandler

__all__ = ["EASINGS", "IntervalTimer", "TickContext", "TickHandler", "TimedTask", "lerp"]
