"""Shared types for the interval timer."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


TickHandler = Callable[[TickContext], None]
LifecycleHook = Callable[[TickContext], None]
