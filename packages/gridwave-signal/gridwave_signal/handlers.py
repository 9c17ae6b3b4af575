"""Tick handler factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from gridwave_signal.bus import SignalBus

if TYPE_CHECKING:
    from gridwave_clock import TickContext


def make_flush_handler(*buses: SignalBus) -> Callable[[TickContext], None]:
    """Return a tick handler that flushes ``buses`` in order.

    Subscribe it after every handler that publishes so notifications
    go out once the tick's state changes are complete.
    """

    def flush_handler(ctx: TickContext) -> None:
        for bus in buses:
            bus.flush()

    return flush_handler
