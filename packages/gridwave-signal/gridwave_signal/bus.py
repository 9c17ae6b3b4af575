"""In-memory pub/sub channel with per-tick flush semantics."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

Handler = Callable[[str, dict[str, Any]], None]

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``SignalBus.subscribe``; ``cancel`` is idempotent."""

    __slots__ = ("_bus", "signal_name", "handler", "_active")

    def __init__(self, bus: SignalBus, signal_name: str, handler: Handler) -> None:
        self._bus = bus
        self.signal_name = signal_name
        self.handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._bus.unsubscribe(self.signal_name, self.handler)


class SignalBus:
    """Queued notifications owned by one emitting component.

    When *signals* is given the bus only accepts those names, so a typo in
    a subscriber fails at subscribe time instead of silently never firing.
    """

    def __init__(self, name: str = "", signals: Iterable[str] | None = None) -> None:
        self.name = name
        self._declared = frozenset(signals) if signals is not None else None
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    @property
    def signals(self) -> frozenset[str] | None:
        return self._declared

    def _check(self, signal_name: str) -> None:
        if self._declared is not None and signal_name not in self._declared:
            raise ValueError(f"Unknown signal {signal_name!r} on bus {self.name!r}")

    def subscribe(self, signal_name: str, handler: Handler) -> Subscription:
        self._check(signal_name)
        self._subscribers.setdefault(signal_name, []).append(handler)
        return Subscription(self, signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def subscriber_count(self, signal_name: str) -> int:
        return len(self._subscribers.get(signal_name, ()))

    def publish(self, signal_name: str, **data: Any) -> None:
        self._check(signal_name)
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Signals published by handlers land in the next flush.
        snapshot = self._queue
        self._queue = []
        if snapshot:
            logger.debug("Bus %s: delivering %d signal(s)", self.name or "-", len(snapshot))
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()

    def close(self) -> None:
        """Drop queued signals and every subscriber."""
        self._queue.clear()
        self._subscribers.clear()
