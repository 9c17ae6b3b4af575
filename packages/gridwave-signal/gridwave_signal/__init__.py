"""gridwave-signal - In-process notification channels for gridwave."""
from __future__ import annotations

from gridwave_signal.bus import Handler, SignalBus, Subscription
from gridwave_signal.handlers import make_flush_handler

__all__ = ["Handler", "SignalBus", "Subscription", "make_flush_handler"]
