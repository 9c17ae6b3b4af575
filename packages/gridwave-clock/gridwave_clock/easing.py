"""Progress curves for timed tasks, and the interpolation they feed."""
from __future__ import annotations

from typing import Callable


def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    """Quadratic: fast start, settles into the target."""
    return 1 - (1 - t) * (1 - t)


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate from *a* to *b*; *t* is clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return a + (b - a) * t


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_out": ease_out,
    "ease_out_cubic": ease_out_cubic,
    "smoothstep": smoothstep,
}
