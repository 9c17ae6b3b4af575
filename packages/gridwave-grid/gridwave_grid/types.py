"""Shared types for gridwave-grid."""
from __future__ import annotations

from enum import Enum

Coord = tuple[int, int]
Footprint = tuple[int, int]


class CellState(Enum):
    EMPTY = "empty"
    PLAYER = "player"
    ENEMY = "enemy"
    RESOURCE = "resource"


def centering_offset(old: tuple[int, int], new: tuple[int, int]) -> Coord:
    """Per-axis offset that centres an ``old``-sized grid inside ``new``.

    >>> centering_offset((4, 4), (6, 6))
    (1, 1)
    """
    return ((new[0] - old[0]) // 2, (new[1] - old[1]) // 2)
