"""Footprint utilities: coord math for multi-cell placement."""
from __future__ import annotations

import random

from gridwave_grid.types import Coord, Footprint

# Resource level -> footprint. Level 2 picks an orientation at random.
_LEVEL_FOOTPRINTS: dict[int, tuple[Footprint, ...]] = {
    1: ((1, 1),),
    2: ((2, 1), (1, 2)),
    3: ((2, 2),),
}


def expand_footprint(anchor: Coord, footprint: Footprint) -> list[Coord]:
    """Expand a rectangular footprint from *anchor*.

    Returns every cell in ``[anchor, anchor + footprint)``.

    >>> expand_footprint((5, 3), (2, 2))
    [(5, 3), (5, 4), (6, 3), (6, 4)]
    """
    w, h = footprint
    if w < 1 or h < 1:
        raise ValueError(f"Footprint dimensions must be >= 1, got {footprint}")
    ax, ay = anchor
    return [(ax + dx, ay + dy) for dx in range(w) for dy in range(h)]


def footprint_for_level(level: int, rng: random.Random | None = None) -> Footprint:
    """Footprint occupied by a resource of *level* (unknown levels are 1x1)."""
    options = _LEVEL_FOOTPRINTS.get(level, _LEVEL_FOOTPRINTS[1])
    if len(options) == 1:
        return options[0]
    return (rng or random).choice(options)
