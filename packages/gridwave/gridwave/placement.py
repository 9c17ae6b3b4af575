"""PlacementResolver - where a spawned entity appears.

Anchors are searched tier by tier; the first tier with any candidate
wins and one of its candidates is drawn uniformly at random. An anchor
is a candidate only if its whole footprint is in bounds and empty.

1. orthogonally adjacent to a player cell
2. fogged
3. revealed and more than ``SAFE_DISTANCE`` (per-axis) from every player
4. on the outer ring
5. orthogonally adjacent to a resource cell
6. anywhere the footprint fits

If all six are empty the resolver raises ``PlacementFailed``.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from gridwave_grid import CellState, Coord, FogField, Footprint, GridTopology

from gridwave.errors import PlacementFailed

logger = logging.getLogger(__name__)

SAFE_DISTANCE = 4

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Tier(IntEnum):
    PLAYER_ADJACENT = 1
    FOGGED = 2
    REVEALED_FAR = 3
    OUTER_RING = 4
    RESOURCE_ADJACENT = 5
    ANY_EMPTY = 6


@dataclass(frozen=True)
class Placement:
    anchor: Coord
    footprint: Footprint
    tier: Tier


class PlacementResolver:
    """Read-only search over grid occupancy and fog state."""

    def __init__(
        self,
        topology: GridTopology,
        fog: FogField,
        rng: random.Random | None = None,
    ) -> None:
        self._topology = topology
        self._fog = fog
        self._rng = rng

    def find_placement(
        self, kind: CellState, footprint: Footprint = (1, 1)
    ) -> Placement:
        if kind not in (CellState.ENEMY, CellState.RESOURCE):
            raise ValueError(f"Cannot resolve placement for {kind.value}")
        anchors = self._fitting_anchors(footprint)
        if anchors:
            for tier in Tier:
                keep = self._tier_filter(tier)
                candidates = [a for a in anchors if keep(a)]
                if candidates:
                    anchor = (self._rng or random).choice(candidates)
                    logger.debug(
                        "Placed %s %dx%d at %s (tier %d of %d candidates)",
                        kind.value, footprint[0], footprint[1], anchor,
                        tier, len(candidates),
                    )
                    return Placement(anchor, footprint, tier)
        raise PlacementFailed(kind, footprint)

    def candidates(self, tier: Tier, footprint: Footprint = (1, 1)) -> list[Coord]:
        """The candidate set of a single tier, ignoring higher tiers."""
        keep = self._tier_filter(tier)
        return [a for a in self._fitting_anchors(footprint) if keep(a)]

    # --- Internals ---

    def _fitting_anchors(self, footprint: Footprint) -> list[Coord]:
        topo = self._topology
        return [
            (x, y)
            for y in range(topo.height)
            for x in range(topo.width)
            if topo.footprint_fits((x, y), footprint)
        ]

    def _tier_filter(self, tier: Tier) -> Callable[[Coord], bool]:
        topo = self._topology
        fog = self._fog

        if tier is Tier.PLAYER_ADJACENT:
            near = _orthogonal_ring(topo.cells(CellState.PLAYER))
            return lambda a: a in near
        if tier is Tier.FOGGED:
            return lambda a: not fog.is_revealed(*a)
        if tier is Tier.REVEALED_FAR:
            players = topo.cells(CellState.PLAYER)
            return lambda a: fog.is_revealed(*a) and _far_from(a, players)
        if tier is Tier.OUTER_RING:
            last_x, last_y = topo.width - 1, topo.height - 1
            return lambda a: a[0] in (0, last_x) or a[1] in (0, last_y)
        if tier is Tier.RESOURCE_ADJACENT:
            near = _orthogonal_ring(topo.cells(CellState.RESOURCE))
            return lambda a: a in near
        return lambda a: True


def _orthogonal_ring(cells: list[Coord]) -> set[Coord]:
    return {(x + dx, y + dy) for x, y in cells for dx, dy in _ORTHOGONAL}


def _far_from(anchor: Coord, players: list[Coord]) -> bool:
    # Chebyshev distance; with no players every cell counts as far.
    ax, ay = anchor
    return all(max(abs(ax - px), abs(ay - py)) > SAFE_DISTANCE for px, py in players)
