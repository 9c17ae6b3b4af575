"""ResourceSpawner - periodic resource nodes between waves."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable

from gridwave_grid import (
    CellState,
    Coord,
    FogField,
    Footprint,
    GridTopology,
    footprint_for_level,
)
from gridwave_signal import SignalBus, Subscription

from gridwave.config import GameConfig
from gridwave.expansion import GRID_RESIZED

if TYPE_CHECKING:
    from gridwave_clock import IntervalTimer, TickContext

    from gridwave.expansion import GridExpansion
    from gridwave.spawner import EntitySpawner

logger = logging.getLogger(__name__)

RESOURCE_SPAWNED = "resource_spawned"

INITIAL_SEARCH_RADIUS = 2


@dataclass(frozen=True)
class ResourceNode:
    handle: Any
    level: int
    anchor: Coord
    footprint: Footprint


class ResourceSpawner:
    """Spawns a resource node every ``resource_spawn_interval`` ticks.

    Spawning is skipped while ``is_wave_active()`` is true and while the
    node caps are reached. Levels are rolled from
    ``resource_level_weights``; a capped level falls back to level 1.
    Fogged anchors are preferred over revealed ones by
    ``fogged_spawn_weight`` percent.
    """

    def __init__(
        self,
        topology: GridTopology,
        fog: FogField,
        timer: IntervalTimer,
        spawner: EntitySpawner,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        is_wave_active: Callable[[], bool] | None = None,
    ) -> None:
        self._topology = topology
        self._fog = fog
        self._timer = timer
        self._spawner = spawner
        self._config = config or GameConfig()
        self._rng = rng or random.Random()
        self._is_wave_active = is_wave_active or (lambda: False)
        self._nodes: list[ResourceNode] = []
        self._ticks = 0
        self._subscriptions: list[Subscription] = []
        self.signals = SignalBus("resources", (RESOURCE_SPAWNED,))
        timer.subscribe(self.on_tick)

    @property
    def nodes(self) -> list[ResourceNode]:
        return list(self._nodes)

    def count(self, level: int | None = None) -> int:
        if level is None:
            return len(self._nodes)
        return sum(1 for n in self._nodes if n.level == level)

    def watch(self, expansion: GridExpansion) -> None:
        """Keep tracked anchors in step with grid expansions."""
        self._subscriptions.append(
            expansion.signals.subscribe(GRID_RESIZED, self._on_grid_resized)
        )

    def _on_grid_resized(self, signal_name: str, data: dict[str, Any]) -> None:
        ox, oy = data["offset"]
        self._nodes = [
            replace(n, anchor=(n.anchor[0] + ox, n.anchor[1] + oy)) for n in self._nodes
        ]

    def on_tick(self, ctx: TickContext) -> None:
        interval = self._config.resource_spawn_interval
        if interval <= 0:
            return
        self._ticks += 1
        if self._ticks < interval:
            return
        self._ticks = 0
        if self._is_wave_active():
            logger.debug("Tick %d: resource spawn skipped (wave active)", ctx.tick_number)
            return
        self.attempt_spawn()

    def attempt_spawn(self) -> ResourceNode | None:
        if len(self._nodes) >= self._config.max_resource_nodes:
            logger.debug("Resource cap %d reached", self._config.max_resource_nodes)
            return None

        level = self.roll_level()
        if not self.can_spawn_level(level):
            level = 1

        footprint = footprint_for_level(level, self._rng)
        anchor = self.find_location(footprint)
        if anchor is None:
            logger.info("No room for a level %d resource node", level)
            return None
        return self._spawn(level, anchor, footprint)

    def spawn_initial(self) -> ResourceNode | None:
        """Place a level 1 node on a revealed empty cell near the centre."""
        cx, cy = self._topology.width // 2, self._topology.height // 2
        r = INITIAL_SEARCH_RADIUS
        cells = [
            (x, y)
            for x in range(cx - r, cx + r + 1)
            for y in range(cy - r, cy + r + 1)
            if self._fog.is_revealed(x, y) and self._topology.is_cell_empty(x, y)
        ]
        if not cells:
            logger.warning("No revealed cell near the centre for the initial resource")
            return None
        return self._spawn(1, self._rng.choice(cells), (1, 1))

    def roll_level(self) -> int:
        w1, w2, w3 = self._config.resource_level_weights
        roll = self._rng.uniform(0.0, w1 + w2 + w3)
        if roll < w1:
            return 1
        if roll < w1 + w2:
            return 2
        return 3

    def can_spawn_level(self, level: int) -> bool:
        if level == 2:
            return self.count(2) < self._config.max_level2_nodes
        if level == 3:
            return self.count(3) < self._config.max_level3_nodes
        return True

    def find_location(self, footprint: Footprint) -> Coord | None:
        topo = self._topology
        fogged: list[Coord] = []
        revealed: list[Coord] = []
        for y in range(topo.height):
            for x in range(topo.width):
                if not topo.footprint_fits((x, y), footprint):
                    continue
                if self._fog.is_revealed(x, y):
                    revealed.append((x, y))
                else:
                    fogged.append((x, y))

        weight = self._config.fogged_spawn_weight
        if fogged and revealed:
            pool = fogged if self._rng.uniform(0.0, 100.0) < weight else revealed
        else:
            pool = fogged or revealed
        if not pool:
            return None
        return self._rng.choice(pool)

    def release(self, handle: Any) -> bool:
        """Forget a destroyed node and free its cells."""
        for node in self._nodes:
            if node.handle == handle:
                self._nodes.remove(node)
                self._topology.remove_occupant(handle)
                return True
        return False

    def _spawn(self, level: int, anchor: Coord, footprint: Footprint) -> ResourceNode:
        handle = self._spawner.spawn_resource(anchor, level, footprint)
        if not self._topology.place_footprint(
            anchor, footprint, CellState.RESOURCE, occupant=handle
        ):
            logger.warning(
                "Resource spawned at %s but its cells were taken; occupancy not recorded",
                anchor,
            )
        node = ResourceNode(handle, level, anchor, footprint)
        self._nodes.append(node)
        logger.info(
            "Spawned level %d resource at %s (%dx%d)",
            level, anchor, footprint[0], footprint[1],
        )
        self.signals.publish(
            RESOURCE_SPAWNED, level=level, anchor=anchor, footprint=footprint
        )
        return node

    def close(self) -> None:
        self._timer.unsubscribe(self.on_tick)
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        self.signals.close()
