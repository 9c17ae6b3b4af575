"""WaveSession - wires the tick source, grid, fog and wave systems together."""
from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from gridwave_clock import IntervalTimer
from gridwave_grid import CellState, FogField, GridTopology
from gridwave_signal import SignalBus, make_flush_handler

from gridwave.config import DEFAULT_WAVES, GameConfig, WaveConfig
from gridwave.director import WaveDirector, WavePhase
from gridwave.expansion import GridExpansion
from gridwave.placement import PlacementResolver
from gridwave.resources import ResourceSpawner
from gridwave.spawner import EntitySpawner

logger = logging.getLogger(__name__)


class WaveSession:
    """One in-memory game session.

    Every collaborator is built here and passed in explicitly. All
    notification buses are flushed at the end of each tick and after
    each ``advance`` call, in this order: director, fog, resources,
    expansion.
    """

    def __init__(
        self,
        spawner: EntitySpawner,
        config: GameConfig | None = None,
        waves: Sequence[WaveConfig] | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or GameConfig()
        width, height = self.config.starting_size

        self.timer = IntervalTimer(self.config.tick_interval, seed=seed)
        # Placement, footprints and resources share the timer's seeded generator.
        rng = rng or self.timer.random
        self.topology = GridTopology(width, height)
        self.fog = FogField(width, height)
        self.resolver = PlacementResolver(self.topology, self.fog, rng)
        self.director = WaveDirector(
            DEFAULT_WAVES if waves is None else waves,
            self.topology, self.fog, self.timer, spawner,
            config=self.config, resolver=self.resolver, rng=rng,
        )
        self.expansion = GridExpansion(self.topology, self.fog, self.timer, self.config)
        self.expansion.watch(self.director)
        self.resources = ResourceSpawner(
            self.topology, self.fog, self.timer, spawner,
            config=self.config, rng=rng,
            is_wave_active=lambda: self.director.phase is WavePhase.ACTIVE,
        )
        self.resources.watch(self.expansion)

        self._flush = make_flush_handler(*self.buses)
        self.timer.subscribe(self._flush)

        self.fog.reveal_radius(width // 2, height // 2, self.config.initial_reveal_radius)
        if self.config.initial_resource:
            self.resources.spawn_initial()
        logger.info(
            "Session ready: %dx%d grid, %d waves, peace %d ticks",
            width, height, len(self.director.waves), self.config.peace_duration,
        )

    @property
    def buses(self) -> list[SignalBus]:
        return [
            self.director.signals,
            self.fog.signals,
            self.resources.signals,
            self.expansion.signals,
        ]

    def place_player(
        self,
        x: int,
        y: int,
        occupant: Any = None,
        reveal_radius: int | None = None,
    ) -> bool:
        """Occupy a cell with a player unit and reveal the fog around it."""
        if not self.topology.place(x, y, CellState.PLAYER, occupant):
            return False
        if reveal_radius is None:
            reveal_radius = self.config.player_reveal_radius
        self.fog.reveal_radius(x, y, reveal_radius)
        return True

    def remove_entity(self, x: int, y: int) -> bool:
        """Free the entity at ``(x, y)``, including its whole footprint."""
        occupant = self.topology.occupant_at(x, y)
        if occupant is not None:
            if self.resources.release(occupant):
                return True
            return self.topology.remove_occupant(occupant) > 0
        return self.topology.remove(x, y)

    def step(self) -> bool:
        return self.timer.step()

    def run(self, n: int) -> int:
        return self.timer.run(n)

    def advance(self, dt: float) -> bool:
        """Drive frame-time work (the expansion task), then flush."""
        finished = self.expansion.advance(dt)
        self._flush(self.timer.context())
        return finished

    def close(self) -> None:
        self.timer.unsubscribe(self._flush)
        self.resources.close()
        self.expansion.close()
        self.director.close()
        self.fog.signals.close()
