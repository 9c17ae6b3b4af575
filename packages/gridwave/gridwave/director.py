"""WaveDirector - the peace/active wave state machine."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Sequence

from gridwave_grid import CellState, FogField, GridTopology, footprint_for_level
from gridwave_signal import SignalBus

from gridwave.config import GameConfig, WaveConfig, WaveOverflow
from gridwave.errors import ConfigError, PlacementFailed
from gridwave.placement import Placement, PlacementResolver
from gridwave.spawn_code import SpawnSymbol

if TYPE_CHECKING:
    from gridwave_clock import IntervalTimer, TickContext

    from gridwave.spawner import EntitySpawner

logger = logging.getLogger(__name__)

WAVE_START = "wave_start"
WAVE_COMPLETE = "wave_complete"
SPAWN_EVENT = "spawn_event"
SEQUENCE_COMPLETE = "sequence_complete"


class WavePhase(Enum):
    PEACE = "peace"
    ACTIVE = "active"


@dataclass
class DirectorState:
    phase: WavePhase = WavePhase.PEACE
    wave_index: int = 0
    spawn_index: int = 0
    ticks_since_event: int = 0
    waves_completed: int = 0
    finished: bool = False


class WaveDirector:
    """Consumes ticks, sequences spawn programs, and requests placements.

    Notifications (published on ``signals``, delivered on flush):

    - ``wave_start(wave_number)``
    - ``spawn_event(symbol, index, wave_number, placement)``; placement is
      None for EMPTY slots and failed placements
    - ``wave_complete(wave_number)``
    - ``sequence_complete(waves_completed)`` (``WaveOverflow.STOP`` only)
    """

    def __init__(
        self,
        waves: Sequence[WaveConfig],
        topology: GridTopology,
        fog: FogField,
        timer: IntervalTimer,
        spawner: EntitySpawner,
        config: GameConfig | None = None,
        resolver: PlacementResolver | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not waves:
            raise ConfigError("WaveDirector needs at least one wave")
        self._waves = list(waves)
        self._topology = topology
        self._fog = fog
        self._timer = timer
        self._spawner = spawner
        self._config = config or GameConfig()
        self._rng = rng
        self._resolver = resolver or PlacementResolver(topology, fog, rng)
        self._resize_guard: Callable[[], bool] = lambda: False
        self.signals = SignalBus(
            "director", (WAVE_START, SPAWN_EVENT, WAVE_COMPLETE, SEQUENCE_COMPLETE)
        )
        self.state = DirectorState()
        timer.subscribe(self.on_tick)

    # --- Queries ---

    @property
    def phase(self) -> WavePhase:
        return self.state.phase

    @property
    def finished(self) -> bool:
        return self.state.finished

    @property
    def waves(self) -> list[WaveConfig]:
        return list(self._waves)

    @property
    def current_wave(self) -> WaveConfig:
        return self._waves[min(self.state.wave_index, len(self._waves) - 1)]

    @property
    def peace_remaining(self) -> int:
        if self.state.phase is not WavePhase.PEACE or self.state.finished:
            return 0
        return max(self._config.peace_duration - self.state.ticks_since_event, 0)

    def set_resize_guard(self, guard: Callable[[], bool]) -> None:
        """Ticks are ignored while *guard* returns True."""
        self._resize_guard = guard

    # --- Tick processing ---

    def on_tick(self, ctx: TickContext) -> None:
        if self._resize_guard():
            logger.debug("Tick %d ignored: grid resize in progress", ctx.tick_number)
            return
        if self.state.finished:
            return
        if self.state.phase is WavePhase.PEACE:
            self._peace_tick(ctx)
        else:
            self._active_tick(ctx)

    def _peace_tick(self, ctx: TickContext) -> None:
        st = self.state
        st.ticks_since_event += 1
        if st.ticks_since_event < self._config.peace_duration:
            return
        wave = self._waves[st.wave_index]
        st.phase = WavePhase.ACTIVE
        st.spawn_index = 0
        # Primed so the first active tick runs slot 0.
        st.ticks_since_event = self._config.spawn_interval_ticks - 1
        logger.info(
            "Tick %d: wave %d started (code %s)",
            ctx.tick_number, wave.wave_number, wave.code,
        )
        self.signals.publish(WAVE_START, wave_number=wave.wave_number)

    def _active_tick(self, ctx: TickContext) -> None:
        st = self.state
        st.ticks_since_event += 1
        if st.ticks_since_event < self._config.spawn_interval_ticks:
            return
        st.ticks_since_event = 0

        wave = self._waves[st.wave_index]
        if st.spawn_index < len(wave.program):
            symbol = wave.program[st.spawn_index]
            placement = self._execute(symbol, wave, ctx)
            self.signals.publish(
                SPAWN_EVENT,
                symbol=symbol,
                index=st.spawn_index,
                wave_number=wave.wave_number,
                placement=placement,
            )
            st.spawn_index += 1

        if st.spawn_index >= len(wave.program):
            self._complete_wave(wave, ctx)

    def _execute(
        self, symbol: SpawnSymbol, wave: WaveConfig, ctx: TickContext
    ) -> Placement | None:
        if symbol is SpawnSymbol.EMPTY:
            return None

        if symbol is SpawnSymbol.RESOURCE:
            kind = CellState.RESOURCE
            level = wave.resource_level
            footprint = footprint_for_level(level, self._rng)
        else:
            kind = CellState.ENEMY
            level = wave.enemy_level
            footprint = (1, 1)

        try:
            placement = self._resolver.find_placement(kind, footprint)
        except PlacementFailed as exc:
            logger.warning(
                "Tick %d: wave %d slot %d skipped: %s",
                ctx.tick_number, wave.wave_number, self.state.spawn_index, exc,
            )
            return None

        anchor = placement.anchor
        if symbol is SpawnSymbol.ENEMY:
            handle = self._spawner.spawn_enemy(anchor, level)
        elif symbol is SpawnSymbol.BOSS:
            handle = self._spawner.spawn_boss(anchor, level)
        else:
            handle = self._spawner.spawn_resource(anchor, level, footprint)
        if not self._topology.place_footprint(anchor, footprint, kind, occupant=handle):
            logger.warning(
                "Tick %d: %s spawned at %s but its cells were taken; occupancy not recorded",
                ctx.tick_number, symbol.name, anchor,
            )
        logger.debug(
            "Tick %d: %s level %d at %s", ctx.tick_number, symbol.name, level, anchor
        )
        return placement

    def _complete_wave(self, wave: WaveConfig, ctx: TickContext) -> None:
        st = self.state
        st.phase = WavePhase.PEACE
        st.ticks_since_event = 0
        st.spawn_index = 0
        st.waves_completed += 1
        st.wave_index += 1
        logger.info("Tick %d: wave %d complete", ctx.tick_number, wave.wave_number)
        self.signals.publish(WAVE_COMPLETE, wave_number=wave.wave_number)

        if st.wave_index < len(self._waves):
            return
        overflow = self._config.wave_overflow
        if overflow is WaveOverflow.LOOP:
            st.wave_index = 0
        elif overflow is WaveOverflow.CLAMP:
            st.wave_index = len(self._waves) - 1
        else:
            st.finished = True
            logger.info("Tick %d: all %d waves complete", ctx.tick_number, st.waves_completed)
            self.signals.publish(SEQUENCE_COMPLETE, waves_completed=st.waves_completed)

    # --- Teardown ---

    def close(self) -> None:
        self._timer.unsubscribe(self.on_tick)
        self.signals.close()
