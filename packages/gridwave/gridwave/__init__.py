"""gridwave - Tick-driven wave director with fog-aware spawn placement."""
from __future__ import annotations

from gridwave.config import (
    DEFAULT_WAVES,
    GRID_SIDES,
    GameConfig,
    WaveConfig,
    WaveOverflow,
    load_waves,
)
from gridwave.director import (
    SEQUENCE_COMPLETE,
    SPAWN_EVENT,
    WAVE_COMPLETE,
    WAVE_START,
    DirectorState,
    WaveDirector,
    WavePhase,
)
from gridwave.errors import ConfigError, GridwaveError, InvalidSymbolError, PlacementFailed
from gridwave.expansion import EXPANSION_COMPLETE, GRID_RESIZED, GridExpansion
from gridwave.placement import SAFE_DISTANCE, Placement, PlacementResolver, Tier
from gridwave.resources import RESOURCE_SPAWNED, ResourceNode, ResourceSpawner
from gridwave.session import WaveSession
from gridwave.spawn_code import (
    SPAWN_INTERVAL_TICKS,
    SpawnProgram,
    SpawnSymbol,
    active_duration,
    parse,
)
from gridwave.spawner import EntitySpawner

__all__ = [
    "ConfigError",
    "DEFAULT_WAVES",
    "DirectorState",
    "EXPANSION_COMPLETE",
    "EntitySpawner",
    "GRID_RESIZED",
    "GRID_SIDES",
    "GameConfig",
    "GridExpansion",
    "GridwaveError",
    "InvalidSymbolError",
    "Placement",
    "PlacementFailed",
    "PlacementResolver",
    "RESOURCE_SPAWNED",
    "ResourceNode",
    "ResourceSpawner",
    "SAFE_DISTANCE",
    "SEQUENCE_COMPLETE",
    "SPAWN_EVENT",
    "SPAWN_INTERVAL_TICKS",
    "SpawnProgram",
    "SpawnSymbol",
    "Tier",
    "WAVE_COMPLETE",
    "WAVE_START",
    "WaveConfig",
    "WaveDirector",
    "WaveOverflow",
    "WavePhase",
    "WaveSession",
    "active_duration",
    "load_waves",
    "parse",
]
