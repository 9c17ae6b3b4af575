"""Wave and game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from gridwave.errors import ConfigError, InvalidSymbolError
from gridwave.spawn_code import SPAWN_INTERVAL_TICKS, SpawnProgram, parse

GRID_SIDES = 4


class WaveOverflow(Enum):
    """What the director does after the last configured wave."""

    STOP = "stop"      # publish sequence_complete and go idle
    LOOP = "loop"      # start again from the first wave
    CLAMP = "clamp"    # repeat the last wave forever


@dataclass(frozen=True)
class WaveConfig:
    wave_number: int
    program: SpawnProgram
    enemy_level: int = 1
    resource_level: int = 1

    @property
    def code(self) -> str:
        return str(self.program)


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one session."""

    # Timing
    tick_interval: float = 2.0             # seconds per tick
    peace_period_multiplier: int = 5
    spawn_interval_ticks: int = SPAWN_INTERVAL_TICKS
    grid_sides: int = GRID_SIDES
    wave_overflow: WaveOverflow = WaveOverflow.STOP

    # Grid
    tutorial: bool = False
    tutorial_size: int = 2
    initial_width: int = 4
    initial_height: int = 4
    max_size: int = 11
    # (wave_number, grid_size) pairs
    milestones: tuple[tuple[int, int], ...] = ((3, 6), (6, 8), (10, 10), (15, 11))
    expansion_duration: float = 0.8        # seconds of presentation animation

    # Fog
    initial_reveal_radius: int = 2
    player_reveal_radius: int = 1

    # Resource spawner
    resource_spawn_interval: int = 10      # 0 disables periodic spawns
    initial_resource: bool = True
    max_resource_nodes: int = 5
    max_level2_nodes: int = 2
    max_level3_nodes: int = 1
    resource_level_weights: tuple[float, float, float] = (60.0, 35.0, 5.0)
    fogged_spawn_weight: float = 70.0      # percent preference for fogged cells

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tick_interval <= 0:
            raise ConfigError("tick_interval must be positive")
        if self.peace_period_multiplier < 0:
            raise ConfigError("peace_period_multiplier must be >= 0")
        if self.spawn_interval_ticks < 1:
            raise ConfigError("spawn_interval_ticks must be >= 1")
        if self.initial_width < 1 or self.initial_height < 1 or self.tutorial_size < 1:
            raise ConfigError("grid sizes must be positive")
        if self.expansion_duration < 0:
            raise ConfigError("expansion_duration must be >= 0")
        if not 0 <= self.fogged_spawn_weight < 100:
            raise ConfigError("fogged_spawn_weight must be in [0, 100)")

    @property
    def peace_duration(self) -> int:
        return self.peace_period_multiplier * self.grid_sides

    @property
    def starting_size(self) -> tuple[int, int]:
        if self.tutorial:
            return (self.tutorial_size, self.tutorial_size)
        return (self.initial_width, self.initial_height)


def load_waves(rows: Iterable[Mapping[str, Any]]) -> list[WaveConfig]:
    """Build the wave table from plain mappings.

    Each row needs ``wave`` and ``code``; ``enemy_level`` and
    ``resource_level`` default to 1. Malformed spawn codes are rejected
    here, never at tick time.
    """
    waves: list[WaveConfig] = []
    for row in rows:
        try:
            number = int(row["wave"])
            code = str(row["code"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"Malformed wave row {dict(row)!r}") from exc

        try:
            program = parse(code)
        except InvalidSymbolError as exc:
            raise ConfigError(f"Wave {number}: {exc}") from exc

        try:
            enemy_level = int(row.get("enemy_level", 1))
            resource_level = int(row.get("resource_level", 1))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Wave {number}: levels must be integers") from exc
        for name, level in (("enemy_level", enemy_level), ("resource_level", resource_level)):
            if not 1 <= level <= 3:
                raise ConfigError(f"Wave {number}: {name} must be 1..3, got {level}")

        if waves and number <= waves[-1].wave_number:
            raise ConfigError(
                f"Wave numbers must increase: {number} after {waves[-1].wave_number}"
            )
        waves.append(WaveConfig(number, program, enemy_level, resource_level))
    return waves


DEFAULT_WAVES: list[WaveConfig] = load_waves([
    {"wave": 1, "code": "10102"},
    {"wave": 2, "code": "1010101"},
    {"wave": 3, "code": "110201"},
    {"wave": 4, "code": "1101102", "resource_level": 2},
    {"wave": 5, "code": "11011011"},
    {"wave": 6, "code": "1110201", "enemy_level": 2},
    {"wave": 7, "code": "11101102", "enemy_level": 2, "resource_level": 2},
    {"wave": 8, "code": "111011101", "enemy_level": 2},
    {"wave": 9, "code": "1111021", "enemy_level": 2},
    {"wave": 10, "code": "11113", "enemy_level": 2, "resource_level": 3},
    {"wave": 11, "code": "1111011112", "enemy_level": 3},
    {"wave": 12, "code": "11111021", "enemy_level": 3, "resource_level": 2},
    {"wave": 13, "code": "111111011", "enemy_level": 3},
    {"wave": 14, "code": "1111112111", "enemy_level": 3, "resource_level": 3},
    {"wave": 15, "code": "1111311113", "enemy_level": 3},
])
