"""Entry point: ``python -m gridwave run``.

Runs a headless session with a spawner that only logs, placing one
player unit at the centre so the placement tiers have something to
work against.
"""

from __future__ import annotations

import argparse
import itertools
import logging
import random
from typing import Any

from gridwave_grid import Coord, Footprint

from gridwave.config import GameConfig, WaveOverflow
from gridwave.director import SEQUENCE_COMPLETE, WAVE_COMPLETE, WAVE_START
from gridwave.expansion import GRID_RESIZED
from gridwave.log import setup_logging
from gridwave.session import WaveSession

logger = logging.getLogger(__name__)


class LoggingSpawner:
    """EntitySpawner that hands out integer ids and logs each spawn."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)

    def spawn_enemy(self, coord: Coord, level: int) -> Any:
        eid = next(self._ids)
        logger.info("Enemy #%d (level %d) at %s", eid, level, coord)
        return eid

    def spawn_boss(self, coord: Coord, level: int) -> Any:
        eid = next(self._ids)
        logger.info("BOSS #%d (level %d) at %s", eid, level, coord)
        return eid

    def spawn_resource(self, coord: Coord, level: int, footprint: Footprint) -> Any:
        eid = next(self._ids)
        logger.info(
            "Resource #%d (level %d, %dx%d) at %s", eid, level, footprint[0], footprint[1], coord
        )
        return eid


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="gridwave wave director")
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Run a headless session")
    run.add_argument("--ticks", type=int, default=400)
    run.add_argument("--seed", type=int, default=None)
    run.add_argument("--peace-multiplier", type=int, default=5)
    run.add_argument("--tutorial", action="store_true")
    run.add_argument(
        "--overflow", type=str, default="stop", choices=[o.value for o in WaveOverflow]
    )
    run.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    return parser


def _run(args: argparse.Namespace) -> None:
    config = GameConfig(
        peace_period_multiplier=args.peace_multiplier,
        tutorial=args.tutorial,
        wave_overflow=WaveOverflow(args.overflow),
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    rng = random.Random(args.seed) if args.seed is not None else None
    session = WaveSession(LoggingSpawner(), config=config, rng=rng, seed=args.seed)
    announced = {WAVE_START, WAVE_COMPLETE, SEQUENCE_COMPLETE, GRID_RESIZED}
    for bus in session.buses:
        for name in announced & bus.signals:
            bus.subscribe(name, lambda n, d: logger.info("%s %s", n, d))

    cx, cy = session.topology.width // 2, session.topology.height // 2
    session.place_player(cx, cy, occupant="player")
    if config.tutorial:
        session.expansion.expand_after_tutorial()

    ticks = 0
    while ticks < args.ticks and not session.director.finished:
        if session.step():
            ticks += 1
        else:
            # Paused for an expansion: play its animation out instantly.
            session.advance(config.expansion_duration)

    logger.info(
        "Stopped after %d ticks: %d waves complete, grid %dx%d, %.0f%% revealed",
        ticks,
        session.director.state.waves_completed,
        session.topology.width,
        session.topology.height,
        session.fog.reveal_percentage(),
    )
    session.close()


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "run":
        _run(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
