"""Integration tests: a full WaveSession driven by its timer."""
from __future__ import annotations

import logging
import random

import pytest
from gridwave import (
    EXPANSION_COMPLETE,
    GRID_RESIZED,
    WAVE_START,
    GameConfig,
    WaveSession,
    load_waves,
)
from gridwave.__main__ import main
from gridwave_grid import CellState

QUIET = dict(initial_resource=False, resource_spawn_interval=0)


def _session(spawner, waves=None, **overrides) -> WaveSession:
    return WaveSession(
        spawner, config=GameConfig(**overrides), waves=waves,
        rng=random.Random(5), seed=5,
    )


class TestSetup:
    def test_initial_state(self, spawner) -> None:
        session = _session(spawner)
        assert session.topology.size == (4, 4)
        assert session.fog.reveal_percentage() == 100.0
        assert session.resources.count() == 1
        assert spawner.kinds() == ["resource"]

    def test_tutorial_starts_small(self, spawner) -> None:
        session = _session(spawner, tutorial=True, **QUIET)
        assert session.topology.size == (2, 2)
        assert session.expansion.expand_after_tutorial()
        assert session.topology.size == (4, 4)

    def test_place_player_reveals(self, spawner) -> None:
        session = _session(spawner, initial_reveal_radius=0, **QUIET)
        assert session.fog.revealed_cells() == [(2, 2)]
        assert session.place_player(0, 0, occupant="hero")
        assert session.topology.occupant_at(0, 0) == "hero"
        assert len(session.fog.revealed_cells()) == 5
        assert not session.place_player(0, 0)


class TestWaves:
    def test_first_wave(self, spawner) -> None:
        session = _session(spawner, **QUIET)
        session.place_player(2, 2)
        started = []
        session.director.signals.subscribe(
            WAVE_START, lambda n, d: started.append(session.timer.tick_number)
        )
        assert session.run(37) == 37
        assert started == [20]
        assert spawner.kinds() == ["enemy", "enemy", "resource"]
        assert session.director.state.waves_completed == 1

    def test_milestone_expansion_pauses_ticks(self, spawner) -> None:
        waves = load_waves([{"wave": n, "code": "1"} for n in (1, 2, 3)])
        session = _session(spawner, waves, peace_period_multiplier=1, **QUIET)
        session.place_player(2, 2, occupant="hero")
        received = []
        for name in (GRID_RESIZED, EXPANSION_COMPLETE):
            session.expansion.signals.subscribe(name, lambda n, d: received.append(n))

        assert session.run(20) == 15
        assert session.timer.paused
        assert session.topology.size == (6, 6)
        assert session.fog.size == (6, 6)
        assert session.topology.occupant_at(3, 3) == "hero"
        assert received == [GRID_RESIZED]
        assert not session.step()

        assert session.advance(0.8)
        assert not session.timer.paused
        assert received == [GRID_RESIZED, EXPANSION_COMPLETE]
        assert session.step()

    def test_remove_entity(self, spawner) -> None:
        session = _session(spawner, resource_spawn_interval=0)
        node = session.resources.nodes[0]
        assert session.remove_entity(*node.anchor)
        assert session.resources.count() == 0
        assert session.topology.count(CellState.RESOURCE) == 0
        assert not session.remove_entity(*node.anchor)

    def test_seed_reproduces_spawns(self, make_spawner) -> None:
        config = GameConfig(initial_width=10, initial_height=10)
        runs = []
        for _ in range(3):
            spawner = make_spawner()
            WaveSession(spawner, config=config, seed=1).run(120)
            runs.append(spawner.calls)
        assert runs[0]
        assert runs[0] == runs[1] == runs[2]

    def test_close_detaches_everything(self, spawner) -> None:
        session = _session(spawner, **QUIET)
        session.close()
        session.run(60)
        assert spawner.calls == []


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCli:
    def test_run_logs_waves(self, capsys, restore_logging) -> None:
        main(["run", "--ticks", "40", "--seed", "1"])
        out = capsys.readouterr().out
        assert "wave 1 started" in out
        assert "Stopped after 40 ticks" in out

    def test_no_command_prints_help(self, capsys) -> None:
        main([])
        assert "usage" in capsys.readouterr().out
