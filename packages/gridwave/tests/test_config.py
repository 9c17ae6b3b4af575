"""Tests for wave table loading and GameConfig."""
from __future__ import annotations

import pytest
from gridwave import DEFAULT_WAVES, ConfigError, GameConfig, load_waves


class TestLoadWaves:
    def test_loads_rows(self) -> None:
        waves = load_waves([
            {"wave": 1, "code": "10102"},
            {"wave": 2, "code": "3", "enemy_level": 2, "resource_level": 3},
        ])
        assert [w.wave_number for w in waves] == [1, 2]
        assert waves[0].code == "10102"
        assert waves[0].enemy_level == 1
        assert waves[1].enemy_level == 2
        assert waves[1].resource_level == 3

    def test_bad_code_names_the_wave(self) -> None:
        with pytest.raises(ConfigError, match="Wave 7"):
            load_waves([{"wave": 7, "code": "1x1"}])

    def test_missing_field(self) -> None:
        with pytest.raises(ConfigError):
            load_waves([{"code": "1"}])

    @pytest.mark.parametrize("field,value", [
        ("enemy_level", "high"),
        ("enemy_level", None),
        ("resource_level", None),
        ("resource_level", "2.5"),
    ])
    def test_non_integer_level(self, field: str, value) -> None:
        with pytest.raises(ConfigError, match="Wave 1"):
            load_waves([{"wave": 1, "code": "1", field: value}])

    def test_level_out_of_range(self) -> None:
        with pytest.raises(ConfigError, match="enemy_level"):
            load_waves([{"wave": 1, "code": "1", "enemy_level": 4}])
        with pytest.raises(ConfigError, match="resource_level"):
            load_waves([{"wave": 1, "code": "2", "resource_level": 0}])

    def test_wave_numbers_must_increase(self) -> None:
        with pytest.raises(ConfigError):
            load_waves([{"wave": 2, "code": "1"}, {"wave": 2, "code": "1"}])

    def test_default_table_is_valid(self) -> None:
        assert len(DEFAULT_WAVES) == 15
        assert DEFAULT_WAVES[0].code == "10102"


class TestGameConfig:
    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.tick_interval == 2.0
        assert cfg.peace_duration == 20
        assert cfg.starting_size == (4, 4)
        assert dict(cfg.milestones) == {3: 6, 6: 8, 10: 10, 15: 11}

    def test_is_hashable_and_frozen(self) -> None:
        cfg = GameConfig()
        assert hash(cfg) == hash(GameConfig())
        with pytest.raises(AttributeError):
            cfg.milestones = ()

    def test_peace_duration_scales(self) -> None:
        assert GameConfig(peace_period_multiplier=2).peace_duration == 8
        assert GameConfig(peace_period_multiplier=0).peace_duration == 0

    def test_tutorial_starting_size(self) -> None:
        assert GameConfig(tutorial=True).starting_size == (2, 2)

    @pytest.mark.parametrize("kwargs", [
        {"tick_interval": 0},
        {"peace_period_multiplier": -1},
        {"spawn_interval_ticks": 0},
        {"initial_width": 0},
        {"expansion_duration": -0.1},
        {"fogged_spawn_weight": 100},
    ])
    def test_rejects_bad_values(self, kwargs) -> None:
        with pytest.raises(ConfigError):
            GameConfig(**kwargs)
