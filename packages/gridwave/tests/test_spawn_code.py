"""Tests for spawn code parsing."""
from __future__ import annotations

import pytest
from gridwave import InvalidSymbolError, SpawnSymbol, active_duration, parse
from gridwave.errors import GridwaveError


class TestParse:
    def test_symbols_in_order(self) -> None:
        program = parse("10102")
        assert list(program) == [
            SpawnSymbol.ENEMY,
            SpawnSymbol.EMPTY,
            SpawnSymbol.ENEMY,
            SpawnSymbol.EMPTY,
            SpawnSymbol.RESOURCE,
        ]
        assert len(program) == 5
        assert program[4] is SpawnSymbol.RESOURCE

    def test_boss_symbol(self) -> None:
        assert parse("3")[0] is SpawnSymbol.BOSS

    def test_empty_code(self) -> None:
        program = parse("")
        assert len(program) == 0
        assert list(program) == []

    def test_str_gives_back_the_code(self) -> None:
        assert str(parse("1111311113")) == "1111311113"

    def test_count(self) -> None:
        program = parse("110201")
        assert program.count(SpawnSymbol.ENEMY) == 3
        assert program.count(SpawnSymbol.RESOURCE) == 1
        assert program.count(SpawnSymbol.BOSS) == 0

    @pytest.mark.parametrize("code,position,char", [
        ("104", 2, "4"),
        ("x", 0, "x"),
        ("11 1", 2, " "),
        ("1-1", 1, "-"),
    ])
    def test_invalid_symbol(self, code: str, position: int, char: str) -> None:
        with pytest.raises(InvalidSymbolError) as info:
            parse(code)
        assert info.value.position == position
        assert info.value.char == char
        assert info.value.code == code

    def test_invalid_symbol_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("9")
        with pytest.raises(GridwaveError):
            parse("9")


class TestActiveDuration:
    def test_five_slots(self) -> None:
        assert active_duration(parse("10102")) == 17

    def test_single_slot(self) -> None:
        assert active_duration(parse("1")) == 1

    def test_empty_still_takes_the_completing_tick(self) -> None:
        assert active_duration(parse("")) == 1

    def test_custom_interval(self) -> None:
        assert active_duration(parse("111"), interval=2) == 5
