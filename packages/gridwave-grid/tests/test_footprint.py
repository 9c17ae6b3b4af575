"""Tests for footprint utilities."""
from __future__ import annotations

import random

import pytest
from gridwave_grid import centering_offset, expand_footprint, footprint_for_level


class TestExpandFootprint:
    def test_1x1(self) -> None:
        assert expand_footprint((5, 3), (1, 1)) == [(5, 3)]

    def test_2x2(self) -> None:
        result = expand_footprint((5, 3), (2, 2))
        assert sorted(result) == sorted([(5, 3), (5, 4), (6, 3), (6, 4)])

    def test_2x1(self) -> None:
        assert expand_footprint((0, 0), (2, 1)) == [(0, 0), (1, 0)]

    def test_1x2(self) -> None:
        assert expand_footprint((0, 0), (1, 2)) == [(0, 0), (0, 1)]

    def test_zero_dimension_raises(self) -> None:
        with pytest.raises(ValueError, match=">= 1"):
            expand_footprint((0, 0), (2, 0))


class TestFootprintForLevel:
    def test_level_one_is_single_cell(self) -> None:
        assert footprint_for_level(1) == (1, 1)

    def test_level_three_is_square(self) -> None:
        assert footprint_for_level(3) == (2, 2)

    def test_level_two_picks_an_orientation(self) -> None:
        rng = random.Random(3)
        seen = {footprint_for_level(2, rng) for _ in range(50)}
        assert seen == {(2, 1), (1, 2)}

    def test_unknown_level_falls_back(self) -> None:
        assert footprint_for_level(9) == (1, 1)


def test_centering_offset() -> None:
    assert centering_offset((4, 4), (6, 6)) == (1, 1)
    assert centering_offset((6, 6), (8, 8)) == (1, 1)
    assert centering_offset((10, 10), (11, 11)) == (0, 0)
    assert centering_offset((2, 2), (4, 4)) == (1, 1)
