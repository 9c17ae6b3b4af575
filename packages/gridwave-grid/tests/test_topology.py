"""
Test suite for GridTopology occupancy storage.

Tests cover:
- Constructor and properties
- Bounds and emptiness queries
- Single-cell and footprint placement
- Removal
- Resize rejection and recentring
"""

import pytest
from gridwave_grid import CellState, GridTopology


class TestTopologyConstruction:
    """Test GridTopology initialization and properties."""

    def test_constructor_sets_dimensions(self):
        grid = GridTopology(width=4, height=5)
        assert grid.width == 4
        assert grid.height == 5
        assert grid.size == (4, 5)

    def test_starts_empty(self):
        grid = GridTopology(4, 4)
        assert grid.count(CellState.EMPTY) == 16
        assert grid.cells(CellState.PLAYER) == []

    def test_non_positive_dimensions_raise(self):
        with pytest.raises(ValueError):
            GridTopology(0, 4)
        with pytest.raises(ValueError):
            GridTopology(4, -1)


class TestTopologyQueries:
    """Test bounds checks and out-of-bounds defaults."""

    def test_is_valid_cell(self):
        grid = GridTopology(4, 4)
        assert grid.is_valid_cell(0, 0)
        assert grid.is_valid_cell(3, 3)
        assert not grid.is_valid_cell(4, 0)
        assert not grid.is_valid_cell(0, -1)

    def test_out_of_bounds_is_not_empty(self):
        grid = GridTopology(4, 4)
        assert not grid.is_cell_empty(-1, 0)
        assert not grid.is_cell_empty(4, 4)

    def test_out_of_bounds_state_is_empty(self):
        grid = GridTopology(4, 4)
        assert grid.state_at(10, 10) is CellState.EMPTY
        assert grid.occupant_at(10, 10) is None


class TestTopologyPlacement:
    """Test single-cell and multi-cell placement."""

    def test_place_and_query(self):
        grid = GridTopology(4, 4)
        assert grid.place(1, 2, CellState.ENEMY, occupant="e1")
        assert grid.state_at(1, 2) is CellState.ENEMY
        assert grid.occupant_at(1, 2) == "e1"
        assert not grid.is_cell_empty(1, 2)
        assert grid.cells(CellState.ENEMY) == [(1, 2)]

    def test_place_on_occupied_cell_fails(self):
        grid = GridTopology(4, 4)
        grid.place(1, 1, CellState.PLAYER)
        assert not grid.place(1, 1, CellState.ENEMY)
        assert grid.state_at(1, 1) is CellState.PLAYER

    def test_place_out_of_bounds_fails(self):
        grid = GridTopology(4, 4)
        assert not grid.place(4, 0, CellState.ENEMY)

    def test_place_empty_state_raises(self):
        grid = GridTopology(4, 4)
        with pytest.raises(ValueError):
            grid.place(0, 0, CellState.EMPTY)

    def test_place_footprint_occupies_every_cell(self):
        grid = GridTopology(4, 4)
        assert grid.place_footprint((1, 1), (2, 2), CellState.RESOURCE, occupant="r")
        assert sorted(grid.cells(CellState.RESOURCE)) == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_place_footprint_is_all_or_nothing(self):
        grid = GridTopology(4, 4)
        grid.place(2, 1, CellState.PLAYER)
        assert not grid.place_footprint((1, 1), (2, 1), CellState.RESOURCE)
        assert grid.is_cell_empty(1, 1)

    def test_footprint_off_the_edge_does_not_fit(self):
        grid = GridTopology(4, 4)
        assert grid.footprint_fits((2, 3), (2, 1))
        assert not grid.footprint_fits((3, 3), (2, 1))
        assert not grid.footprint_fits((3, 3), (1, 2))


class TestTopologyRemoval:
    def test_remove_cell(self):
        grid = GridTopology(4, 4)
        grid.place(0, 0, CellState.ENEMY, occupant=7)
        assert grid.remove(0, 0)
        assert grid.is_cell_empty(0, 0)
        assert grid.occupant_at(0, 0) is None

    def test_remove_empty_or_out_of_bounds(self):
        grid = GridTopology(4, 4)
        assert not grid.remove(0, 0)
        assert not grid.remove(9, 9)

    def test_remove_occupant_frees_whole_footprint(self):
        grid = GridTopology(4, 4)
        grid.place_footprint((0, 0), (2, 2), CellState.RESOURCE, occupant="node")
        grid.place(3, 3, CellState.RESOURCE, occupant="other")
        assert grid.remove_occupant("node") == 4
        assert grid.cells(CellState.RESOURCE) == [(3, 3)]

    def test_remove_occupant_none_is_noop(self):
        grid = GridTopology(4, 4)
        grid.place(0, 0, CellState.ENEMY)
        assert grid.remove_occupant(None) == 0
        assert grid.state_at(0, 0) is CellState.ENEMY


class TestTopologyResize:
    def test_resize_recentres_occupancy(self):
        grid = GridTopology(4, 4)
        grid.place(0, 0, CellState.PLAYER, occupant="p")
        grid.place(3, 2, CellState.ENEMY, occupant="e")

        assert grid.resize(6, 6) == (1, 1)
        assert grid.size == (6, 6)
        assert grid.state_at(1, 1) is CellState.PLAYER
        assert grid.occupant_at(1, 1) == "p"
        assert grid.state_at(4, 3) is CellState.ENEMY
        assert grid.count(CellState.EMPTY) == 34

    def test_resize_odd_growth_floors_offset(self):
        grid = GridTopology(10, 10)
        grid.place(0, 0, CellState.ENEMY)
        assert grid.resize(11, 11) == (0, 0)
        assert grid.state_at(0, 0) is CellState.ENEMY

    def test_resize_rejects_not_larger(self):
        grid = GridTopology(4, 4)
        grid.place(1, 1, CellState.ENEMY)
        assert grid.resize(4, 4) is None
        assert grid.resize(3, 6) is None
        assert grid.resize(6, 4) is None
        assert grid.size == (4, 4)
        assert grid.state_at(1, 1) is CellState.ENEMY

    def test_resize_storage_matches_dimensions(self):
        grid = GridTopology(4, 4)
        grid.resize(8, 6)
        assert grid.count(CellState.EMPTY) == 48
        assert grid.is_valid_cell(7, 5)
        assert not grid.is_valid_cell(8, 5)
