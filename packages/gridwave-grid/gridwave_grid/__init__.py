"""gridwave-grid - Occupancy grid and fog of war for gridwave."""
from __future__ import annotations

from gridwave_grid.fog import CELL_REVEALED, FogField
from gridwave_grid.footprint import expand_footprint, footprint_for_level
from gridwave_grid.topology import GridTopology
from gridwave_grid.types import CellState, Coord, Footprint, centering_offset

__all__ = [
    "CELL_REVEALED",
    "CellState",
    "Coord",
    "FogField",
    "Footprint",
    "GridTopology",
    "centering_offset",
    "expand_footprint",
    "footprint_for_level",
]
