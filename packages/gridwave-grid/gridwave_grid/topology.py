"""GridTopology - per-cell occupancy over a resizable rectangle."""
from __future__ import annotations

import logging
from typing import Any

from gridwave_grid.footprint import expand_footprint
from gridwave_grid.types import CellState, Coord, Footprint, centering_offset

logger = logging.getLogger(__name__)


class GridTopology:
    """Occupancy storage, flat and indexed ``y * width + x``.

    Storage length always equals ``width * height``. The grid only grows,
    and only through ``resize``, which reallocates and copies.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._states: list[CellState] = [CellState.EMPTY] * (width * height)
        self._occupants: list[Any] = [None] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def _index(self, x: int, y: int) -> int:
        return y * self._width + x

    # --- Queries ---

    def is_valid_cell(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_cell_empty(self, x: int, y: int) -> bool:
        if not self.is_valid_cell(x, y):
            return False
        return self._states[self._index(x, y)] is CellState.EMPTY

    def state_at(self, x: int, y: int) -> CellState:
        if not self.is_valid_cell(x, y):
            return CellState.EMPTY
        return self._states[self._index(x, y)]

    def occupant_at(self, x: int, y: int) -> Any:
        if not self.is_valid_cell(x, y):
            return None
        return self._occupants[self._index(x, y)]

    def cells(self, state: CellState) -> list[Coord]:
        """All coordinates currently in *state*, row by row."""
        w = self._width
        return [(i % w, i // w) for i, s in enumerate(self._states) if s is state]

    def count(self, state: CellState) -> int:
        return self._states.count(state)

    def footprint_fits(self, anchor: Coord, footprint: Footprint) -> bool:
        """True when every footprint cell is in bounds and empty."""
        for x, y in expand_footprint(anchor, footprint):
            if not self.is_cell_empty(x, y):
                return False
        return True

    # --- Mutation ---

    def place(self, x: int, y: int, state: CellState, occupant: Any = None) -> bool:
        if state is CellState.EMPTY:
            raise ValueError("Use remove() to empty a cell")
        if not self.is_cell_empty(x, y):
            return False
        i = self._index(x, y)
        self._states[i] = state
        self._occupants[i] = occupant
        return True

    def place_footprint(
        self,
        anchor: Coord,
        footprint: Footprint,
        state: CellState,
        occupant: Any = None,
    ) -> bool:
        """Occupy the whole footprint, or nothing at all."""
        if not self.footprint_fits(anchor, footprint):
            return False
        for x, y in expand_footprint(anchor, footprint):
            self.place(x, y, state, occupant)
        return True

    def remove(self, x: int, y: int) -> bool:
        if not self.is_valid_cell(x, y):
            return False
        i = self._index(x, y)
        was_occupied = self._states[i] is not CellState.EMPTY
        self._states[i] = CellState.EMPTY
        self._occupants[i] = None
        return was_occupied

    def remove_occupant(self, occupant: Any) -> int:
        """Empty every cell held by *occupant*. Returns the number freed."""
        if occupant is None:
            return 0
        freed = 0
        for i, held in enumerate(self._occupants):
            if held is not None and held == occupant:
                self._states[i] = CellState.EMPTY
                self._occupants[i] = None
                freed += 1
        return freed

    def resize(self, width: int, height: int) -> Coord | None:
        """Grow to ``width x height``, recentring existing occupancy.

        Returns the applied offset, or None (and changes nothing) unless
        the new size is strictly larger in both dimensions.
        """
        if width <= self._width or height <= self._height:
            logger.debug(
                "Rejected resize %dx%d -> %dx%d (not strictly larger)",
                self._width, self._height, width, height,
            )
            return None

        ox, oy = centering_offset(self.size, (width, height))
        states: list[CellState] = [CellState.EMPTY] * (width * height)
        occupants: list[Any] = [None] * (width * height)
        for i, state in enumerate(self._states):
            if state is CellState.EMPTY:
                continue
            x, y = i % self._width, i // self._width
            j = (y + oy) * width + (x + ox)
            states[j] = state
            occupants[j] = self._occupants[i]

        self._width = width
        self._height = height
        self._states = states
        self._occupants = occupants
        return (ox, oy)
