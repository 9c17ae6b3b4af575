"""FogField - per-cell revealed/fogged state, congruent with the grid."""
from __future__ import annotations

import logging

from gridwave_signal import SignalBus

from gridwave_grid.types import Coord, centering_offset

logger = logging.getLogger(__name__)

CELL_REVEALED = "cell_revealed"


class FogField:
    """Flat revealed/fogged storage indexed ``y * width + x``.

    Revealing is monotonic: nothing here re-fogs a cell. ``resize``
    reallocates and copies revealed cells to their offset position.
    Each newly revealed cell publishes ``cell_revealed(x, y)`` on
    ``signals``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Fog dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._revealed: list[bool] = [False] * (width * height)
        self.signals = SignalBus("fog", (CELL_REVEALED,))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_revealed(self, x: int, y: int) -> bool:
        if not self._in_bounds(x, y):
            return False
        return self._revealed[y * self._width + x]

    def reveal_cell(self, x: int, y: int) -> bool:
        """Reveal one cell. Returns False (and notifies nobody) if it was
        already revealed or lies outside the field."""
        if not self._in_bounds(x, y):
            return False
        i = y * self._width + x
        if self._revealed[i]:
            return False
        self._revealed[i] = True
        self.signals.publish(CELL_REVEALED, x=x, y=y)
        return True

    def reveal_radius(self, cx: int, cy: int, r: int) -> int:
        """Reveal the square ``[cx-r, cx+r] x [cy-r, cy+r]`` clipped to bounds.

        Returns the number of cells that were newly revealed.
        """
        if r < 0:
            raise ValueError(f"radius must be >= 0, got {r}")
        revealed = 0
        for y in range(max(0, cy - r), min(self._height, cy + r + 1)):
            for x in range(max(0, cx - r), min(self._width, cx + r + 1)):
                if self.reveal_cell(x, y):
                    revealed += 1
        logger.debug("Revealed %d cells in radius %d around (%d, %d)", revealed, r, cx, cy)
        return revealed

    def revealed_cells(self) -> list[Coord]:
        w = self._width
        return [(i % w, i // w) for i, seen in enumerate(self._revealed) if seen]

    def fogged_cells(self) -> list[Coord]:
        w = self._width
        return [(i % w, i // w) for i, seen in enumerate(self._revealed) if not seen]

    def reveal_percentage(self) -> float:
        return sum(self._revealed) / len(self._revealed) * 100.0

    def resize(self, width: int, height: int, offset: Coord | None = None) -> Coord:
        """Replace the field with an all-fogged ``width x height`` one.

        Previously revealed cells are copied to ``(x + ox, y + oy)`` when
        that lands in bounds. *offset* defaults to the centring offset;
        pass the grid's offset to keep both in step.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Fog dimensions must be positive, got {width}x{height}")
        if offset is None:
            offset = centering_offset(self.size, (width, height))
        ox, oy = offset

        revealed = [False] * (width * height)
        for i, seen in enumerate(self._revealed):
            if not seen:
                continue
            nx, ny = i % self._width + ox, i // self._width + oy
            if 0 <= nx < width and 0 <= ny < height:
                revealed[ny * width + nx] = True

        self._width = width
        self._height = height
        self._revealed = revealed
        return (ox, oy)
