"""Grid, fog and entity rendering with the expansion camera."""
from __future__ import annotations

import pygame

from gridwave import WaveSession
from gridwave_clock import lerp
from gridwave_grid import CellState

from game.spawner import ViewerSpawner
from ui.constants import GRID_PX

CELL_COLORS = {
    CellState.EMPTY: (46, 52, 64),
    CellState.PLAYER: (90, 170, 255),
    CellState.ENEMY: (230, 80, 80),
    CellState.RESOURCE: (240, 200, 70),
}
BOSS_COLOR = (200, 60, 220)
FOG_COLOR = (12, 12, 18)


class Camera:
    """Maps grid cells to pixels, easing between sizes during an expansion."""

    def __init__(self, width: int) -> None:
        self._from_cell = GRID_PX / width
        self._to_cell = self._from_cell
        self._offset = (0, 0)

    def on_grid_resized(self, signal_name: str, data: dict) -> None:
        self._from_cell = GRID_PX / data["old_width"]
        self._to_cell = GRID_PX / data["width"]
        self._offset = data["offset"]

    def rect(self, x: int, y: int, t: float) -> pygame.Rect:
        ox, oy = self._offset
        a, b = self._from_cell, self._to_cell
        cell = lerp(a, b, t)
        px = lerp((x - ox) * a, x * b, t)
        py = lerp((y - oy) * a, y * b, t)
        return pygame.Rect(int(px) + 1, int(py) + 1, int(cell) - 2, int(cell) - 2)

    def settle(self) -> None:
        self._from_cell = self._to_cell
        self._offset = (0, 0)

    def cell_at(self, px: int, py: int, width: int) -> tuple[int, int]:
        size = GRID_PX / width
        return int(px // size), int(py // size)


def draw_grid(
    surface: pygame.Surface,
    session: WaveSession,
    spawner: ViewerSpawner,
    camera: Camera,
) -> None:
    task = session.expansion.task
    t = task.eased if task is not None else 1.0
    topo, fog = session.topology, session.fog

    for y in range(topo.height):
        for x in range(topo.width):
            rect = camera.rect(x, y, t)
            if not fog.is_revealed(x, y):
                pygame.draw.rect(surface, FOG_COLOR, rect)
                continue
            state = topo.state_at(x, y)
            color = CELL_COLORS[state]
            entity = spawner.entities.get(topo.occupant_at(x, y))
            if entity is not None and entity.kind == "boss":
                color = BOSS_COLOR
            pygame.draw.rect(surface, color, rect)
            if entity is not None and entity.level > 1:
                pygame.draw.rect(surface, (255, 255, 255), rect, entity.level - 1)
