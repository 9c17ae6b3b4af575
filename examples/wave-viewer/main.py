"""Wave Viewer - watch the wave director, fog and grid expansion with pygame.

Left click places a player unit, right click removes whatever is in a
cell. Hold F to fast-forward ticks. Escape quits.
"""
from __future__ import annotations

import sys

import pygame

from gridwave import (
    EXPANSION_COMPLETE,
    GRID_RESIZED,
    SPAWN_EVENT,
    WAVE_COMPLETE,
    WAVE_START,
    GameConfig,
    WaveSession,
)
from gridwave.log import setup_logging

from game.spawner import ViewerSpawner
from ui.constants import FAST_FORWARD, FPS, GRID_PX, SCREEN_H, SCREEN_W
from ui.renderer import Camera, draw_grid
from ui.status import StatusBar


class ViewerState:
    """Holds the session and the presentation objects wired to it."""

    def __init__(self) -> None:
        self.config = GameConfig(tick_interval=0.5)
        self.spawner = ViewerSpawner()
        self.session = WaveSession(self.spawner, config=self.config, seed=42)
        self.camera = Camera(self.session.topology.width)
        self.status = StatusBar()

        director, expansion = self.session.director, self.session.expansion
        director.signals.subscribe(
            WAVE_START, lambda n, d: self.status.set(f"Wave {d['wave_number']} incoming")
        )
        director.signals.subscribe(
            WAVE_COMPLETE, lambda n, d: self.status.set(f"Wave {d['wave_number']} cleared")
        )
        director.signals.subscribe(SPAWN_EVENT, self._on_spawn)
        expansion.signals.subscribe(GRID_RESIZED, self.camera.on_grid_resized)
        expansion.signals.subscribe(EXPANSION_COMPLETE, lambda n, d: self.camera.settle())

    def _on_spawn(self, signal_name: str, data: dict) -> None:
        if data["placement"] is None and data["symbol"]:
            self.status.set(f"Slot {data['index']} skipped: no room")


def main() -> None:
    setup_logging("INFO")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wave Viewer")
    clock = pygame.time.Clock()

    state = ViewerState()
    session = state.session
    cx, cy = session.topology.width // 2, session.topology.height // 2
    session.place_player(cx, cy)

    accumulator = 0.0
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and not session.expansion.in_progress:
                if event.pos[1] >= GRID_PX:
                    continue
                x, y = state.camera.cell_at(*event.pos, session.topology.width)
                if event.button == 1:
                    session.place_player(x, y)
                elif event.button == 3:
                    handle = session.topology.occupant_at(x, y)
                    if session.remove_entity(x, y):
                        state.spawner.forget(handle)

        speed = FAST_FORWARD if pygame.key.get_pressed()[pygame.K_f] else 1

        # Expansion animation runs on frame time; ticks stay paused meanwhile.
        if session.expansion.in_progress:
            session.advance(dt)
            accumulator = 0.0
        else:
            accumulator += dt * speed
            while accumulator >= session.timer.interval:
                accumulator -= session.timer.interval
                if not session.step():
                    break

        screen.fill((20, 20, 30))
        draw_grid(screen, session, state.spawner, state.camera)
        state.status.draw(screen, session)
        pygame.display.flip()

    session.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
