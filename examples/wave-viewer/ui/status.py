"""Bottom status bar: phase, wave and grid readout."""
from __future__ import annotations

import pygame

from gridwave import WavePhase, WaveSession

from ui.constants import GRID_PX, SCREEN_W, STATUS_H


class StatusBar:
    def __init__(self) -> None:
        self._message = ""
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str) -> None:
        self._message = message

    def draw(self, surface: pygame.Surface, session: WaveSession) -> None:
        pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, GRID_PX, SCREEN_W, STATUS_H))
        director = session.director
        if director.finished:
            phase = "all waves cleared"
        elif director.phase is WavePhase.PEACE:
            phase = f"peace ({director.peace_remaining} ticks)"
        else:
            phase = f"wave {director.current_wave.wave_number} [{director.current_wave.code}]"
        topo = session.topology
        line = (
            f"tick {session.timer.tick_number}  {phase}  "
            f"grid {topo.width}x{topo.height}  fog {100 - session.fog.reveal_percentage():.0f}%"
        )
        font = self._get_font()
        surface.blit(font.render(line, True, (220, 220, 220)), (8, GRID_PX + 8))
        if self._message:
            surface.blit(font.render(self._message, True, (160, 200, 160)), (8, GRID_PX + 30))
