"""Viewer-side entity spawner: remembers what each handle is."""
from __future__ import annotations

import itertools
from dataclasses import dataclass

from gridwave_grid import Coord, Footprint


@dataclass
class Entity:
    kind: str
    level: int


class ViewerSpawner:
    """EntitySpawner that keeps a handle -> Entity table for rendering."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.entities: dict[int, Entity] = {}

    def _new(self, kind: str, level: int) -> int:
        handle = next(self._ids)
        self.entities[handle] = Entity(kind, level)
        return handle

    def spawn_enemy(self, coord: Coord, level: int) -> int:
        return self._new("enemy", level)

    def spawn_boss(self, coord: Coord, level: int) -> int:
        return self._new("boss", level)

    def spawn_resource(self, coord: Coord, level: int, footprint: Footprint) -> int:
        return self._new("resource", level)

    def forget(self, handle: int | None) -> bool:
        """Drop a removed entity's record. Returns False for unknown handles."""
        return self.entities.pop(handle, None) is not None
