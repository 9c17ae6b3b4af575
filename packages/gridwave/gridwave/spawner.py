"""EntitySpawner protocol: the collaborator that materialises spawns."""
from __future__ import annotations

from typing import Any, Protocol

from gridwave_grid import Coord, Footprint


class EntitySpawner(Protocol):
    """Builds whatever represents a spawned entity outside the core.

    Each call returns an opaque handle that the grid stores as the
    occupant of the committed cells.
    """

    def spawn_enemy(self, coord: Coord, level: int) -> Any: ...
    def spawn_boss(self, coord: Coord, level: int) -> Any: ...
    def spawn_resource(self, coord: Coord, level: int, footprint: Footprint) -> Any: ...
