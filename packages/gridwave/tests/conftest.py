"""Shared fixtures for gridwave tests."""
from __future__ import annotations

import random
from typing import Any

import pytest


class FakeSpawner:
    """Records every spawn request and hands back sequential handles."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, int, Any]] = []

    def _record(self, kind: str, coord: Any, level: int, footprint: Any = (1, 1)) -> int:
        self.calls.append((kind, coord, level, footprint))
        return len(self.calls)

    def spawn_enemy(self, coord, level):
        return self._record("enemy", coord, level)

    def spawn_boss(self, coord, level):
        return self._record("boss", coord, level)

    def spawn_resource(self, coord, level, footprint):
        return self._record("resource", coord, level, footprint)

    def kinds(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def spawner() -> FakeSpawner:
    return FakeSpawner()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def make_spawner():
    """Factory for tests that need several independent spawners."""
    return FakeSpawner
