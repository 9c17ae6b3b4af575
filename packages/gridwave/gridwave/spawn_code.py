"""Spawn code programs: digit strings describing one wave's spawn sequence.

Each character is one spawn slot, executed ``SPAWN_INTERVAL_TICKS`` ticks
after the previous one::

    >>> program = parse("10102")
    >>> [s.name for s in program]
    ['ENEMY', 'EMPTY', 'ENEMY', 'EMPTY', 'RESOURCE']
    >>> active_duration(program)
    17
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from gridwave.errors import InvalidSymbolError

SPAWN_INTERVAL_TICKS = 4


class SpawnSymbol(IntEnum):
    EMPTY = 0
    ENEMY = 1
    RESOURCE = 2
    BOSS = 3


_SYMBOLS: dict[str, SpawnSymbol] = {str(int(s)): s for s in SpawnSymbol}


@dataclass(frozen=True)
class SpawnProgram:
    symbols: tuple[SpawnSymbol, ...] = ()

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[SpawnSymbol]:
        return iter(self.symbols)

    def __getitem__(self, index: int) -> SpawnSymbol:
        return self.symbols[index]

    def __str__(self) -> str:
        return "".join(str(int(s)) for s in self.symbols)

    def count(self, symbol: SpawnSymbol) -> int:
        return self.symbols.count(symbol)


def parse(code: str) -> SpawnProgram:
    """Parse a digit string. Raises InvalidSymbolError on unknown characters."""
    symbols: list[SpawnSymbol] = []
    for i, ch in enumerate(code):
        symbol = _SYMBOLS.get(ch)
        if symbol is None:
            raise InvalidSymbolError(code, i)
        symbols.append(symbol)
    return SpawnProgram(tuple(symbols))


def active_duration(program: SpawnProgram, interval: int = SPAWN_INTERVAL_TICKS) -> int:
    """Ticks spent in the active phase: first slot on tick 0, last on the final tick.

    An empty program still takes one active tick, the one that completes it.
    """
    return max(len(program) - 1, 0) * interval + 1
