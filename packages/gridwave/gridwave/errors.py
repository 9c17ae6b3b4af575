"""Exception types raised by gridwave."""
from __future__ import annotations

from typing import Any


class GridwaveError(Exception):
    """Base class for gridwave errors."""


class InvalidSymbolError(GridwaveError, ValueError):
    """Raised when a spawn code contains a character outside the symbol table."""

    def __init__(self, code: str, position: int) -> None:
        self.code = code
        self.position = position
        self.char = code[position]
        super().__init__(
            f"Invalid spawn symbol {self.char!r} at position {position} in {code!r}"
        )


class ConfigError(GridwaveError, ValueError):
    """Raised when wave or game configuration is rejected at load time."""


class PlacementFailed(GridwaveError):
    """Raised when no priority tier yields a placement for a footprint."""

    def __init__(self, kind: Any, footprint: tuple[int, int]) -> None:
        self.kind = kind
        self.footprint = footprint
        super().__init__(
            f"No placement for {getattr(kind, 'value', kind)} with footprint "
            f"{footprint[0]}x{footprint[1]}"
        )
