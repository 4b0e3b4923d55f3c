"""Exceptions raised by the board core.

Most "failures" on the board are ordinary empty results (no path, empty
lookup). The exceptions below are reserved for caller bugs.
"""

from __future__ import annotations

from typing import Tuple


class BoardError(Exception):
    """Base class for board errors."""


class InvalidBoardSizeError(BoardError, ValueError):
    """Raised when a board or index is built with a non-positive dimension."""

    def __init__(self, size: Tuple[int, int]) -> None:
        self.size = size
        super().__init__(
            f"Board size must be positive in both dimensions, got {size[0]}x{size[1]}"
        )


class OutOfBoundsError(BoardError, ValueError):
    """Raised when a position outside the board would be stored in an index."""

    def __init__(self, position: Tuple[int, int], size: Tuple[int, int]) -> None:
        self.position = position
        self.size = size
        super().__init__(
            f"Position {position} is outside the {size[0]}x{size[1]} board"
        )


class HeatMapNotGeneratedError(BoardError, RuntimeError):
    """Raised when heat values are read before ``generate_heat_map()`` ran."""

    def __init__(self) -> None:
        super().__init__(
            "Heat map has not been generated. Call BoardMap.generate_heat_map() "
            "after placing occupants and before ranking tiles."
        )
