"""Movement directions on the isometric tile grid.

On screen ``(0, 0)`` is the top middle tile; ``y`` increases towards the
bottom-left and ``x`` towards the bottom-right. The orientation only matters
for naming the offsets, the searches treat them as plain vectors.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

Position = Tuple[int, int]
Direction = Tuple[int, int]

NORTH: Direction = (0, -1)
EAST: Direction = (1, 0)
SOUTH: Direction = (0, 1)
WEST: Direction = (-1, 0)
NORTHEAST: Direction = (NORTH[0] + EAST[0], NORTH[1] + EAST[1])
SOUTHEAST: Direction = (SOUTH[0] + EAST[0], SOUTH[1] + EAST[1])
NORTHWEST: Direction = (NORTH[0] + WEST[0], NORTH[1] + WEST[1])
SOUTHWEST: Direction = (SOUTH[0] + WEST[0], SOUTH[1] + WEST[1])

# Four directional movement in straight lines like a rook
ROOK_MOVES: Tuple[Direction, ...] = (NORTH, EAST, SOUTH, WEST)

# Eight directional movement like a king
KING_MOVES: Tuple[Direction, ...] = (
    NORTH,
    NORTHEAST,
    EAST,
    SOUTHEAST,
    SOUTH,
    SOUTHWEST,
    WEST,
    NORTHWEST,
)


def offset(position: Position, direction: Direction) -> Position:
    return position[0] + direction[0], position[1] + direction[1]


def distance_squared(a: Position, b: Position) -> int:
    """Squared Euclidean distance between two cells."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def in_bounds(position: Position, size: Tuple[int, int]) -> bool:
    x, y = position
    return 0 <= x < size[0] and 0 <= y < size[1]


class Neighbors:
    """Lazy view over the in-bounds cells adjacent to ``origin``.

    Each iteration starts over from the first direction, so the same view can
    be walked several times. Occupancy is not consulted.
    """

    __slots__ = ("origin", "directions", "size")

    def __init__(self, origin: Position, directions: Sequence[Direction], size: Tuple[int, int]):
        self.origin = origin
        self.directions = directions
        self.size = size

    def __iter__(self) -> Iterator[Position]:
        for direction in self.directions:
            candidate = offset(self.origin, direction)
            if in_bounds(candidate, self.size):
                yield candidate

    def __repr__(self) -> str:
        return f"Neighbors(origin={self.origin!r}, cells={list(self)!r})"
