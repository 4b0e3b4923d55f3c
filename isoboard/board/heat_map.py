"""Proximity heat map for AI tile scoring.

The heat of a cell is the number of rook moves to the nearest occupied cell,
computed with a multi-source breadth-first search. Only the board edges stop
the spread; occupants and terrain do not, so the value is raw proximity and
not a traversal cost.

Example, 10x10 board with occupants at (2, 2), (1, 4) and (4, 5)::

    4  3  2  3  4  5  6  7  8  9
    3  2  1  2  3  4  5  6  7  8
    2  1  0  1  2  3  4  5  6  7
    2  1  1  2  2  3  4  5  6  7
    1  0  1  2  1  2  3  4  5  6
    2  1  2  1  0  1  2  3  4  5
    3  2  3  2  1  2  3  4  5  6
    4  3  4  3  2  3  4  5  6  7
    5  4  5  4  3  4  5  6  7  8
    6  5  6  5  4  5  6  7  8  9
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Tuple

from .directions import ROOK_MOVES, Position, in_bounds, offset

# Larger than any real distance on a board
UNVISITED = 2**32 - 1


def cell_index(position: Position, width: int) -> int:
    """Row-major index of ``position`` in a heat map of the given width."""
    return position[0] + position[1] * width


def generate_heat_map(size: Tuple[int, int], sources: Iterable[Position]) -> List[int]:
    """Distance from every cell to the nearest source, in rook moves.

    With no sources at all every cell gets 0.
    """
    width, height = size
    heat_map = [UNVISITED] * (width * height)
    queue: deque[Position] = deque()

    for position in sources:
        heat_map[cell_index(position, width)] = 0
        queue.append(position)

    if not queue:
        return [0] * (width * height)

    while queue:
        position = queue.popleft()
        current_heat = heat_map[cell_index(position, width)]

        for direction in ROOK_MOVES:
            neighbour = offset(position, direction)
            if not in_bounds(neighbour, size):
                continue
            index = cell_index(neighbour, width)
            # Has been visited
            if heat_map[index] != UNVISITED:
                continue
            heat_map[index] = current_heat + 1
            queue.append(neighbour)

    return heat_map


def render_heat_map(heat_map: Sequence[int], width: int) -> str:
    """Render a heat map as right-aligned text rows, one row per ``y``.

    Unvisited cells (only possible on a partial map) show as ``?``.
    """
    if not heat_map:
        return ""

    cells = ["?" if value == UNVISITED else str(value) for value in heat_map]
    column_width = max(len(cell) for cell in cells)
    lines: List[str] = []
    for row_start in range(0, len(cells), width):
        row = cells[row_start:row_start + width]
        lines.append(" ".join(cell.rjust(column_width) for cell in row))
    return "\n".join(lines)
