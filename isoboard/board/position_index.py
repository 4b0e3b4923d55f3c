"""Bidirectional position <-> occupant index.

``PositionIndex`` keeps two dictionaries in lockstep so that both "who stands
here" and "where is this occupant" are constant-time lookups. The pair of maps
is a true bijection: a position holds at most one occupant and an occupant
sits on at most one position. Inserting over an existing binding never drops
it silently; ``set`` reports every displaced pair through ``Overwritten``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from .directions import KING_MOVES, ROOK_MOVES, Neighbors, Position, in_bounds
from .errors import InvalidBoardSizeError, OutOfBoundsError

Occupant = Hashable
Binding = Tuple[Position, Occupant]


class OverwriteKind(Enum):
    """Which existing bindings a ``set`` call displaced."""

    NEITHER = "neither"    # nothing was bound to the position or the occupant
    POSITION = "position"  # the position held another occupant
    OCCUPANT = "occupant"  # the occupant stood on another position
    BOTH = "both"          # two distinct bindings were displaced
    PAIR = "pair"          # the exact pair was already stored


@dataclass(frozen=True)
class Overwritten:
    """Result of ``PositionIndex.set``.

    ``by_position`` is the old ``(position, occupant)`` binding keyed by the
    inserted position; ``by_occupant`` is the old ``(position, occupant)``
    binding keyed by the inserted occupant. For ``PAIR`` both hold the
    unchanged pair.
    """

    kind: OverwriteKind
    by_position: Optional[Binding] = None
    by_occupant: Optional[Binding] = None

    @property
    def evicted(self) -> List[Binding]:
        """Bindings that no longer exist after the insert."""
        if self.kind is OverwriteKind.PAIR:
            return []
        return [pair for pair in (self.by_position, self.by_occupant) if pair is not None]

    @property
    def relocated(self) -> bool:
        """True when the inserted occupant moved away from another position."""
        return self.kind in (OverwriteKind.OCCUPANT, OverwriteKind.BOTH)

    @property
    def replaced(self) -> bool:
        """True when another occupant was pushed off the inserted position."""
        return self.kind in (OverwriteKind.POSITION, OverwriteKind.BOTH)


class PositionIndex:
    """Bijective mapping between board positions and occupant handles.

    Occupant handles are opaque hashable values; the index never inspects them.
    Every stored position must lie within ``[0, size)`` on both axes.
    """

    def __init__(self, size: Tuple[int, int]):
        width, height = size
        if width <= 0 or height <= 0:
            raise InvalidBoardSizeError((width, height))
        self._size: Tuple[int, int] = (width, height)
        self._by_position: Dict[Position, Occupant] = {}
        self._by_occupant: Dict[Occupant, Position] = {}

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def bounds(self) -> Tuple[Position, Position]:
        """Inclusive ``(min_corner, max_corner)`` of the index."""
        return (0, 0), (self._size[0] - 1, self._size[1] - 1)

    def is_out_of_bounds(self, position: Position) -> bool:
        return not in_bounds(position, self._size)

    def is_occupied(self, position: Position) -> bool:
        return position in self._by_position

    def get(self, position: Position) -> Optional[Occupant]:
        """Get the occupant at ``position``."""
        return self._by_position.get(position)

    def locate(self, occupant: Occupant) -> Optional[Position]:
        """Find ``occupant``'s position."""
        return self._by_occupant.get(occupant)

    def set(self, position: Position, occupant: Occupant) -> Overwritten:
        """Place ``occupant`` at ``position``.

        Moves the occupant if it is already indexed and replaces whatever
        occupant held the position. Both displaced bindings are returned.

        Raises:
            OutOfBoundsError: If ``position`` lies outside the index bounds
            ValueError: If ``occupant`` is None (None is the "no occupant" answer)
        """
        if occupant is None:
            raise ValueError("Occupant handle cannot be None")
        position = (position[0], position[1])
        if self.is_out_of_bounds(position):
            raise OutOfBoundsError(position, self._size)

        has_position = position in self._by_position
        has_occupant = occupant in self._by_occupant
        previous_occupant = self._by_position.get(position)
        previous_position = self._by_occupant.get(occupant)

        if has_position and has_occupant:
            if previous_position == position:
                # previous_occupant is the same handle, nothing to change
                return Overwritten(OverwriteKind.PAIR, (position, occupant), (position, occupant))
            del self._by_occupant[previous_occupant]
            del self._by_position[previous_position]
            result = Overwritten(
                OverwriteKind.BOTH,
                (position, previous_occupant),
                (previous_position, occupant),
            )
        elif has_position:
            del self._by_occupant[previous_occupant]
            result = Overwritten(OverwriteKind.POSITION, by_position=(position, previous_occupant))
        elif has_occupant:
            del self._by_position[previous_position]
            result = Overwritten(OverwriteKind.OCCUPANT, by_occupant=(previous_position, occupant))
        else:
            result = Overwritten(OverwriteKind.NEITHER)

        self._by_position[position] = occupant
        self._by_occupant[occupant] = position
        return result

    def remove(self, position: Position) -> Optional[Occupant]:
        """Remove whatever occupant stands at ``position``."""
        if position not in self._by_position:
            return None
        occupant = self._by_position.pop(position)
        del self._by_occupant[occupant]
        return occupant

    def remove_occupant(self, occupant: Occupant) -> Optional[Position]:
        """Remove ``occupant`` from the index, returning where it was."""
        if occupant not in self._by_occupant:
            return None
        position = self._by_occupant.pop(occupant)
        del self._by_position[position]
        return position

    def clear(self) -> None:
        self._by_position.clear()
        self._by_occupant.clear()

    def neighbors_rook(self, position: Position) -> Neighbors:
        """In-bounds orthogonal neighbours of ``position``."""
        return Neighbors(position, ROOK_MOVES, self._size)

    def neighbors_king(self, position: Position) -> Neighbors:
        """In-bounds orthogonal and diagonal neighbours of ``position``."""
        return Neighbors(position, KING_MOVES, self._size)

    def positions(self) -> List[Position]:
        return list(self._by_position)

    def occupants(self) -> List[Occupant]:
        return list(self._by_occupant)

    def items(self) -> Iterator[Binding]:
        return iter(self._by_position.items())

    def __len__(self) -> int:
        return len(self._by_position)

    def __contains__(self, position: object) -> bool:
        return position in self._by_position

    def __iter__(self) -> Iterator[Position]:
        return iter(self._by_position)

    def __repr__(self) -> str:
        return f"PositionIndex(size={self._size!r}, occupied={len(self)})"
