"""The board: terrain and occupant indices, heat map and deployment zone.

``BoardMap`` is the single object callers hold for a loaded level. It is
created once per level with a fixed size and passed explicitly to whatever
needs it; the searches only read it. Mutations (spawn, move, despawn, heat
map regeneration) must not run while a search is reading the board, which the
caller guarantees by doing writes between simulation steps.
"""

from __future__ import annotations

from typing import Hashable, List, Mapping, Optional, Sequence, Set, Tuple

from ..config import Config
from ..logging_utils import debug_search_enabled, log_deterministic, log_mutation
from .directions import Direction, Position, distance_squared, in_bounds
from .errors import HeatMapNotGeneratedError, InvalidBoardSizeError, OutOfBoundsError
from .heat_map import cell_index, generate_heat_map
from .position_index import Occupant, Overwritten, OverwriteKind, PositionIndex
from .schemas import BoardLayout
from .search import find_all_within_distance_unweighted, flood, pathfind
from .terrain import MarkerTerrainLookup, TerrainKind, TerrainLookup


class BoardMap:
    """Aggregate of the board's spatial state and the queries over it.

    Attributes:
        terrain: Index of terrain markers (one per cell at most)
        occupants: Index of units, buildings and obstacles
        heat_map: Row-major proximity values, empty until generated
        deployment_zone: Tiles flagged for unit placement
    """

    def __init__(self, size: Tuple[int, int]):
        width, height = size
        if width <= 0 or height <= 0:
            raise InvalidBoardSizeError((width, height))
        self._size: Tuple[int, int] = (width, height)
        self.heat_map: List[int] = []
        self.terrain = PositionIndex(self._size)
        self.occupants = PositionIndex(self._size)
        self.deployment_zone: Set[Position] = set()

    @classmethod
    def from_layout(cls, layout: BoardLayout) -> Tuple["BoardMap", MarkerTerrainLookup]:
        """Build a board from a validated level layout.

        Each terrain placement gets a marker handle ``"terrain:x,y"`` in the
        terrain index; the returned lookup resolves those handles to kinds.
        """
        board = cls(layout.size)
        lookup = board.terrain_lookup()
        for placement in layout.terrain:
            x, y = placement.position
            marker = f"terrain:{x},{y}"
            board.terrain.set((x, y), marker)
            lookup.register(marker, placement.kind)
        board.deployment_zone.update((x, y) for x, y in layout.deployment_zone)
        return board, lookup

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    def is_out_of_bounds(self, position: Position) -> bool:
        return not in_bounds(position, self._size)

    def in_deployment_zone(self, position: Position) -> bool:
        return (position[0], position[1]) in self.deployment_zone

    def terrain_lookup(self, kinds: Optional[Mapping[Hashable, TerrainKind]] = None) -> MarkerTerrainLookup:
        """Resolve terrain on this board through a marker -> kind mapping."""
        return MarkerTerrainLookup(self.terrain, kinds)

    def place(self, position: Position, occupant: Occupant) -> Overwritten:
        """Put ``occupant`` at ``position`` in the occupant index.

        Thin wrapper over ``occupants.set`` that traces evictions when search
        debugging is on. The result is returned unchanged so callers can act
        on whatever was displaced.
        """
        result = self.occupants.set(position, occupant)
        if result.kind not in (OverwriteKind.NEITHER, OverwriteKind.PAIR) and debug_search_enabled():
            for old_position, old_occupant in result.evicted:
                log_mutation(
                    f"[Place] {occupant!r} -> {tuple(position)} evicted {old_occupant!r} at {old_position}"
                )
        return result

    def pathfind(
        self,
        start: Position,
        target: Position,
        directions: Sequence[Direction],
        is_airborne: bool,
        terrain: TerrainLookup,
    ) -> Optional[Tuple[List[Position], int]]:
        """Create a path from ``start`` to ``target`` while avoiding obstacles."""
        return pathfind(self.occupants, terrain, start, target, directions, is_airborne)

    def flood(
        self,
        start: Position,
        max_distance: int,
        directions: Sequence[Direction],
        is_airborne: bool,
        terrain: TerrainLookup,
    ) -> Set[Position]:
        """Flood into tiles within range, respecting terrain, obstacles and directions."""
        return flood(self.occupants, terrain, start, max_distance, directions, is_airborne)

    def movement_range(self, occupant: Occupant, max_distance: Optional[int] = None) -> Set[Position]:
        """Tiles within ``max_distance`` rook moves of ``occupant``.

        Used to highlight a selected unit's range, so only the board edges
        limit it. An occupant that is not on the board has no range.
        """
        if max_distance is None:
            max_distance = Config.DEFAULT_MOVE_RANGE
        position = self.occupants.locate(occupant)
        if position is None:
            return set()
        return find_all_within_distance_unweighted(
            position, max_distance, self.occupants.neighbors_rook
        )

    @staticmethod
    def sort_tiles_by_distance(tiles: List[Position], target: Position) -> None:
        """Sort tiles in place by squared distance to ``target`` (stable)."""
        tiles.sort(key=lambda tile: distance_squared(tile, target))

    def heat_at(self, position: Position) -> int:
        """Heat value of ``position``.

        Raises:
            HeatMapNotGeneratedError: If the heat map was never generated
            OutOfBoundsError: If ``position`` is not on the board
        """
        if not self.heat_map:
            raise HeatMapNotGeneratedError()
        if self.is_out_of_bounds(position):
            raise OutOfBoundsError((position[0], position[1]), self._size)
        return self.heat_map[cell_index(position, self.width)]

    def sort_tiles_by_heat(self, tiles: List[Position]) -> None:
        """Sort tiles in place by heat value, coolest first (stable)."""
        tiles.sort(key=self.heat_at)

    def best_tile(
        self,
        start: Position,
        max_distance: int,
        directions: Sequence[Direction],
        is_airborne: bool,
        terrain: TerrainLookup,
    ) -> Optional[Position]:
        """Reachable tile with the lowest heat, closest to ``start`` on ties."""
        # Canonical order first so equal-heat, equal-distance ties are stable
        tiles = sorted(self.flood(start, max_distance, directions, is_airborne, terrain))
        if not tiles:
            return None
        self.sort_tiles_by_distance(tiles, start)
        self.sort_tiles_by_heat(tiles)
        return tiles[0]

    def generate_heat_map(self) -> None:
        """Regenerate the heat map from every position in ``occupants``."""
        self.heat_map = generate_heat_map(self._size, self.occupants.positions())
        if debug_search_enabled():
            log_deterministic(
                f"[HeatMap] Regenerated {self.width}x{self.height} from {len(self.occupants)} occupants"
            )

    def __repr__(self) -> str:
        return (
            f"BoardMap(size={self._size!r}, terrain={len(self.terrain)}, "
            f"occupants={len(self.occupants)}, heat_map={'ready' if self.heat_map else 'empty'})"
        )
