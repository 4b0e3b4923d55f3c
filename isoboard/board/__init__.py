"""Board tier: spatial indices, searches and the heat map."""

from .directions import (
    EAST,
    KING_MOVES,
    NORTH,
    NORTHEAST,
    NORTHWEST,
    ROOK_MOVES,
    SOUTH,
    SOUTHEAST,
    SOUTHWEST,
    WEST,
    Direction,
    Neighbors,
    Position,
    distance_squared,
)
from .errors import (
    BoardError,
    HeatMapNotGeneratedError,
    InvalidBoardSizeError,
    OutOfBoundsError,
)
from .position_index import Overwritten, OverwriteKind, PositionIndex
from .terrain import MarkerTerrainLookup, NoTerrain, TerrainKind, TerrainLookup
from .search import astar, find_all_within_distance_unweighted, flood, pathfind
from .heat_map import UNVISITED, generate_heat_map, render_heat_map
from .schemas import BoardLayout, TerrainPlacement
from .board_map import BoardMap

__all__ = [
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "NORTHEAST",
    "SOUTHEAST",
    "NORTHWEST",
    "SOUTHWEST",
    "ROOK_MOVES",
    "KING_MOVES",
    "Direction",
    "Position",
    "Neighbors",
    "distance_squared",
    "BoardError",
    "InvalidBoardSizeError",
    "OutOfBoundsError",
    "HeatMapNotGeneratedError",
    "PositionIndex",
    "Overwritten",
    "OverwriteKind",
    "TerrainKind",
    "TerrainLookup",
    "MarkerTerrainLookup",
    "NoTerrain",
    "astar",
    "find_all_within_distance_unweighted",
    "pathfind",
    "flood",
    "UNVISITED",
    "generate_heat_map",
    "render_heat_map",
    "BoardLayout",
    "TerrainPlacement",
    "BoardMap",
]
