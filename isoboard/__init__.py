"""
Isoboard - spatial core for an isometric tactics board.

Position/occupant indexing, A* pathfinding, reachability flood fill and the
proximity heat map used to score tiles for unit AI.

No rendering, no input handling, no level file parsing.
The caller owns the board and passes it to every query.
"""

__version__ = "0.1.0"

from .config import Config

from .board import (
    NORTH,
    EAST,
    SOUTH,
    WEST,
    NORTHEAST,
    SOUTHEAST,
    NORTHWEST,
    SOUTHWEST,
    ROOK_MOVES,
    KING_MOVES,
    BoardMap,
    BoardLayout,
    TerrainPlacement,
    PositionIndex,
    Overwritten,
    OverwriteKind,
    TerrainKind,
    TerrainLookup,
    MarkerTerrainLookup,
    NoTerrain,
    BoardError,
    InvalidBoardSizeError,
    OutOfBoundsError,
    HeatMapNotGeneratedError,
    astar,
    find_all_within_distance_unweighted,
    pathfind,
    flood,
    generate_heat_map,
    render_heat_map,
)

__all__ = [
    "Config",
    # Directions
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
    # Board
    "BoardMap",
    "BoardLayout",
    "TerrainPlacement",
    "PositionIndex",
    "Overwritten",
    "OverwriteKind",
    "TerrainKind",
    "TerrainLookup",
    "MarkerTerrainLookup",
    "NoTerrain",
    # Errors
    "BoardError",
    "InvalidBoardSizeError",
    "OutOfBoundsError",
    "HeatMapNotGeneratedError",
    # Searches
    "astar",
    "find_all_within_distance_unweighted",
    "pathfind",
    "flood",
    "generate_heat_map",
    "render_heat_map",
]
