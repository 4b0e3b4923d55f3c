"""
Example: Skirmish - One AI Step on a Small Board
================================================

WHAT THIS SHOWS:
- Building a board from an in-memory level layout
- Placing units and reading back eviction results
- Generating the heat map and picking the coolest reachable tile
- Pathfinding a walker around a river while a flyer crosses it

RUN:
    python -m examples.skirmish.run
"""

from isoboard import (
    KING_MOVES,
    ROOK_MOVES,
    BoardLayout,
    BoardMap,
    Config,
    TerrainKind,
    TerrainPlacement,
    render_heat_map,
)
from isoboard.logging_utils import log_info, log_success


# ============================================================================
# STEP 1: Level layout (normally handed over by the level loader)
# ============================================================================

LAYOUT = BoardLayout(
    width=8,
    height=6,
    terrain=[TerrainPlacement(position=(4, y), kind=TerrainKind.WATER) for y in range(5)],
    deployment_zone=[(0, y) for y in range(6)],
)


def main() -> None:
    Config.validate()
    board, terrain = BoardMap.from_layout(LAYOUT)

    # ========================================================================
    # STEP 2: Deploy units
    # ========================================================================
    board.place((0, 1), "knight")
    board.place((0, 4), "griffin")
    board.place((7, 2), "raider")
    moved = board.place((1, 1), "knight")
    log_info(f"Knight redeployed, evicted bindings: {moved.evicted}")

    # ========================================================================
    # STEP 3: Heat map and AI tile choice for the raider
    # ========================================================================
    board.generate_heat_map()
    print(render_heat_map(board.heat_map, board.width))

    best = board.best_tile((7, 2), 3, ROOK_MOVES, False, terrain)
    log_success(f"Raider's best tile: {best}")

    # ========================================================================
    # STEP 4: Walker vs flyer across the river
    # ========================================================================
    walk = board.pathfind((1, 1), (6, 1), ROOK_MOVES, False, terrain)
    fly = board.pathfind((0, 4), (6, 4), KING_MOVES, True, terrain)
    log_info(f"Knight walks in {walk[1] if walk else 'no'} moves")
    log_info(f"Griffin flies in {fly[1] if fly else 'no'} moves")
    log_info(f"Knight's highlighted range: {len(board.movement_range('knight'))} tiles")


if __name__ == "__main__":
    main()
