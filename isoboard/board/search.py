"""Search over the board grid: A* pathfinding and bounded flood fill.

Both searches share one passability rule. A step onto a neighbouring cell is
legal when the cell is on the board, holds no occupant, and is not water for a
mover that cannot fly. Cells without a terrain marker are passable. Every legal
step costs 1.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar

from ..logging_utils import debug_search_enabled, log_deterministic
from .directions import Direction, Position, distance_squared, offset
from .position_index import PositionIndex
from .terrain import TerrainLookup

Node = TypeVar("Node", bound=Hashable)


def astar(
    start: Node,
    successors: Callable[[Node], Iterable[Tuple[Node, int]]],
    heuristic: Callable[[Node], int],
    success: Callable[[Node], bool],
) -> Optional[Tuple[List[Node], int]]:
    """Generic A* search.

    Nodes are popped by lowest ``cost + heuristic``; on a tie the node with
    the larger accumulated cost comes first, then the one pushed earlier.
    A node is only re-expanded when reached again more cheaply.

    Returns:
        ``(path, cost)`` with the path from ``start`` to the first node that
        satisfies ``success`` (both inclusive), or None if the frontier runs dry
    """
    counter = itertools.count()
    frontier: List[Tuple[int, int, int, Node]] = [(heuristic(start), 0, next(counter), start)]
    # node -> (parent, best known cost)
    parents: Dict[Node, Tuple[Optional[Node], int]] = {start: (None, 0)}

    while frontier:
        _, negative_cost, _, node = heapq.heappop(frontier)
        cost = -negative_cost
        if success(node):
            return _reverse_path(parents, node), cost
        if cost > parents[node][1]:
            # stale entry, a cheaper route was pushed later
            continue
        for neighbour, move_cost in successors(node):
            new_cost = cost + move_cost
            known = parents.get(neighbour)
            if known is not None and known[1] <= new_cost:
                continue
            parents[neighbour] = (node, new_cost)
            heapq.heappush(
                frontier,
                (new_cost + heuristic(neighbour), -new_cost, next(counter), neighbour),
            )
    return None


def _reverse_path(parents: Dict[Node, Tuple[Optional[Node], int]], goal: Node) -> List[Node]:
    path = [goal]
    parent = parents[goal][0]
    while parent is not None:
        path.append(parent)
        parent = parents[parent][0]
    path.reverse()
    return path


def find_all_within_distance_unweighted(
    start: Node,
    max_distance: int,
    successors: Callable[[Node], Iterable[Node]],
) -> Set[Node]:
    """Breadth-first collection of every node within ``max_distance`` steps.

    ``start`` is always part of the result. Each node is recorded once, at
    the depth it is first discovered.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be zero or positive (got {max_distance})")

    visited = {start}
    queue: deque[Tuple[Node, int]] = deque([(start, 0)])
    while queue:
        node, distance = queue.popleft()
        if distance >= max_distance:
            continue
        for neighbour in successors(node):
            if neighbour in visited:
                continue
            visited.add(neighbour)
            queue.append((neighbour, distance + 1))
    return visited


def passable_steps(
    occupants: PositionIndex,
    terrain: TerrainLookup,
    directions: Sequence[Direction],
    is_airborne: bool,
) -> Callable[[Position], Iterable[Position]]:
    """Build the successor function shared by ``pathfind`` and ``flood``."""

    def steps(position: Position) -> Iterable[Position]:
        for direction in directions:
            candidate = offset(position, direction)
            if occupants.is_out_of_bounds(candidate):
                continue
            # An obstacle blocks the cell whatever the terrain
            if occupants.is_occupied(candidate):
                continue
            kind = terrain.lookup(candidate)
            if kind is not None and kind.blocks(is_airborne):
                continue
            yield candidate

    return steps


def pathfind(
    occupants: PositionIndex,
    terrain: TerrainLookup,
    start: Position,
    target: Position,
    directions: Sequence[Direction],
    is_airborne: bool,
) -> Optional[Tuple[List[Position], int]]:
    """Find a path from ``start`` to ``target`` around obstacles and water.

    The heuristic is the squared Euclidean distance to ``target``. It can
    overestimate the remaining number of moves, so the returned path is not
    guaranteed to be the shortest one.

    Returns:
        ``(path, cost)`` where ``path`` runs from ``start`` to ``target``
        inclusive and ``cost == len(path) - 1``, or None when unreachable
    """
    start = (start[0], start[1])
    target = (target[0], target[1])
    steps = passable_steps(occupants, terrain, directions, is_airborne)

    result = astar(
        start,
        lambda position: ((step, 1) for step in steps(position)),
        lambda position: distance_squared(target, position),
        lambda position: position == target,
    )

    if debug_search_enabled():
        if result is None:
            log_deterministic(f"[Pathfind] {start} -> {target}: no path")
        else:
            log_deterministic(f"[Pathfind] {start} -> {target}: cost {result[1]}")
    return result


def flood(
    occupants: PositionIndex,
    terrain: TerrainLookup,
    start: Position,
    max_distance: int,
    directions: Sequence[Direction],
    is_airborne: bool,
) -> Set[Position]:
    """Every position reachable from ``start`` within ``max_distance`` moves.

    Uses the same passability rule as ``pathfind``. ``start`` is included
    even if it is occupied (the mover usually stands there).
    """
    start = (start[0], start[1])
    tiles = find_all_within_distance_unweighted(
        start,
        max_distance,
        passable_steps(occupants, terrain, directions, is_airborne),
    )
    if debug_search_enabled():
        log_deterministic(f"[Flood] {start} within {max_distance}: {len(tiles)} tiles")
    return tiles
