# src/torchwalls/engine/pathfind.py
# Grid A* for the enemy.
# - 8-connected, every step costs 1 (diagonals are not penalised).
# - Euclidean heuristic; it overestimates on this metric near walls, so paths
#   can look slightly off-optimal there. That is accepted behaviour.
# - Search stops as soon as the goal is popped.
# - The start cell is never tested for passability; every other cell must be
#   in-bounds floor.
# Paths are lists of tile indices from the first step (start excluded) to the
# goal (included). No path / start == goal -> [].

from __future__ import annotations

import heapq
import itertools
import math
from typing import Dict, List, Optional, Tuple

import structlog

from ..grid import Grid
from ..tiles import NEIGHBOURS_8

log = structlog.get_logger()

XY = Tuple[int, int]


def euclidean(a: XY, b: XY) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def search(grid: Grid, start: XY, goal: XY) -> Dict[int, Optional[int]]:
    """Run A* and return the predecessor map (`came_from`)."""
    start_i = grid.idx(*start)
    goal_i = grid.idx(*goal) if grid.in_bounds(*goal) else None

    came_from: Dict[int, Optional[int]] = {start_i: None}
    cost_so_far: Dict[int, int] = {start_i: 0}
    order = itertools.count()
    frontier: List[Tuple[float, int, int]] = [(0.0, next(order), start_i)]

    while frontier:
        _prio, _n, current = heapq.heappop(frontier)
        if current == goal_i:
            break
        cx, cy = grid.xy(current)
        new_cost = cost_so_far[current] + 1
        for dx, dy in NEIGHBOURS_8:
            nx, ny = cx + dx, cy + dy
            if not grid.is_floor_tile(nx, ny):
                continue
            nxt = grid.idx(nx, ny)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                came_from[nxt] = current
                priority = new_cost + euclidean((nx, ny), goal)
                heapq.heappush(frontier, (priority, next(order), nxt))
    return came_from


def reconstruct(
    came_from: Dict[int, Optional[int]],
    start_index: int,
    goal_index: int,
    max_steps: int,
) -> List[int]:
    if goal_index == start_index or goal_index not in came_from:
        return []
    path: List[int] = []
    current: Optional[int] = goal_index
    steps = 0
    while current is not None and current != start_index:
        if steps >= max_steps:
            return []
        path.append(current)
        current = came_from.get(current)
        steps += 1
    if current != start_index:
        return []
    path.reverse()
    return path


def find_path(grid: Grid, start: XY, goal: XY) -> List[int]:
    if not grid.in_bounds(*start) or not grid.in_bounds(*goal):
        log.debug("Path endpoints out of bounds", start=start, goal=goal)
        return []
    came_from = search(grid, start, goal)
    path = reconstruct(came_from, grid.idx(*start), grid.idx(*goal), grid.width * grid.height)
    if not path and start != goal:
        log.debug("No path to goal", start=start, goal=goal, explored=len(came_from))
    return path


def path_tiles(grid: Grid, path: List[int]) -> List[XY]:
    return [grid.xy(i) for i in path]
