# src/torchwalls/mapgen/reachability.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..grid import Grid
from ..tiles import NEIGHBOURS_4, WALL

XY = Tuple[int, int]


@dataclass
class Reachability:
    reachable: Set[int] = field(default_factory=set)   # floor tile indices
    edge_tiles: Set[int] = field(default_factory=set)  # wall tile indices
    enemy_candidates: List[XY] = field(default_factory=list)


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def flood_fill(grid: Grid, spawn: XY, *, min_enemy_distance: int = 20) -> Reachability:
    """
    Depth-first 4-way fill from `spawn`.

    - Every visited floor tile lands in `reachable`.
    - Wall tiles reached from a floor tile land in `edge_tiles` and stop the fill.
    - Floor tiles farther than `min_enemy_distance` (Manhattan) from the spawn
      become enemy spawn candidates, in visiting order.
    """
    out = Reachability()
    visited: Set[int] = set()
    frontier: List[XY] = [spawn]
    while frontier:
        x, y = frontier.pop()
        if not grid.in_bounds(x, y):
            continue
        index = grid.idx(x, y)
        if index in visited:
            continue
        visited.add(index)

        if grid.buf[index] == WALL:
            out.edge_tiles.add(index)
            continue
        # Border floor can only appear in hand-made grids; never expand past it.
        if grid.is_border(x, y):
            continue

        out.reachable.add(index)
        for dx, dy in NEIGHBOURS_4:
            frontier.append((x + dx, y + dy))
        if manhattan(spawn, (x, y)) > min_enemy_distance:
            out.enemy_candidates.append((x, y))
    return out


def farthest_reachable(grid: Grid, spawn: XY, reach: Reachability) -> Optional[XY]:
    best: Optional[XY] = None
    best_d = 0
    for index in sorted(reach.reachable):
        pos = grid.xy(index)
        d = manhattan(spawn, pos)
        if d > best_d:
            best, best_d = pos, d
    return best
