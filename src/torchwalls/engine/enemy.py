# src/torchwalls/engine/enemy.py
# The pursuer. It only ever moves along an A* path toward the player; the path
# is replaced wholesale when the session asks for a repath (torch lit, or the
# player came too close).
#
# Motion: ease toward the centre of the first waypoint tile by a fixed lerp
# factor per tick. The waypoint is dropped once the tile the enemy occupied at
# the start of the tick equals it, so the enemy keeps drifting into the next
# tile centre rather than snapping.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..grid import Grid
from .collisions import lerp
from .pathfind import find_path

XY = Tuple[int, int]


@dataclass
class Enemy:
    x: float
    y: float
    size: float = 4.0
    path: List[int] = field(default_factory=list)
    visible: bool = False
    repaths: int = 0

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def tile(self, grid: Grid) -> XY:
        return grid.tile_of(self.x, self.y)

    def repath(self, grid: Grid, goal: XY) -> List[int]:
        self.path = find_path(grid, self.tile(grid), goal)
        self.repaths += 1
        return self.path

    def follow(self, grid: Grid, factor: float) -> bool:
        """Advance toward the current waypoint; returns True if one was consumed."""
        if not self.path:
            return False
        ex, ey = self.tile(grid)
        mx, my = grid.xy(self.path[0])
        cx, cy = grid.tile_centre(mx, my)
        self.x = lerp(self.x, cx, factor)
        self.y = lerp(self.y, cy, factor)
        if (ex, ey) == (mx, my):
            self.path.pop(0)
            return True
        return False
