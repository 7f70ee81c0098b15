# src/torchwalls/engine/collisions.py
# Engine-side collision helpers (no pygame).
# Player vs walls is resolved per axis: probe just behind and just ahead of the
# body on that axis, at the next position, and cancel that axis' velocity when
# either probe lands in a wall. This gives sliding along walls rather than a
# swept box.

from __future__ import annotations

from typing import Tuple

from ..grid import Grid


def lerp(a: float, b: float, t: float) -> float:
    return (1 - t) * a + t * b


def boxes_overlap(
    ax0: float, ay0: float, ax1: float, ay1: float,
    bx0: float, by0: float, bx1: float, by1: float,
) -> bool:
    return ax0 < bx1 and ax1 > bx0 and ay0 < by1 and ay1 > by0


def square_overlap(ax: float, ay: float, a_size: float, bx: float, by: float, b_size: float) -> bool:
    return boxes_overlap(ax, ay, ax + a_size, ay + a_size, bx, by, bx + b_size, by + b_size)


def blocked_x(grid: Grid, x: float, y: float, vx: float, size: float, back: float = 2.0, ahead: float = 1.0) -> bool:
    return grid.is_wall(x + vx - back, y) or grid.is_wall(x + vx + size + ahead, y)


def blocked_y(grid: Grid, x: float, y: float, vy: float, size: float, back: float = 2.0, ahead: float = 1.0) -> bool:
    return grid.is_wall(x, y + vy - back) or grid.is_wall(x, y + vy + size + ahead)


def resolve_axes(
    grid: Grid,
    x: float,
    y: float,
    vx: float,
    vy: float,
    size: float,
    back: float = 2.0,
    ahead: float = 1.0,
) -> Tuple[float, float]:
    """Return the velocity with each blocked axis zeroed."""
    if blocked_x(grid, x, y, vx, size, back, ahead):
        vx = 0.0
    if blocked_y(grid, x, y, vy, size, back, ahead):
        vy = 0.0
    return vx, vy
