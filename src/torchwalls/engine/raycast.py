# src/torchwalls/engine/raycast.py
# Torch ray fan (grid DDA).
# Positions here are in tile units: world length / tile_size.
#
# Fan layout:
#   offsets start at -plane/2; after casting a ray, stop if the offset is
#   already >= plane/2, else advance by
#       max(min_step, step_scale * torch_timer / max_torch_timer)
#   so the fan gets denser as the torch burns down.
#
# Each ray steps tile boundaries until it enters a wall tile or the enemy's
# tile, or runs out of steps. A hit counts only inside the torch radius.

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..grid import Grid
from .seen import TileSeenRecord

XY = Tuple[int, int]

HIT_WALL = "wall"
HIT_ENEMY = "enemy"


@dataclass
class Ray:
    angle: float                       # offset from the facing angle
    tile: Optional[XY] = None          # tile hit within range, else None
    last_open: Optional[XY] = None     # last tile the ray crossed before the hit
    distance: Optional[float] = None   # tile units along the ray
    kind: Optional[str] = None         # HIT_WALL / HIT_ENEMY

    @property
    def hit(self) -> bool:
        return self.tile is not None


@dataclass
class FanResult:
    rays: List[Ray] = field(default_factory=list)
    enemy_visible: bool = False
    marked: List[int] = field(default_factory=list)


@dataclass
class DdaHit:
    tile: XY
    last_open: XY
    distance: float
    kind: str


def fan_step(torch_timer: int, max_torch_timer: int, step_scale: float, min_step: float) -> float:
    frac = torch_timer / max_torch_timer if max_torch_timer > 0 else 0.0
    return max(min_step, step_scale * frac)


def fan_offsets(plane: float, step: float) -> Iterator[float]:
    if step <= 0:
        raise ValueError("fan step must be positive")
    angle = -plane / 2
    while True:
        yield angle
        if angle >= plane / 2:
            return
        angle += step


def cast_ray(
    grid: Grid,
    pos_x: float,
    pos_y: float,
    angle: float,
    enemy_tile: Optional[XY],
    max_steps: int = 100,
) -> Optional[DdaHit]:
    """Walk one ray; returns the first wall/enemy tile entered, or None."""
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)

    map_x = math.floor(pos_x)
    map_y = math.floor(pos_y)

    delta_x = math.inf if dir_x == 0 else abs(1 / dir_x)
    delta_y = math.inf if dir_y == 0 else abs(1 / dir_y)

    # A zero direction component never wins the side comparison.
    if dir_x < 0:
        step_x = -1
        side_x = (pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = math.inf if dir_x == 0 else (map_x + 1 - pos_x) * delta_x
    if dir_y < 0:
        step_y = -1
        side_y = (pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = math.inf if dir_y == 0 else (map_y + 1 - pos_y) * delta_y

    prev = (map_x, map_y)
    for _ in range(max_steps):
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            dist = side_x - delta_x
        else:
            side_y += delta_y
            map_y += step_y
            dist = side_y - delta_y

        if grid.is_wall_tile(map_x, map_y):
            return DdaHit((map_x, map_y), prev, dist, HIT_WALL)
        if enemy_tile is not None and (map_x, map_y) == enemy_tile:
            return DdaHit((map_x, map_y), prev, dist, HIT_ENEMY)
        prev = (map_x, map_y)
    return None


def cast_fan(
    grid: Grid,
    pos_x: float,
    pos_y: float,
    facing: float,
    *,
    enemy_tile: Optional[XY],
    torch_timer: int,
    max_torch_timer: int,
    seen: Optional[TileSeenRecord] = None,
    plane: float = math.pi / 2,
    radius: float = 8.0,
    step_scale: float = 0.5,
    min_step: float = 0.01,
    max_steps: int = 100,
) -> FanResult:
    """
    Cast the whole fan. Wall hits inside `radius` are marked in `seen`;
    an enemy hit inside `radius` sets `enemy_visible`.
    """
    out = FanResult()
    step = fan_step(torch_timer, max_torch_timer, step_scale, min_step)
    for offset in fan_offsets(plane, step):
        hit = cast_ray(grid, pos_x, pos_y, facing + offset, enemy_tile, max_steps)
        if hit is None or hit.distance >= radius:
            out.rays.append(Ray(angle=offset))
            continue
        out.rays.append(Ray(offset, hit.tile, hit.last_open, hit.distance, hit.kind))
        if hit.kind == HIT_WALL:
            index = grid.idx(*hit.tile) if grid.in_bounds(*hit.tile) else None
            if index is not None:
                out.marked.append(index)
                if seen is not None:
                    seen.mark(index)
        else:
            out.enemy_visible = True
    return out
