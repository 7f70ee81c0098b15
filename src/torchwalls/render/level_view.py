# src/torchwalls/render/level_view.py
# Draws a LevelSession through the Renderer protocol (no pygame here).
# Wall tiles only draw the edges that face floor:
#   fresh  -> full edge lines
#   faded  -> a one-pixel dot at each edge midpoint
# Once the level is explored the whole map is drawn, swirling away after the
# end animation starts.

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..grid import Grid
from ..interfaces import Renderer
from ..tiles import FLOOR, WALL
from ..ui.hud import draw_hud

if TYPE_CHECKING:
    from ..engine.session import LevelSession


def _wall_edges(r: Renderer, grid: Grid, x: int, y: int, tx: float, ty: float) -> None:
    ts = grid.tile_size
    if grid.cell_at(x, y - 1) == FLOOR:
        r.line(tx, ty, tx + ts, ty)
    if grid.cell_at(x + 1, y) == FLOOR:
        r.line(tx + ts, ty, tx + ts, ty + ts)
    if grid.cell_at(x, y + 1) == FLOOR:
        r.line(tx, ty + ts, tx + ts, ty + ts)
    if grid.cell_at(x - 1, y) == FLOOR:
        r.line(tx, ty, tx, ty + ts)


def _wall_dots(r: Renderer, grid: Grid, x: int, y: int, tx: float, ty: float) -> None:
    ts = grid.tile_size
    half = ts / 2
    if grid.cell_at(x, y - 1) == FLOOR:
        r.rect(tx + half, ty, 1, 1)
    if grid.cell_at(x + 1, y) == FLOOR:
        r.rect(tx + ts, ty + half, 1, 1)
    if grid.cell_at(x, y + 1) == FLOOR:
        r.rect(tx + half, ty + ts, 1, 1)
    if grid.cell_at(x - 1, y) == FLOOR:
        r.rect(tx, ty + half, 1, 1)


def swirl_offset(y: int, ty: float, anim_ticks: int, screen_width: float) -> float:
    if anim_ticks <= 0:
        return 0.0
    return (2 * math.cos(y / 3)) * (anim_ticks / 2) * (1 + ty / screen_width)


def draw_map(r: Renderer, s: "LevelSession") -> None:
    grid = s.grid
    ts = grid.tile_size
    fade_age = s.timing.fade_tile_age
    for y in range(grid.height):
        for x in range(grid.width):
            index = grid.idx(x, y)
            if grid.buf[index] != WALL:
                continue
            tx, ty = x * ts, y * ts
            if s.done:
                tx += swirl_offset(y, ty, s.ticks - s.level_end_anim_ticks, r.width)
                _wall_edges(r, grid, x, y, tx, ty)
            elif s.seen.is_seen(index):
                if s.seen.is_faded(index, fade_age):
                    _wall_dots(r, grid, x, y, tx, ty)
                else:
                    _wall_edges(r, grid, x, y, tx, ty)


def draw_player(r: Renderer, s: "LevelSession") -> None:
    p = s.player
    r.rect(p.x, p.y, p.size, p.size)
    # Torch: a short bar just ahead of the player
    ox = p.x + math.cos(p.angle) + p.size / 2
    oy = p.y + math.sin(p.angle) + p.size / 2
    x0 = ox + math.cos(p.angle + math.pi * 0.4) * 2
    y0 = oy + math.sin(p.angle + math.pi * 0.4) * 2
    x1 = ox + math.cos(p.angle + math.pi * 0.6) * 2
    y1 = oy + math.sin(p.angle + math.pi * 0.6) * 2
    r.line(x0, y0, x1, y1)


def draw_rays(r: Renderer, s: "LevelSession") -> None:
    p = s.player
    cx, cy = p.centre
    ts = s.grid.tile_size
    for ray in s.rays:
        if ray.last_open is not None:
            mx, my = ray.last_open
            r.line(cx, cy, mx * ts, my * ts, True)
        else:
            a = p.angle + ray.angle
            length = s.tuning.torch_range
            r.line(cx, cy, cx + math.cos(a) * length, cy + math.sin(a) * length, True)


def draw_session(r: Renderer, s: "LevelSession", level_number: int) -> None:
    r.clear()
    r.push()
    r.translate(0, s.grid.tile_size * s.cfg.hud_rows)

    if not s.done:
        draw_player(r, s)
    if s.enemy.visible:
        r.rect(s.enemy.x, s.enemy.y, 2, 2)
    draw_rays(r, s)
    draw_map(r, s)

    r.pop()
    draw_hud(
        r,
        seen=s.seen.seen_edge_count,
        total=s.seen.edge_total,
        level=level_number,
        heart_size=s.heart_size,
        max_heart=s.tuning.heart_max,
    )
