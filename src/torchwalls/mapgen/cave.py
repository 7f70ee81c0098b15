# src/torchwalls/mapgen/cave.py
# Cave carving: random wall fill followed by cellular-automaton smoothing.
# Coordinates are 0-based tile coordinates; the outer rim is always wall.

from __future__ import annotations

from typing import Tuple

from ..grid import Grid
from ..rng import PMRandom
from ..tiles import FLOOR, NEIGHBOURS_8, WALL

XY = Tuple[int, int]

CA_MODES = ("in_place", "snapshot")

# Birth/survival rules for walls (8-neighbour wall counts)
FLOOR_TO_WALL = frozenset((6, 7, 8))
WALL_SURVIVES = frozenset((3, 4, 5, 6, 7, 8))


def in_spawn_window(x: int, y: int, spawn: XY, clearance: int) -> bool:
    sx, sy = spawn
    return abs(x - sx) < clearance and abs(y - sy) < clearance


def random_fill(
    width: int,
    height: int,
    spawn: XY,
    fill_chance: float,
    rng: PMRandom,
    *,
    clearance: int = 4,
    tile_size: int = 4,
) -> Grid:
    """
    Rim cells are walls, the window around the spawn is floor, and every other
    cell is a wall with probability `fill_chance`. The RNG is only drawn for
    cells outside the rim and the window, in row-major order.
    """
    grid = Grid.filled(width, height, FLOOR, tile_size)
    for y in range(height):
        for x in range(width):
            if grid.is_border(x, y):
                grid.set(x, y, WALL)
            elif in_spawn_window(x, y, spawn, clearance):
                grid.set(x, y, FLOOR)
            else:
                grid.set(x, y, WALL if rng.chance(fill_chance) else FLOOR)
    return grid


def wall_neighbours(grid: Grid, x: int, y: int) -> int:
    return sum(grid.cell_at(x + dx, y + dy) for dx, dy in NEIGHBOURS_8)


def next_cell_state(current: int, walls_around: int) -> int:
    if current == FLOOR:
        return WALL if walls_around in FLOOR_TO_WALL else FLOOR
    return WALL if walls_around in WALL_SURVIVES else FLOOR


def smooth_step(grid: Grid, mode: str = "in_place") -> None:
    """
    One automaton generation over the whole grid.

    "in_place" scans row-major and writes each cell back immediately, so later
    cells see neighbours that were already updated this generation.
    "snapshot" reads every neighbour from the previous generation.
    """
    if mode not in CA_MODES:
        raise ValueError(f"unknown CA mode: {mode!r}")
    source = grid if mode == "in_place" else grid.copy()
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_border(x, y):
                grid.set(x, y, WALL)
                continue
            n = wall_neighbours(source, x, y)
            grid.set(x, y, next_cell_state(source.cell_at(x, y), n))


def smooth(grid: Grid, iterations: int, mode: str = "in_place") -> Grid:
    for _ in range(iterations):
        smooth_step(grid, mode)
    return grid


def carve_cave(
    width: int,
    height: int,
    spawn: XY,
    rng: PMRandom,
    *,
    fill_chance: float,
    iterations: int,
    clearance: int = 4,
    mode: str = "in_place",
    tile_size: int = 4,
) -> Grid:
    grid = random_fill(width, height, spawn, fill_chance, rng, clearance=clearance, tile_size=tile_size)
    return smooth(grid, iterations, mode)
