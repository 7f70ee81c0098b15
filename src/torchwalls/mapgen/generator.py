# src/torchwalls/mapgen/generator.py
# Level generator: cave carving + reachability + enemy spawn selection, with
# bounded regeneration when a map leaves no room for the enemy.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

import structlog

from ..config import GameConfig, GeneratorTuning
from ..grid import Grid
from ..rng import PMRandom
from .cave import carve_cave
from .reachability import Reachability, farthest_reachable, flood_fill

log = structlog.get_logger()

XY = Tuple[int, int]


class LevelGenerationError(RuntimeError):
    """No playable level could be produced (the spawn is sealed in)."""


@dataclass
class Level:
    number: int
    grid: Grid
    player_tile: XY
    enemy_tile: XY
    edge_tiles: Set[int] = field(default_factory=set)
    reachable: Set[int] = field(default_factory=set)
    attempts: int = 1
    used_fallback: bool = False

    @property
    def enemy_spawn(self) -> Tuple[float, float]:
        # Enemy positions are tile top-left corners in length units.
        return self.grid.tile_origin(*self.enemy_tile)


def level_from_grid(
    grid: Grid,
    player_tile: XY,
    enemy_tile: XY,
    *,
    number: int = 1,
    min_enemy_distance: int = 20,
) -> Level:
    """Wrap a hand-authored grid into a Level (edge tiles computed by flood fill)."""
    reach = flood_fill(grid, player_tile, min_enemy_distance=min_enemy_distance)
    return Level(
        number=number,
        grid=grid,
        player_tile=player_tile,
        enemy_tile=enemy_tile,
        edge_tiles=reach.edge_tiles,
        reachable=reach.reachable,
    )


def player_spawn_tile(cfg: GameConfig) -> XY:
    px, py = cfg.player_start
    return (int(px // cfg.tile_size), int(py // cfg.tile_size))


def _attempt(
    level: int,
    cfg: GameConfig,
    tuning: GeneratorTuning,
    spawn: XY,
    rng: PMRandom,
) -> Tuple[Grid, Reachability]:
    grid = carve_cave(
        cfg.map_width,
        cfg.map_height,
        spawn,
        rng,
        fill_chance=tuning.fill_chance(level),
        iterations=tuning.ca_iterations(level),
        clearance=tuning.spawn_clearance,
        mode=tuning.ca_mode,
        tile_size=cfg.tile_size,
    )
    reach = flood_fill(grid, spawn, min_enemy_distance=tuning.enemy_min_distance)
    return grid, reach


def generate_level(
    level: int,
    rng: PMRandom,
    cfg: Optional[GameConfig] = None,
    tuning: Optional[GeneratorTuning] = None,
) -> Level:
    cfg = (cfg or GameConfig()).validate()
    tuning = tuning or GeneratorTuning()
    spawn = player_spawn_tile(cfg)

    attempts = max(1, tuning.max_attempts)
    attempt = 0
    while True:
        attempt += 1
        grid, reach = _attempt(level, cfg, tuning, spawn, rng)
        if reach.enemy_candidates:
            enemy = rng.choice(reach.enemy_candidates)
            log.info(
                "Level generated",
                level=level,
                attempt=attempt,
                edge_tiles=len(reach.edge_tiles),
                reachable=len(reach.reachable),
                enemy=enemy,
            )
            return Level(
                number=level,
                grid=grid,
                player_tile=spawn,
                enemy_tile=enemy,
                edge_tiles=reach.edge_tiles,
                reachable=reach.reachable,
                attempts=attempt,
            )
        if attempt >= attempts:
            break
        log.warning("No enemy spawn candidates; regenerating", level=level, attempt=attempt)

    enemy = farthest_reachable(grid, spawn, reach)
    if enemy is None:
        log.error("Spawn is sealed in on every attempt", level=level, attempts=attempts)
        raise LevelGenerationError(
            f"level {level}: no reachable floor beyond the spawn after {attempts} attempts"
        )
    log.warning("Using farthest reachable tile for the enemy", level=level, enemy=enemy)
    return Level(
        number=level,
        grid=grid,
        player_tile=spawn,
        enemy_tile=enemy,
        edge_tiles=reach.edge_tiles,
        reachable=reach.reachable,
        attempts=attempts,
        used_fallback=True,
    )
