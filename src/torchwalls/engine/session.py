# src/torchwalls/engine/session.py
# LevelSession: one level's simulation, advanced one fixed tick at a time.
#
# Tick order:
#   1) input (ACTIVE only): thrust / turn / light the torch
#   2) torch countdown
#   3) player collision per axis, move, drag
#   4) proximity check -> enemy visible + repath
#   5) repath (torch just lit, or proximity)
#   6) enemy follows its path (not while COMPLETING)
#   7) player/enemy overlap -> CAUGHT
#   8) heart beat (cosmetic)
#   9) freshness decay
#  10) torch rays (only while the torch burns)
#  11) win check: seen edge tiles == edge tile count -> COMPLETING, once

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

import structlog

from ..config import GameConfig, SessionTuning
from ..interfaces import InputSource
from ..mapgen.generator import Level
from .collisions import lerp, square_overlap
from .enemy import Enemy
from .player import Player
from .raycast import Ray, cast_fan
from .seen import TileSeenRecord
from .timing import TimingModel, timing_for

log = structlog.get_logger()

XY = Tuple[int, int]


class SessionPhase(enum.Enum):
    ACTIVE = "active"
    COMPLETING = "completing"
    CAUGHT = "caught"


class Transition(enum.Enum):
    NEXT_LEVEL = "next_level"
    GAME_OVER = "game_over"


@dataclass
class TickOut:
    phase: SessionPhase
    transition: Optional[Transition] = None
    delay_ticks: int = 0
    repathed: bool = False
    rays_cast: int = 0


class LevelSession:
    def __init__(
        self,
        level: Level,
        *,
        cfg: Optional[GameConfig] = None,
        tuning: Optional[SessionTuning] = None,
        timing: Optional[TimingModel] = None,
        player_pos: Optional[Tuple[float, float]] = None,
        enemy_pos: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.cfg = cfg or GameConfig()
        self.tuning = tuning or SessionTuning()
        self.timing = timing or timing_for(self.cfg.update_rate_ms)

        # Map
        self.level = level
        self.grid = level.grid

        # Entities
        px, py = player_pos or self.grid.tile_origin(*level.player_tile)
        self.player = Player(px, py, size=self.cfg.player_size)
        ex, ey = enemy_pos or level.enemy_spawn
        self.enemy = Enemy(ex, ey, size=self.cfg.enemy_size)

        # Visibility
        self.seen = TileSeenRecord.fresh(
            len(self.grid.buf), self.timing.max_tile_age, level.edge_tiles
        )
        self.rays: List[Ray] = []

        # Torch
        self.max_torch_timer = self.timing.max_torch_ticks
        self.torch_timer = 0

        # Lifecycle
        self.phase = SessionPhase.ACTIVE
        self.done = False
        self.ticks = 0
        self.level_end_anim_ticks = 0

        # Heart (cosmetic)
        self.heart_size = self.tuning.heart_min
        self.enemy_dist = self.player.distance_to(*self.enemy.pos)

    # ---- derived ----
    @property
    def torch_lit(self) -> bool:
        return self.torch_timer > 0

    @property
    def torch_radius_tiles(self) -> float:
        return self.tuning.torch_range / self.grid.tile_size

    def explored_percent(self) -> int:
        return round(self.seen.explored_fraction() * 100)

    def heart_rate(self, dist: float) -> int:
        for limit, bpm in self.tuning.heart_tiers:
            if dist < limit:
                return bpm
        return self.tuning.resting_bpm

    # ---- tick ----
    def _apply_input(self, inp: InputSource) -> bool:
        t = self.tuning
        lit = False
        if inp.is_down("up"):
            self.player.thrust(t.move_speed, 1)
        if inp.is_down("down"):
            self.player.thrust(t.move_speed, -1)
        if inp.is_down("left"):
            self.player.turn(-t.turn_rate)
        if inp.is_down("right"):
            self.player.turn(t.turn_rate)
        if inp.is_down("j") and self.torch_timer == 0:
            self.torch_timer = self.max_torch_timer
            lit = True
        return lit

    def _beat_heart(self) -> None:
        ticks_per_beat = self.timing.ticks_per_beat(self.heart_rate(self.enemy_dist))
        if self.ticks % ticks_per_beat == 0:
            self.heart_size = self.tuning.heart_max
        self.heart_size = lerp(self.heart_size, self.tuning.heart_min, self.tuning.heart_lerp)

    def _cast_rays(self) -> None:
        t = self.tuning
        ts = self.grid.tile_size
        fan = cast_fan(
            self.grid,
            self.player.x / ts,
            self.player.y / ts,
            self.player.angle,
            enemy_tile=self.enemy.tile(self.grid),
            torch_timer=self.torch_timer,
            max_torch_timer=self.max_torch_timer,
            seen=self.seen,
            plane=t.plane,
            radius=self.torch_radius_tiles,
            step_scale=t.ray_step_scale,
            min_step=t.min_ray_step,
            max_steps=t.max_ray_steps,
        )
        self.rays = fan.rays
        if fan.enemy_visible:
            self.enemy.visible = True

    def update(self, inp: InputSource) -> TickOut:
        if self.phase is SessionPhase.CAUGHT:
            return TickOut(phase=self.phase)

        t = self.tuning
        out = TickOut(phase=self.phase)

        # 1) Input
        repath = False
        if self.phase is SessionPhase.ACTIVE:
            repath = self._apply_input(inp)

        # 2) Torch countdown
        if self.torch_timer > 0:
            self.torch_timer -= 1

        # 3) Player
        self.player.step(self.grid, drag=t.drag, back=t.probe_back, ahead=t.probe_ahead)

        # 4) Proximity
        self.enemy.visible = False
        self.enemy_dist = self.player.distance_to(*self.enemy.pos)
        if self.enemy_dist < t.proximity:
            self.enemy.visible = True
            repath = True

        # 5) Repath
        if repath:
            self.enemy.repath(self.grid, self.player.tile(self.grid))
            out.repathed = True

        # 6) Enemy
        if not self.done:
            self.enemy.follow(self.grid, t.enemy_lerp)

        # 7) Caught
        if not self.done and square_overlap(
            self.player.x, self.player.y, self.player.size,
            self.enemy.x, self.enemy.y, self.enemy.size,
        ):
            self.phase = SessionPhase.CAUGHT
            log.info("Player caught", level=self.level.number, ticks=self.ticks)
            self.ticks += 1
            out.phase = self.phase
            out.transition = Transition.GAME_OVER
            return out

        # 8) Heart
        self._beat_heart()

        # 9) Fade
        self.seen.decay()

        # 10) Rays
        if self.torch_timer == 0:
            self.rays = []
        else:
            self._cast_rays()
            out.rays_cast = len(self.rays)

        # 11) Win check
        if not self.done and self.seen.seen_edge_count == self.seen.edge_total:
            self.done = True
            self.phase = SessionPhase.COMPLETING
            self.level_end_anim_ticks = self.ticks + self.timing.end_anim_delay
            out.transition = Transition.NEXT_LEVEL
            out.delay_ticks = self.timing.completion_delay
            log.info(
                "Level explored",
                level=self.level.number,
                ticks=self.ticks,
                edge_tiles=self.seen.edge_total,
            )

        self.ticks += 1
        out.phase = self.phase
        return out
