from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class GameConfig:
    # Logical canvas; the window is scaled up by `scale`.
    width: int = 128
    height: int = 96
    scale: int = 5

    tile_size: int = 4
    player_size: int = 2
    enemy_size: int = 4
    # Rows of tiles reserved at the top of the screen for the HUD.
    hud_rows: int = 2

    update_rate_ms: float = 16.667
    max_frame_ms: float = 33.333

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0 or self.scale <= 0:
            raise ValueError("screen dimensions and scale must be positive")
        if self.tile_size <= 0 or self.player_size <= 0 or self.enemy_size <= 0:
            raise ValueError("tile/entity sizes must be positive")
        if self.width % self.tile_size or self.height % self.tile_size:
            raise ValueError("screen size must be a multiple of tile_size")
        if self.height // self.tile_size - self.hud_rows < 3:
            raise ValueError("not enough rows left for a playfield")
        if self.update_rate_ms <= 0 or self.max_frame_ms < self.update_rate_ms:
            raise ValueError("max_frame_ms must be >= update_rate_ms > 0")
        return self

    @property
    def map_width(self) -> int:
        return self.width // self.tile_size

    @property
    def map_height(self) -> int:
        return self.height // self.tile_size - self.hud_rows

    @property
    def player_start(self) -> Tuple[float, float]:
        # Player starts a little below the centre of the screen, in playfield units.
        return (self.width / 2, self.height / 2 + 16)


@dataclass(frozen=True)
class SessionTuning:
    # Player
    move_speed: float = 0.5
    turn_rate: float = 0.05
    drag: float = 0.15
    # Collision probe offsets along each axis (behind / ahead of the body)
    probe_back: float = 2.0
    probe_ahead: float = 1.0

    # Enemy
    enemy_lerp: float = 0.06
    proximity: float = 12.0

    # Torch / rays
    plane: float = math.pi / 2
    torch_range: float = 32.0
    ray_step_scale: float = 0.5
    min_ray_step: float = 0.01
    max_ray_steps: int = 100

    # Heart (cosmetic)
    heart_tiers: Tuple[Tuple[float, int], ...] = ((24.0, 160), (40.0, 100))
    resting_bpm: int = 60
    heart_min: float = 4.0
    heart_max: float = 8.0
    heart_lerp: float = 0.15


@dataclass(frozen=True)
class GeneratorTuning:
    spawn_clearance: int = 4
    enemy_min_distance: int = 20
    max_fill_level: int = 3
    fill_denominator: int = 8
    ca_base_iterations: int = 5
    ca_min_iterations: int = 2
    ca_mode: str = "in_place"  # or "snapshot"
    max_attempts: int = 20

    def fill_chance(self, level: int) -> float:
        return min(level, self.max_fill_level) / self.fill_denominator

    def ca_iterations(self, level: int) -> int:
        return max(self.ca_base_iterations - level, self.ca_min_iterations)


@dataclass(frozen=True)
class Settings:
    game: GameConfig = field(default_factory=GameConfig)
    session: SessionTuning = field(default_factory=SessionTuning)
    generator: GeneratorTuning = field(default_factory=GeneratorTuning)
    seed: int = 0x0B6E755A


DEFAULT_SETTINGS = Settings()
