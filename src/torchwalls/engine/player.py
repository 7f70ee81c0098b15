# src/torchwalls/engine/player.py
# Engine-only Player: continuous position, velocity with drag, facing angle,
# and axis-independent wall collision.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..grid import Grid
from .collisions import lerp, resolve_axes


@dataclass
class Player:
    x: float
    y: float
    angle: float = math.pi * 1.5  # facing up the screen
    vx: float = 0.0
    vy: float = 0.0
    size: float = 2.0

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def centre(self) -> Tuple[float, float]:
        half = self.size / 2
        return (self.x + half, self.y + half)

    def tile(self, grid: Grid) -> Tuple[int, int]:
        return grid.tile_of(self.x, self.y)

    # ------------- input -------------
    def thrust(self, speed: float, direction: int = 1) -> None:
        """Set velocity along the facing (direction=-1 backs up)."""
        self.vx = direction * math.cos(self.angle) * speed
        self.vy = direction * math.sin(self.angle) * speed

    def turn(self, delta: float) -> None:
        self.angle += delta

    # ------------- core tick -------------
    def step(self, grid: Grid, *, drag: float, back: float = 2.0, ahead: float = 1.0) -> None:
        self.vx, self.vy = resolve_axes(grid, self.x, self.y, self.vx, self.vy, self.size, back, ahead)
        self.x += self.vx
        self.y += self.vy
        self.vx = lerp(self.vx, 0.0, drag)
        self.vy = lerp(self.vy, 0.0, drag)

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)
