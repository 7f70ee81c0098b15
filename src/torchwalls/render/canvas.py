# src/torchwalls/render/canvas.py
# pygame implementation of the Renderer protocol.
# Draws white-on-black into a small logical surface and scales it up to the
# window on present(). Keeps a 2D affine transform (a, b, c, d, e, f) the same
# way a canvas context does: x' = a*x + c*y + e, y' = b*x + d*y + f.

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

Matrix = Tuple[float, float, float, float, float, float]
IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Guard against runaway lines from bad coordinates.
MAX_LINE_PIXELS = 1_000_000


def bresenham(x0: int, y0: int, x1: int, y1: int) -> List[Tuple[int, int]]:
    pts: List[Tuple[int, int]] = []
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        if len(pts) > MAX_LINE_PIXELS:
            raise ValueError("line longer than a million pixels")
        pts.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            if x == x1:
                break
            err += dy
            x += sx
        if e2 <= dx:
            if y == y1:
                break
            err += dx
            y += sy
    return pts


class PygameCanvas:
    def __init__(self, width: int, height: int, scale: int = 5, font: Optional[pygame.font.Font] = None) -> None:
        self.width = width
        self.height = height
        self.scale = scale
        self.surface = pygame.Surface((width, height))
        self.matrix: Matrix = IDENTITY
        self._stack: List[Matrix] = []
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, 10)
        self.font = font
        self.char_width = 5
        self.char_height = 6

    # ---------- transform ----------
    def translate(self, x: float, y: float) -> None:
        a, b, c, d, e, f = self.matrix
        self.matrix = (a, b, c, d, a * x + c * y + e, b * x + d * y + f)

    def rotate(self, angle: float) -> None:
        a, b, c, d, e, f = self.matrix
        cos, sin = math.cos(angle), math.sin(angle)
        self.matrix = (a * cos + c * sin, b * cos + d * sin, c * cos - a * sin, d * cos - b * sin, e, f)

    def reset_transform(self) -> None:
        self.matrix = IDENTITY

    def push(self) -> None:
        self._stack.append(self.matrix)

    def pop(self) -> None:
        self.matrix = self._stack.pop() if self._stack else IDENTITY

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        a, b, c, d, e, f = self.matrix
        return (a * x + c * y + e, b * x + d * y + f)

    # ---------- drawing ----------
    def clear(self, x: float = 0, y: float = 0, w: Optional[float] = None, h: Optional[float] = None) -> None:
        w = self.width if w is None else w
        h = self.height if h is None else h
        self.surface.fill(BLACK, pygame.Rect(int(x), int(y), int(w), int(h)))

    def line(self, x0: float, y0: float, x1: float, y1: float, dotted: bool = False) -> None:
        tx0, ty0 = self.transform_point(x0, y0)
        tx1, ty1 = self.transform_point(x1, y1)
        pts = bresenham(math.floor(tx0), math.floor(ty0), math.floor(tx1), math.floor(ty1))
        for i, (px, py) in enumerate(pts):
            if dotted and i % 4:
                continue
            if 0 <= px < self.width and 0 <= py < self.height:
                self.surface.set_at((px, py), WHITE)

    def rect(self, x: float, y: float, w: float, h: float, outline: bool = False) -> None:
        corners = [
            self.transform_point(x, y),
            self.transform_point(x + w, y),
            self.transform_point(x + w, y + h),
            self.transform_point(x, y + h),
        ]
        if outline:
            pygame.draw.polygon(self.surface, WHITE, corners, 1)
        else:
            pygame.draw.polygon(self.surface, WHITE, corners)

    def text(self, text: str, x: float, y: float, *attrs: str) -> None:
        x_off = 0.0
        y_off = 0.0
        shadow = False
        text_width = len(text) * self.char_width
        for attr in attrs:
            if attr == "center":
                x_off = -math.ceil(text_width / 2)
            elif attr == "left":
                x_off = 0
            elif attr == "right":
                x_off = -text_width
            elif attr == "middle":
                y_off -= self.char_height / 2
            elif attr == "bottom":
                y_off -= self.char_height
            elif attr == "shadow":
                shadow = True
        tx, ty = self.transform_point(x + x_off, y + y_off)
        img = self.font.render(text.upper(), False, WHITE)
        if shadow:
            self.surface.blit(self.font.render(text.upper(), False, BLACK), (tx, ty + 1))
        self.surface.blit(img, (tx, ty))

    # ---------- output ----------
    def present(self, window: pygame.Surface) -> None:
        scaled = pygame.transform.scale(self.surface, (self.width * self.scale, self.height * self.scale))
        window.blit(scaled, (0, 0))
