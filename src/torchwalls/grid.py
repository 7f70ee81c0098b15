from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import FLOOR, WALL

XY = Tuple[int, int]


@dataclass
class Grid:
    """Row-major tile map: `buf[row * width + col]`, 0 = floor, 1 = wall.

    Lookups outside the map report WALL, so callers never index past the
    buffer. Generated levels also keep a solid wall border.
    """

    buf: List[int]
    width: int
    height: int
    tile_size: int = 4

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if len(self.buf) != self.width * self.height:
            raise ValueError(
                f"grid buffer has {len(self.buf)} cells, expected {self.width * self.height}"
            )

    @classmethod
    def filled(cls, width: int, height: int, cell: int = WALL, tile_size: int = 4) -> "Grid":
        return cls(buf=[cell] * (width * height), width=width, height=height, tile_size=tile_size)

    @classmethod
    def bordered(cls, width: int, height: int, tile_size: int = 4) -> "Grid":
        """Open floor surrounded by a one-tile wall border."""
        g = cls.filled(width, height, FLOOR, tile_size)
        g.fill_border()
        return g

    @classmethod
    def from_rows(cls, rows: List[List[int]], tile_size: int = 4) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        buf = [c for row in rows for c in row]
        return cls(buf=buf, width=width, height=height, tile_size=tile_size)

    # ---------- indexing ----------
    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def xy(self, index: int) -> XY:
        return (index % self.width, index // self.width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def cell_at(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return WALL
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def is_wall_tile(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == WALL

    def is_floor_tile(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == FLOOR

    # ---------- continuous coordinates ----------
    def tile_of(self, x: float, y: float) -> XY:
        return (math.floor(x / self.tile_size), math.floor(y / self.tile_size))

    def is_wall(self, x: float, y: float) -> bool:
        tx, ty = self.tile_of(x, y)
        return self.is_wall_tile(tx, ty)

    def tile_origin(self, x: int, y: int) -> Tuple[float, float]:
        return (x * self.tile_size, y * self.tile_size)

    def tile_centre(self, x: int, y: int) -> Tuple[float, float]:
        half = self.tile_size / 2
        return (x * self.tile_size + half, y * self.tile_size + half)

    # ---------- bulk ----------
    def fill_border(self) -> None:
        for x in range(self.width):
            self.set(x, 0, WALL)
            self.set(x, self.height - 1, WALL)
        for y in range(self.height):
            self.set(0, y, WALL)
            self.set(self.width - 1, y, WALL)

    def border_cells(self) -> Iterator[XY]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_border(x, y):
                    yield (x, y)

    def count(self, cell: int) -> int:
        return sum(1 for c in self.buf if c == cell)

    def copy(self) -> "Grid":
        return Grid(buf=list(self.buf), width=self.width, height=self.height, tile_size=self.tile_size)

    def as_matrix(self) -> List[List[int]]:
        return [self.buf[y * self.width:(y + 1) * self.width] for y in range(self.height)]
