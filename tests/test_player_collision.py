# tests/test_player_collision.py
import math

import pytest

from torchwalls.engine.collisions import blocked_x, blocked_y, lerp, resolve_axes, square_overlap
from torchwalls.engine.player import Player
from torchwalls.grid import Grid

# 10x10 tiles of 4 units, rim walls: open floor spans x/y in [4, 36).

def test_lerp():
    assert lerp(0.0, 10.0, 0.25) == 2.5
    assert lerp(3.0, 3.0, 0.9) == 3.0

def test_square_overlap_is_strict():
    assert square_overlap(0, 0, 2, 1, 1, 4)
    assert not square_overlap(0, 0, 2, 2, 0, 4)   # touching edges only
    assert not square_overlap(0, 0, 2, 5, 5, 4)

def test_probes_behind_and_ahead():
    g = Grid.bordered(10, 10)
    # Moving left from x=6: x + vx - 2 = 3.5 lands in the rim.
    assert blocked_x(g, 6.0, 20.0, -0.5, 2.0)
    # Moving right near the east rim: x + vx + size + 1 = 36.5.
    assert blocked_x(g, 33.0, 20.0, 0.5, 2.0)
    assert not blocked_x(g, 20.0, 20.0, 0.5, 2.0)
    assert blocked_y(g, 20.0, 6.0, -0.5, 2.0)
    assert not blocked_y(g, 20.0, 20.0, -0.5, 2.0)

def test_blocked_axis_is_cancelled_independently():
    g = Grid.bordered(10, 10)
    vx, vy = resolve_axes(g, 6.0, 20.0, -0.5, 0.5, 2.0)
    assert vx == 0.0
    assert vy == 0.5

def test_thrust_follows_facing():
    p = Player(20.0, 20.0, angle=0.0)
    p.thrust(0.5)
    assert p.vx == pytest.approx(0.5)
    assert p.vy == pytest.approx(0.0)
    p.thrust(0.5, -1)
    assert p.vx == pytest.approx(-0.5)

def test_step_moves_then_drags():
    g = Grid.bordered(10, 10)
    p = Player(20.0, 20.0, angle=0.0)
    p.thrust(0.5)
    p.step(g, drag=0.15)
    assert p.x == pytest.approx(20.5)
    assert p.vx == pytest.approx(0.425)

def test_player_slides_but_never_enters_walls():
    g = Grid.bordered(10, 10)
    p = Player(20.0, 20.0, angle=math.pi * 1.25)   # up-left, into the corner
    for _ in range(400):
        p.thrust(0.5)
        p.step(g, drag=0.15)
        assert not g.is_wall(p.x, p.y)
        assert not g.is_wall(p.x + p.size, p.y + p.size)
    assert p.x < 8.0 and p.y < 8.0

def test_tile_and_centre():
    g = Grid.bordered(10, 10)
    p = Player(21.0, 13.0)
    assert p.tile(g) == (5, 3)
    assert p.centre == (22.0, 14.0)
