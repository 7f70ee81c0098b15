# tests/test_raycast.py
import math

import pytest

from torchwalls.engine.raycast import HIT_ENEMY, HIT_WALL, cast_fan, cast_ray, fan_offsets, fan_step
from torchwalls.engine.seen import TileSeenRecord
from torchwalls.grid import Grid

def test_fan_step_shrinks_with_timer_and_is_floored():
    assert fan_step(119, 119, 0.5, 0.01) == 0.5
    assert fan_step(60, 120, 0.5, 0.01) == 0.25
    assert fan_step(0, 119, 0.5, 0.01) == 0.01
    assert fan_step(5, 0, 0.5, 0.01) == 0.01

def test_fan_offsets_span_the_plane():
    offs = list(fan_offsets(math.pi / 2, 0.5))
    assert offs[0] == -math.pi / 4
    assert offs[-1] >= math.pi / 4
    assert offs[-2] < math.pi / 4
    with pytest.raises(ValueError):
        list(fan_offsets(1.0, 0.0))

def test_ray_east_hits_rim():
    g = Grid.bordered(10, 10)
    hit = cast_ray(g, 5.5, 5.5, 0.0, enemy_tile=None)
    assert hit.kind == HIT_WALL
    assert hit.tile == (9, 5)
    assert hit.last_open == (8, 5)
    assert hit.distance == pytest.approx(3.5)

def test_enemy_tile_stops_the_ray_before_walls():
    g = Grid.bordered(10, 10)
    hit = cast_ray(g, 5.5, 5.5, math.pi, enemy_tile=(3, 5))
    assert hit.kind == HIT_ENEMY
    assert hit.tile == (3, 5)
    assert hit.distance == pytest.approx(1.5)

def test_step_bound_gives_no_hit():
    g = Grid.filled(300, 3, 0)
    assert cast_ray(g, 1.5, 1.5, 0.0, enemy_tile=None, max_steps=100) is None

def test_fan_marks_walls_within_radius_only():
    g = Grid.bordered(30, 10)
    seen = TileSeenRecord.fresh(len(g.buf), max_age=100)
    # Facing east from x=2.5: the east rim is far out of an 8-tile radius,
    # while the north/south rim at 4-5 tiles is inside the fan's edges.
    fan = cast_fan(g, 2.5, 5.5, 0.0, enemy_tile=None, torch_timer=119, max_torch_timer=119, seen=seen)
    assert fan.rays
    assert not seen.is_seen(g.idx(29, 5))
    assert all(seen.is_seen(i) for i in fan.marked)
    for ray in fan.rays:
        if ray.hit:
            assert ray.distance < 8.0
        else:
            assert ray.tile is None and ray.last_open is None

def test_fan_reports_enemy():
    g = Grid.bordered(10, 10)
    fan = cast_fan(g, 5.5, 5.5, 0.0, enemy_tile=(7, 5), torch_timer=119, max_torch_timer=119)
    assert fan.enemy_visible
    assert any(r.kind == HIT_ENEMY for r in fan.rays)

def test_dimmer_torch_casts_more_rays():
    g = Grid.bordered(10, 10)
    bright = cast_fan(g, 5.5, 5.5, 0.0, enemy_tile=None, torch_timer=119, max_torch_timer=119)
    dim = cast_fan(g, 5.5, 5.5, 0.0, enemy_tile=None, torch_timer=10, max_torch_timer=119)
    assert len(dim.rays) > len(bright.rays)
