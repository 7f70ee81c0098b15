# tests/test_cave.py
import pytest

from torchwalls.grid import Grid
from torchwalls.mapgen.cave import carve_cave, next_cell_state, random_fill, smooth_step
from torchwalls.rng import PMRandom
from torchwalls.tiles import FLOOR, WALL

F, W = FLOOR, WALL

def make_order_sensitive_grid():
    # 5x5, rim walls. (1,1) flips to wall on the first visit; in-place updates
    # then push (2,1) over the birth threshold too.
    return Grid.from_rows([
        [W, W, W, W, W],
        [W, F, F, W, W],
        [W, F, W, F, W],
        [W, F, F, F, W],
        [W, W, W, W, W],
    ])

def test_automaton_rules():
    assert next_cell_state(FLOOR, 5) == FLOOR
    assert next_cell_state(FLOOR, 6) == WALL
    assert next_cell_state(WALL, 3) == WALL
    assert next_cell_state(WALL, 2) == FLOOR

def test_in_place_sees_cells_already_updated_this_pass():
    g = make_order_sensitive_grid()
    smooth_step(g, "in_place")
    assert g.cell_at(1, 1) == WALL
    assert g.cell_at(2, 1) == WALL

def test_snapshot_reads_previous_generation_only():
    g = make_order_sensitive_grid()
    smooth_step(g, "snapshot")
    assert g.cell_at(1, 1) == WALL
    assert g.cell_at(2, 1) == FLOOR

def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        smooth_step(Grid.bordered(4, 4), "sideways")

def test_random_fill_keeps_rim_and_spawn_window():
    spawn = (16, 16)
    g = random_fill(32, 22, spawn, 1.0, PMRandom(5), clearance=4)
    for x, y in g.border_cells():
        assert g.cell_at(x, y) == WALL
    for y in range(13, 20):
        for x in range(13, 20):
            assert g.cell_at(x, y) == FLOOR
    # everything else is wall at fill chance 1
    assert g.count(FLOOR) == 7 * 7

def test_random_fill_only_draws_for_interior_cells_outside_the_window():
    rng = PMRandom(42)
    random_fill(10, 10, (5, 5), 0.5, rng, clearance=2)
    # 8x8 interior minus the 3x3 window
    ref = PMRandom(42)
    for _ in range(64 - 9):
        ref.next32()
    assert rng.state == ref.state

@pytest.mark.parametrize("mode", ["in_place", "snapshot"])
def test_carve_cave_rim_stays_wall(mode):
    g = carve_cave(32, 22, (16, 16), PMRandom(2024), fill_chance=0.375, iterations=3, mode=mode)
    assert len(g.buf) == 32 * 22
    for x, y in g.border_cells():
        assert g.cell_at(x, y) == WALL

@pytest.mark.parametrize("mode", ["in_place", "snapshot"])
def test_solid_fill_leaves_only_the_spawn_window(mode):
    # Window corners see 5 walls, edges 3: nothing in the window is ever born a wall.
    g = carve_cave(32, 22, (16, 16), PMRandom(1), fill_chance=1.0, iterations=5, mode=mode)
    assert g.count(FLOOR) == 49
    assert g.cell_at(16, 16) == FLOOR
