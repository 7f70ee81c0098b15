# tests/test_session.py
from torchwalls.config import SessionTuning
from torchwalls.engine.session import LevelSession, SessionPhase, Transition
from torchwalls.engine.timing import timing_for
from torchwalls.grid import Grid
from torchwalls.input import ActionState
from torchwalls.mapgen.generator import Level, level_from_grid

# 10x10 open room; the player stands on the corner of tile (5,5).
# The enemy waits in the rim corner (0,0): rays never reach it (rim walls are
# checked first) and it is ~28 units away, outside the proximity radius.

def open_room(enemy_tile=(0, 0)):
    return level_from_grid(Grid.bordered(10, 10), (5, 5), enemy_tile)

# Lighting the torch sends the enemy after the player; keep it parked.
PARKED = SessionTuning(enemy_lerp=0.0)

def test_initial_state():
    s = LevelSession(open_room())
    assert s.player.pos == (20, 20)
    assert s.enemy.pos == (0, 0)
    assert s.phase is SessionPhase.ACTIVE
    assert s.torch_timer == 0
    assert s.seen.edge_total == 32
    assert s.explored_percent() == 0

def test_torch_lights_counts_down_and_goes_out():
    s = LevelSession(open_room(), tuning=PARKED)
    out = s.update(ActionState("j"))
    assert out.repathed
    assert s.torch_timer == s.max_torch_timer - 1
    assert s.rays and out.rays_cast == len(s.rays)
    idle = ActionState()
    for _ in range(s.max_torch_timer - 1):
        s.update(idle)
    assert s.torch_timer == 0
    assert s.rays == []

def test_torch_does_not_relight_while_burning():
    s = LevelSession(open_room(), tuning=PARKED)
    s.update(ActionState("j"))
    s.update(ActionState("j"))
    assert s.torch_timer == s.max_torch_timer - 2

def test_spinning_with_the_torch_explores_the_room():
    s = LevelSession(open_room(), tuning=PARKED)
    inp = ActionState("j", "right")
    transitions = []
    for _ in range(2000):
        out = s.update(inp)
        if out.transition is not None:
            transitions.append((out.transition, out.delay_ticks))
        if s.done:
            break
    assert s.done and s.phase is SessionPhase.COMPLETING
    assert s.seen.seen_edge_count == 32
    assert transitions == [(Transition.NEXT_LEVEL, s.timing.completion_delay)]

def test_win_fires_exactly_once():
    lvl = open_room()
    s = LevelSession(lvl)
    edges = sorted(lvl.edge_tiles)
    idle = ActionState()
    for i in edges[:-1]:
        s.seen.mark(i)
    assert s.update(idle).transition is None
    assert s.phase is SessionPhase.ACTIVE

    s.seen.mark(edges[-1])
    out = s.update(idle)
    assert out.transition is Transition.NEXT_LEVEL
    assert out.delay_ticks == timing_for().completion_delay
    assert s.level_end_anim_ticks == s.ticks - 1 + s.timing.end_anim_delay

    for _ in range(5):
        again = s.update(idle)
        assert again.transition is None
        assert again.phase is SessionPhase.COMPLETING

def test_input_is_ignored_while_completing():
    s = LevelSession(open_room())
    for i in s.level.edge_tiles:
        s.seen.mark(i)
    s.update(ActionState())
    angle = s.player.angle
    s.update(ActionState("right", "up", "j"))
    assert s.player.angle == angle
    assert s.torch_timer == 0

def test_empty_edge_set_completes_on_first_tick():
    g = Grid.bordered(6, 6)
    lvl = Level(number=1, grid=g, player_tile=(2, 2), enemy_tile=(0, 0))
    out = LevelSession(lvl).update(ActionState())
    assert out.transition is Transition.NEXT_LEVEL

def test_adjacent_enemy_is_seen_and_repaths_without_catching():
    s = LevelSession(open_room(enemy_tile=(6, 5)))
    assert s.enemy.pos == (24, 20)
    out = s.update(ActionState())
    assert out.transition is None
    assert out.repathed
    assert s.enemy.visible
    assert s.enemy.path and s.enemy.path[0] == s.grid.idx(5, 5)
    assert s.enemy.x < 24.0
    assert s.phase is SessionPhase.ACTIVE

def test_enemy_eventually_catches_a_still_player():
    # Off the tile origin: an enemy settling on the tile centre must overlap.
    s = LevelSession(open_room(enemy_tile=(7, 7)), player_pos=(22.5, 22.5))
    idle = ActionState()
    out = None
    for _ in range(3000):
        out = s.update(idle)
        if out.transition is not None:
            break
    assert out.transition is Transition.GAME_OVER
    assert s.phase is SessionPhase.CAUGHT

def test_caught_session_is_frozen():
    s = LevelSession(open_room(), enemy_pos=(20.5, 20.5))
    out = s.update(ActionState())
    assert out.transition is Transition.GAME_OVER
    ticks = s.ticks
    after = s.update(ActionState("up", "j"))
    assert after.transition is None
    assert after.phase is SessionPhase.CAUGHT
    assert s.ticks == ticks
    assert s.torch_timer == 0

def test_far_enemy_stays_hidden():
    s = LevelSession(open_room())
    s.update(ActionState())
    assert not s.enemy.visible
    assert s.enemy.path == []

def test_heart_rate_tiers():
    s = LevelSession(open_room())
    assert s.heart_rate(10) == 160
    assert s.heart_rate(30) == 100
    assert s.heart_rate(40) == 60
