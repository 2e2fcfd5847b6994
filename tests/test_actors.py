import math

import pytest

from pyjump.domain.actors import (
    COLLECTIBLE_SIZE,
    HAZARD_SIZE,
    PLAYER_SIZE,
    Collectible,
    Hazard,
    Player,
    create_actor,
    update_actor,
)
from pyjump.domain.input_state import KeyState
from pyjump.domain.kinds import ActorKind, Status
from pyjump.domain.level import ActorSpawn, Level
from pyjump.domain.vec import Vec
from pyjump.domain.world import World


class HalfRandom:
    def random(self) -> float:
        return 0.5


OPEN_ROOM = Level.parse("""
.....
.....
.....
.....
#####
""")

LOW_CEILING = Level.parse("""
#####
.....
.....
.....
#####
""")


def world_of(level: Level, *actors) -> World:
    return World(level=level, actors=tuple(actors), status=Status.IN_PROGRESS)


def player_at(x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Player:
    return Player(position=Vec(x, y), velocity=Vec(vx, vy))


# ----- Spawning -----

def test_player_spawns_above_its_marker():
    p = create_actor(ActorSpawn(ActorKind.PLAYER, Vec(3, 4), "@"))
    assert p == Player(position=Vec(3, 2.5), velocity=Vec(0.0, 0.0))
    assert p.size == PLAYER_SIZE


def test_collectible_phase_comes_from_random_source():
    c = create_actor(ActorSpawn(ActorKind.COLLECTIBLE, Vec(2, 2), "o"), HalfRandom())
    assert c.position == c.base_position == Vec(2, 2)
    assert c.phase == pytest.approx(math.pi)
    assert c.size == COLLECTIBLE_SIZE


@pytest.mark.parametrize(
    "char, velocity, reset",
    [
        ("=", Vec(2.0, 0.0), None),
        ("|", Vec(0.0, 2.0), None),
        ("v", Vec(0.0, 3.0), Vec(5, 1)),
    ],
)
def test_hazard_spawn_velocities(char, velocity, reset):
    h = create_actor(ActorSpawn(ActorKind.HAZARD, Vec(5, 1), char))
    assert h == Hazard(position=Vec(5, 1), velocity=velocity, reset_position=reset)
    assert h.size == HAZARD_SIZE


# ----- Player -----

def test_player_runs_right_while_standing():
    p = player_at(1.0, 2.5)
    moved = update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState(right=True))

    assert moved.position.x == pytest.approx(1.7)
    assert moved.position.y == 2.5
    assert moved.velocity == Vec(7.0, 0.0)


def test_left_and_right_cancel_out():
    p = player_at(1.0, 2.5)
    moved = update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState(left=True, right=True))
    assert moved.position.x == 1.0
    assert moved.velocity.x == 0.0


def test_player_stops_at_side_wall():
    p = player_at(4.0, 2.5)
    moved = update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState(right=True))
    assert moved.position.x == 4.0
    assert moved.velocity.x == 0.0


def test_player_falls_under_gravity():
    p = player_at(1.0, 0.5)
    moved = update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState())
    assert moved.velocity.y == pytest.approx(3.0)
    assert moved.position.y == pytest.approx(0.8)


def test_up_on_the_ground_jumps():
    p = player_at(1.0, 2.5)
    moved = update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState(up=True))
    assert moved.velocity.y == -17.0
    assert moved.position.y == pytest.approx(0.8)


def test_hitting_the_ceiling_stops_upward_motion_even_with_up_held():
    p = player_at(1.0, 1.0, vy=-10.0)
    moved = update_actor(p, 0.1, world_of(LOW_CEILING, p), KeyState(up=True))
    assert moved.velocity.y == 0.0
    assert moved.position.y == 1.0


def test_player_update_does_not_mutate_input():
    p = player_at(1.0, 0.5)
    update_actor(p, 0.1, world_of(OPEN_ROOM, p), KeyState(right=True))
    assert p == player_at(1.0, 0.5)


# ----- Collectible -----

def test_collectible_wobbles_around_fixed_base():
    base = Vec(2.0, 2.0)
    c = Collectible(position=base, base_position=base, phase=0.0)
    world = world_of(OPEN_ROOM, c)

    for _ in range(50):
        c = update_actor(c, 0.03, world, KeyState())
        assert c.base_position == base
        assert c.position.x == base.x
        assert c.position.y == pytest.approx(base.y + math.sin(c.phase) * 0.07)
        assert abs(c.position.y - base.y) <= 0.07 + 1e-12

    assert c.phase == pytest.approx(50 * 0.03 * 8)


# ----- Hazard -----

def test_hazard_moves_freely():
    h = Hazard(position=Vec(1.0, 1.0), velocity=Vec(2.0, 0.0))
    moved = update_actor(h, 0.1, world_of(OPEN_ROOM, h), KeyState())
    assert moved.position.x == pytest.approx(1.2)
    assert moved.velocity == Vec(2.0, 0.0)


def test_hazard_bounces_off_wall_keeping_old_position():
    h = Hazard(position=Vec(3.9, 1.0), velocity=Vec(2.0, 0.0))
    moved = update_actor(h, 0.1, world_of(OPEN_ROOM, h), KeyState())
    assert moved.position == Vec(3.9, 1.0)
    assert moved.velocity == Vec(-2.0, 0.0)


@pytest.mark.parametrize("y", [0.4, 1.95, 2.9])
def test_dripping_hazard_snaps_back_to_spawn(y):
    spawn = Vec(2.0, 0.0)
    h = Hazard(position=Vec(2.0, y), velocity=Vec(0.0, 3.0), reset_position=spawn)
    world = world_of(OPEN_ROOM, h)

    for _ in range(40):
        before = h
        h = update_actor(h, 0.1, world, KeyState())
        assert h.velocity == Vec(0.0, 3.0)
        if h.position.y < before.position.y:
            assert h.position == spawn
            break
    else:
        pytest.fail("dripping hazard never reset")
