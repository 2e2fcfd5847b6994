from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Union

from pyjump.domain.collision import touches
from pyjump.domain.input_state import KeyState
from pyjump.domain.kinds import ActorKind, CellKind, Status
from pyjump.domain.level import ActorSpawn
from pyjump.domain.rng import RandomSource, random_phase
from pyjump.domain.vec import Vec

if TYPE_CHECKING:
    from pyjump.domain.world import World


# Physics, in grid units and seconds.
GRAVITY = 30.0
PLAYER_X_SPEED = 7.0
JUMP_SPEED = 17.0
WOBBLE_SPEED = 8.0
WOBBLE_DIST = 0.07

PLAYER_SIZE = Vec(0.8, 1.5)
PLAYER_SPAWN_OFFSET = Vec(0.0, -1.5)
COLLECTIBLE_SIZE = Vec(0.6, 0.6)
HAZARD_SIZE = Vec(1.0, 1.0)

HAZARD_VELOCITIES: dict[str, Vec] = {
    "=": Vec(2.0, 0.0),
    "|": Vec(0.0, 2.0),
    "v": Vec(0.0, 3.0),
}
DRIPPING_HAZARDS = frozenset("v")


@dataclass(frozen=True)
class Player:
    kind: ClassVar[ActorKind] = ActorKind.PLAYER

    position: Vec
    velocity: Vec
    size: Vec = PLAYER_SIZE


@dataclass(frozen=True)
class Collectible:
    kind: ClassVar[ActorKind] = ActorKind.COLLECTIBLE

    position: Vec
    base_position: Vec  # wobble anchor, never moves
    phase: float        # radians
    size: Vec = COLLECTIBLE_SIZE


@dataclass(frozen=True)
class Hazard:
    kind: ClassVar[ActorKind] = ActorKind.HAZARD

    position: Vec
    velocity: Vec
    reset_position: Vec | None = None  # set only for dripping hazards
    size: Vec = HAZARD_SIZE


Actor = Union[Player, Collectible, Hazard]


# ----- Construction -----

def create_actor(spawn: ActorSpawn, rng: RandomSource | None = None) -> Actor:
    pos = spawn.position
    if spawn.kind is ActorKind.PLAYER:
        return Player(position=pos.add(PLAYER_SPAWN_OFFSET), velocity=Vec(0.0, 0.0))
    if spawn.kind is ActorKind.COLLECTIBLE:
        phase = random_phase(rng if rng is not None else random)
        return Collectible(position=pos, base_position=pos, phase=phase)
    reset = pos if spawn.char in DRIPPING_HAZARDS else None
    return Hazard(position=pos, velocity=HAZARD_VELOCITIES[spawn.char], reset_position=reset)


# ----- Per-frame update -----

def _update_player(p: Player, dt: float, world: World, keys: KeyState) -> Player:
    level = world.level

    # Horizontal axis
    x_speed = 0.0
    if keys.left:
        x_speed -= PLAYER_X_SPEED
    if keys.right:
        x_speed += PLAYER_X_SPEED
    moved_x = replace(p, position=p.position.add(Vec(x_speed * dt, 0.0)))
    if touches(level, moved_x, CellKind.WALL):
        x_speed = 0.0
    pos = p.position.add(Vec(x_speed * dt, 0.0))

    # Vertical axis, tested from the horizontally resolved spot
    y_speed = p.velocity.y + GRAVITY * dt
    moved_y = replace(p, position=pos.add(Vec(0.0, y_speed * dt)))
    if touches(level, moved_y, CellKind.WALL):
        if keys.up and y_speed > 0:
            y_speed = -JUMP_SPEED
        else:
            y_speed = 0.0
    pos = pos.add(Vec(0.0, y_speed * dt))

    return Player(position=pos, velocity=Vec(x_speed, y_speed), size=p.size)


def _update_collectible(c: Collectible, dt: float, world: World, keys: KeyState) -> Collectible:
    phase = c.phase + dt * WOBBLE_SPEED
    offset = math.sin(phase) * WOBBLE_DIST
    return replace(c, position=c.base_position.add(Vec(0.0, offset)), phase=phase)


def _update_hazard(h: Hazard, dt: float, world: World, keys: KeyState) -> Hazard:
    moved = replace(h, position=h.position.add(h.velocity.scale(dt)))
    if not touches(world.level, moved, CellKind.WALL):
        return moved
    if h.reset_position is not None:
        return replace(h, position=h.reset_position)
    return replace(h, velocity=h.velocity.scale(-1))


_UPDATERS: dict[ActorKind, Callable[..., Actor]] = {
    ActorKind.PLAYER: _update_player,
    ActorKind.COLLECTIBLE: _update_collectible,
    ActorKind.HAZARD: _update_hazard,
}


def update_actor(actor: Actor, dt: float, world: World, keys: KeyState) -> Actor:
    return _UPDATERS[actor.kind](actor, dt, world, keys)


# ----- Collision response (actor overlapped the player) -----

def _collide_collectible(c: Collectible, world: World) -> World:
    actors = tuple(a for a in world.actors if a is not c)
    status = world.status
    if status is Status.IN_PROGRESS and not any(a.kind is ActorKind.COLLECTIBLE for a in actors):
        status = Status.WON
    return replace(world, actors=actors, status=status)


def _collide_hazard(h: Hazard, world: World) -> World:
    return replace(world, status=Status.LOST)


_COLLIDERS: dict[ActorKind, Callable[..., World]] = {
    ActorKind.COLLECTIBLE: _collide_collectible,
    ActorKind.HAZARD: _collide_hazard,
}


def collide_actor(actor: Actor, world: World) -> World:
    collide = _COLLIDERS.get(actor.kind)
    if collide is None:
        return world
    return collide(actor, world)
