from __future__ import annotations

from dataclasses import dataclass

from pyjump.domain.actors import Actor, Player, collide_actor, create_actor, update_actor
from pyjump.domain.collision import overlap, touches
from pyjump.domain.exceptions import MissingPlayerError
from pyjump.domain.input_state import KeyState
from pyjump.domain.kinds import ActorKind, CellKind, Status
from pyjump.domain.level import Level
from pyjump.domain.rng import RandomSource


@dataclass(frozen=True)
class World:
    level: Level                 # shared, read-only
    actors: tuple[Actor, ...]
    status: Status

    @classmethod
    def initial(cls, level: Level, *, rng: RandomSource | None = None) -> World:
        if not any(s.kind is ActorKind.PLAYER for s in level.spawns):
            raise MissingPlayerError("Level has no player spawn ('@').")
        actors = tuple(create_actor(s, rng) for s in level.spawns)
        return cls(level=level, actors=actors, status=Status.IN_PROGRESS)

    @property
    def player(self) -> Player:
        for actor in self.actors:
            if actor.kind is ActorKind.PLAYER:
                return actor
        raise LookupError("World has no player.")

    def touches(self, actor: Actor, kind: CellKind) -> bool:
        return touches(self.level, actor, kind)

    def step(self, dt: float, keys: KeyState) -> World:
        actors = tuple(update_actor(a, dt, self, keys) for a in self.actors)
        world = World(level=self.level, actors=actors, status=self.status)

        # Finished worlds keep animating but never change status again.
        if world.status.terminal:
            return world

        player = world.player
        if world.touches(player, CellKind.LAVA):
            return World(level=self.level, actors=actors, status=Status.LOST)

        for actor in actors:
            if actor.kind is not ActorKind.PLAYER and overlap(actor, player):
                world = collide_actor(actor, world)
        return world
