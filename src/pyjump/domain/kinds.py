from __future__ import annotations

from enum import Enum


class CellKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    LAVA = "lava"


class ActorKind(Enum):
    PLAYER = "player"
    COLLECTIBLE = "coin"
    HAZARD = "lava"


class Status(Enum):
    IN_PROGRESS = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def terminal(self) -> bool:
        return self is not Status.IN_PROGRESS
