from __future__ import annotations

from dataclasses import dataclass

from pyjump.domain.exceptions import LevelFormatError
from pyjump.domain.kinds import ActorKind, CellKind
from pyjump.domain.vec import Vec


CELL_CHARS: dict[str, CellKind] = {
    ".": CellKind.EMPTY,
    "#": CellKind.WALL,
    "+": CellKind.LAVA,
}

SPAWN_CHARS: dict[str, ActorKind] = {
    "@": ActorKind.PLAYER,
    "o": ActorKind.COLLECTIBLE,
    "=": ActorKind.HAZARD,
    "|": ActorKind.HAZARD,
    "v": ActorKind.HAZARD,
}


@dataclass(frozen=True)
class ActorSpawn:
    kind: ActorKind
    position: Vec  # top-left corner of the marker cell
    char: str


@dataclass(frozen=True)
class Level:
    width: int
    height: int
    rows: tuple[tuple[CellKind, ...], ...]  # rows[y][x]
    spawns: tuple[ActorSpawn, ...]

    @classmethod
    def parse(cls, text: str) -> Level:
        """
        Build a level from its text grid, one character per cell.
        Spawn markers leave an empty cell behind.
        """
        lines = text.strip().splitlines()
        if not lines or not lines[0]:
            raise LevelFormatError("Level text is empty.")

        width = len(lines[0])
        rows: list[tuple[CellKind, ...]] = []
        spawns: list[ActorSpawn] = []

        for y, line in enumerate(lines):
            if len(line) != width:
                raise LevelFormatError(
                    f"Row {y} has length {len(line)}, expected {width}."
                )
            row: list[CellKind] = []
            for x, ch in enumerate(line):
                if ch in CELL_CHARS:
                    row.append(CELL_CHARS[ch])
                elif ch in SPAWN_CHARS:
                    spawns.append(ActorSpawn(kind=SPAWN_CHARS[ch], position=Vec(x, y), char=ch))
                    row.append(CellKind.EMPTY)
                else:
                    raise LevelFormatError(f"Unknown character {ch!r} at row {y}, column {x}.")
            rows.append(tuple(row))

        players = [s for s in spawns if s.kind is ActorKind.PLAYER]
        if len(players) > 1:
            raise LevelFormatError(f"Level has {len(players)} player spawns, expected at most one.")

        return cls(width=width, height=len(rows), rows=tuple(rows), spawns=tuple(spawns))

    def cell_at(self, x: int, y: int) -> CellKind:
        # Everything outside the grid behaves as wall.
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return CellKind.WALL
        return self.rows[y][x]
