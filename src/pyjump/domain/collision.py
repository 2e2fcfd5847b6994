from __future__ import annotations

import math
from typing import Protocol

from pyjump.domain.kinds import CellKind
from pyjump.domain.level import Level
from pyjump.domain.vec import Vec


class Box(Protocol):
    @property
    def position(self) -> Vec: ...

    @property
    def size(self) -> Vec: ...


def touches(level: Level, box: Box, kind: CellKind) -> bool:
    """
    True if any grid cell under the box is of ``kind``.

    The covered range runs from floor(min) to ceil(max) on each axis, so even a
    sliver of overlap with a cell counts. Cells outside the grid are walls.
    """
    pos, size = box.position, box.size
    x_start, x_end = math.floor(pos.x), math.ceil(pos.x + size.x)
    y_start, y_end = math.floor(pos.y), math.ceil(pos.y + size.y)
    for y in range(y_start, y_end):
        for x in range(x_start, x_end):
            if level.cell_at(x, y) is kind:
                return True
    return False


def overlap(a: Box, b: Box) -> bool:
    # Strict: boxes that only share an edge do not overlap.
    ax1, ay1 = a.position.x, a.position.y
    bx1, by1 = b.position.x, b.position.y
    return (
        ax1 < bx1 + b.size.x and bx1 < ax1 + a.size.x
        and ay1 < by1 + b.size.y and by1 < ay1 + a.size.y
    )
