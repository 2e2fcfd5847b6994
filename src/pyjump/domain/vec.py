from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    x: float
    y: float

    def add(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def scale(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor)
