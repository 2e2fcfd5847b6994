from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyState:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    @classmethod
    def from_mapping(cls, keys: Mapping[str, bool]) -> KeyState:
        # Unset keys read as released.
        return cls(
            left=bool(keys.get("left", False)),
            right=bool(keys.get("right", False)),
            up=bool(keys.get("up", False)),
            down=bool(keys.get("down", False)),
        )
