from __future__ import annotations

import math
from typing import Protocol


class RandomSource(Protocol):
    """Anything with a ``random()`` in [0.0, 1.0): the ``random`` module, ``random.Random``, a test stub."""

    def random(self) -> float:
        ...


def random_phase(rng: RandomSource) -> float:
    """Uniform angle in [0, 2*pi), used to desynchronise coin wobble."""
    return rng.random() * math.tau
