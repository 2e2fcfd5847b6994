from __future__ import annotations

import pytest

from pyjump.domain.input_state import KeyState
from pyjump.domain.level import Level
from pyjump.domain.world import World


class FixedRandom:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng():
    """Deterministic random source: every coin starts with phase 0."""
    return FixedRandom(0.0)


@pytest.fixture
def no_keys():
    return KeyState()


@pytest.fixture
def make_world(rng):
    def _make(text: str) -> World:
        return World.initial(Level.parse(text), rng=rng)
    return _make
