from __future__ import annotations

import logging

from pyjump.app.config import GameConfig
from pyjump.domain.input_state import KeyState
from pyjump.domain.kinds import Status
from pyjump.domain.level import Level
from pyjump.domain.rng import RandomSource
from pyjump.domain.world import World

logger = logging.getLogger(__name__)


class LevelRunner:
    """
    Drives one attempt at a level.

    Keeps stepping after the world reaches a terminal status so the ending can be
    shown, and only reports the outcome once ``ending_duration`` of simulated
    time has passed.
    """

    def __init__(self, level: Level, config: GameConfig, *, rng: RandomSource | None = None) -> None:
        self.world = World.initial(level, rng=rng)
        self._max_dt = config.max_frame_dt
        self._ending = config.ending_duration
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def outcome(self) -> Status | None:
        return self.world.status if self._finished else None

    def advance(self, dt: float, keys: KeyState) -> None:
        if self._finished:
            return

        dt = min(dt, self._max_dt)
        was_terminal = self.world.status.terminal
        self.world = self.world.step(dt, keys)

        if not self.world.status.terminal:
            return
        if not was_terminal:
            logger.info("Level %s", self.world.status.value)

        self._ending -= dt
        if self._ending <= 0:
            self._finished = True
            logger.debug("Ending period over, outcome=%s", self.world.status.value)
