from __future__ import annotations

import logging
from collections.abc import Sequence

from pyjump.domain.kinds import Status
from pyjump.domain.level import Level

logger = logging.getLogger(__name__)


class LevelSequence:
    """Walks through a list of levels: a win moves on, a loss retries the same level."""

    def __init__(self, levels: Sequence[Level]) -> None:
        if not levels:
            raise ValueError("LevelSequence needs at least one level")
        self._levels = tuple(levels)
        self.index = 0
        self.attempts = 1

    @property
    def done(self) -> bool:
        return self.index >= len(self._levels)

    @property
    def current(self) -> Level:
        if self.done:
            raise IndexError("All levels are complete")
        return self._levels[self.index]

    def __len__(self) -> int:
        return len(self._levels)

    def report(self, status: Status) -> None:
        if not status.terminal:
            raise ValueError(f"Cannot report a level that is still {status.value}")
        if self.done:
            raise IndexError("All levels are complete")

        if status is Status.WON:
            logger.info("Level %d won after %d attempt(s)", self.index + 1, self.attempts)
            self.index += 1
            self.attempts = 1
            if self.done:
                logger.info("All %d levels complete", len(self._levels))
        else:
            self.attempts += 1
            logger.info("Level %d lost, attempt %d", self.index + 1, self.attempts)
