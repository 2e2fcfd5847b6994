from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """Schedules frames on the Tk event loop and hands each one the elapsed time."""

    def __init__(
        self,
        *,
        root: tk.Tk,
        frame_fn: Callable[[float], bool],
        fps: int = 60,
        max_dt: float = 0.1,
    ) -> None:
        self._root = root
        self._frame_fn = frame_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_dt = max_dt

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = time.monotonic()
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        now = time.monotonic()
        dt = min(now - self._last_t, self._max_dt)
        self._last_t = now

        try:
            keep_going = self._frame_fn(dt)
        except Exception:
            # Fail fast rather than keep simulating a broken state.
            logger.exception("Frame failed, stopping loop")
            self.stop()
            raise

        if keep_going:
            self._schedule_next()
        else:
            self._running = False
