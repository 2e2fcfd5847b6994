from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Sequence

from pyjump.app.config import GameConfig
from pyjump.app.game_loop import GameLoop
from pyjump.app.level_runner import LevelRunner
from pyjump.app.level_sequence import LevelSequence
from pyjump.domain.level import Level
from pyjump.ui.input_mapper import TkInputMapper
from pyjump.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, levels: Sequence[Level], config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.sequence = LevelSequence(levels)

        self.root = tk.Tk()
        self.root.title("pyjump")
        self.root.resizable(False, False)

        self.input = TkInputMapper(self.root)
        self.view = TkCanvasView(
            self.root,
            width=self.config.view_width,
            height=self.config.view_height,
            scale=self.config.scale,
        )

        self.runner = self._start_level()

        self.loop = GameLoop(
            root=self.root,
            frame_fn=self._frame,
            fps=self.config.fps,
            max_dt=self.config.max_frame_dt,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    # ---------- Level sequencing ----------

    def _start_level(self) -> LevelRunner:
        logger.info(
            "Starting level %d/%d (attempt %d)",
            self.sequence.index + 1, len(self.sequence), self.sequence.attempts,
        )
        runner = LevelRunner(self.sequence.current, self.config)
        self.view.show_level(runner.world.level)
        return runner

    # ---------- Game loop ----------

    def _frame(self, dt: float) -> bool:
        self.runner.advance(dt, self.input.sample())
        self.view.render_world(self.runner.world)

        if not self.runner.finished:
            return True

        self.sequence.report(self.runner.outcome)
        if self.sequence.done:
            self.root.after_idle(self._on_close)
            return False

        self.runner = self._start_level()
        return True

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
