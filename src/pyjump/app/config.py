from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    scale: int = 20             # pixels per grid unit
    view_width: int = 600
    view_height: int = 450
    fps: int = 60
    max_frame_dt: float = 0.1   # seconds; larger frame gaps are clamped
    ending_duration: float = 1.0  # seconds of simulated time shown after a win/loss
